import logging
from dataclasses import dataclass, field
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from imagecanvas.services.canvas_impl.background import BackgroundSpec
from imagecanvas.services.canvas_impl.formats import OutputFormat
from imagecanvas.services.canvas_impl.planner import FitPlan
from imagecanvas.services.exceptions import DecodeError, EncodeError

logger = logging.getLogger(__name__)

_ALPHA_MODES = ("RGBA", "LA", "PA", "RGBa", "La")


@dataclass(frozen=True)
class SourceImageInfo:
    """Metadata of a decodable source image."""

    width: int
    height: int
    has_alpha: bool
    declared_mime_type: str = ""
    raw_bytes: bytes = field(default=b"", repr=False)

    @property
    def dimensions_label(self) -> str:
        return f"{self.width}x{self.height}"


def _has_alpha(img: Image.Image) -> bool:
    if img.mode in _ALPHA_MODES:
        return True
    return "transparency" in img.info


class PillowCodec:
    """Decode, resample and encode images with Pillow."""

    def __init__(self, jpeg_quality: int = 90, png_compress_level: int = 9, resample: Image.Resampling = Image.Resampling.LANCZOS):
        self.jpeg_quality = jpeg_quality
        self.png_compress_level = png_compress_level
        self.resample = resample

    def probe(self, image_bytes: bytes, declared_mime_type: str = "") -> SourceImageInfo:
        """Read dimensions and alpha information without decoding the full raster.

        Raises:
            DecodeError: If the bytes are not an image Pillow can identify.
        """
        if not image_bytes:
            raise DecodeError("Empty image payload.")
        try:
            with Image.open(BytesIO(image_bytes)) as img:
                width, height = img.size
                has_alpha = _has_alpha(img)
        except (UnidentifiedImageError, Image.DecompressionBombError) as e:
            raise DecodeError(f"Input is not a decodable image: {e}") from e
        except OSError as e:
            raise DecodeError(f"Failed to read image header: {e}") from e

        logger.debug(f"Probed image {width}x{height} (alpha={has_alpha}, declared={declared_mime_type!r})")
        return SourceImageInfo(width=width, height=height, has_alpha=has_alpha, declared_mime_type=declared_mime_type, raw_bytes=image_bytes)

    def resample_and_composite(self, image_bytes: bytes, plan: FitPlan, background: BackgroundSpec) -> Image.Image:
        """Scale the source to the plan and place it on a background-filled canvas.

        The source's own alpha channel is kept, so transparent regions of the
        source stay transparent on the canvas.

        Raises:
            DecodeError: If the source cannot be decoded.
        """
        try:
            with Image.open(BytesIO(image_bytes)) as img:
                source = img.convert("RGBA")
        except (UnidentifiedImageError, Image.DecompressionBombError) as e:
            raise DecodeError(f"Input is not a decodable image: {e}") from e
        except OSError as e:
            raise DecodeError(f"Failed to decode image: {e}") from e

        if source.size != plan.scaled_size:
            source = source.resize(plan.scaled_size, self.resample)

        canvas = Image.new("RGBA", plan.canvas_size, background.as_rgba())
        canvas.paste(source, plan.offset)
        return canvas

    def encode(self, raster: Image.Image, output_format: OutputFormat) -> bytes:
        """Encode a raster as JPEG (quality 90) or PNG (maximum compression).

        Raises:
            EncodeError: If Pillow cannot write the requested format.
        """
        output_buffer = BytesIO()
        try:
            if output_format is OutputFormat.JPEG:
                raster.convert("RGB").save(output_buffer, format=output_format.pillow_format, quality=self.jpeg_quality)
            else:
                raster.save(output_buffer, format=output_format.pillow_format, compress_level=self.png_compress_level)
        except (OSError, ValueError, KeyError) as e:
            raise EncodeError(f"Failed to encode image as {output_format.value}: {e}") from e
        return output_buffer.getvalue()
