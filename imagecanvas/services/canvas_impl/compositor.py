import logging

from imagecanvas.services.canvas_impl.background import BackgroundSpec
from imagecanvas.services.canvas_impl.codec import PillowCodec
from imagecanvas.services.canvas_impl.formats import OutputFormat
from imagecanvas.services.canvas_impl.planner import FitPlan

logger = logging.getLogger(__name__)


class Compositor:
    """Produces the final encoded canvas for a single image."""

    def __init__(self, codec: PillowCodec):
        """Initialize with the codec that does the pixel work.

        Args:
            codec: Decoder/resampler/encoder used for every call.
        """
        self.codec = codec

    def composite(self, image_bytes: bytes, plan: FitPlan, background: BackgroundSpec, output_format: OutputFormat) -> bytes:
        """Resample the source, paste it on the padded canvas and encode it.

        Args:
            image_bytes: Raw source image bytes.
            plan: Scaled size and offsets inside the canvas.
            background: Fill for the padded area.
            output_format: Target encoding.

        Returns:
            The encoded canvas.

        Raises:
            DecodeError: If the source cannot be decoded.
            EncodeError: If the canvas cannot be encoded.
        """
        logger.debug(f"Compositing {plan.scaled_width}x{plan.scaled_height} at {plan.offset} on a {plan.box_size}px canvas as {output_format.value}.")
        raster = self.codec.resample_and_composite(image_bytes, plan, background)
        try:
            return self.codec.encode(raster, output_format)
        finally:
            raster.close()
