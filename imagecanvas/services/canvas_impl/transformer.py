import logging

from imagecanvas.services.canvas_impl.background import BackgroundSpec
from imagecanvas.services.canvas_impl.codec import PillowCodec
from imagecanvas.services.canvas_impl.compositor import Compositor
from imagecanvas.services.canvas_impl.formats import select_output_format
from imagecanvas.services.canvas_impl.naming import FilenameGenerator
from imagecanvas.services.canvas_impl.planner import ResizeTarget, plan_fit
from imagecanvas.services.canvas_impl.schemas import SourceImage, TransformResult

logger = logging.getLogger(__name__)


class CanvasTransformer:
    """Normalizes one image onto a square canvas of the requested size and background."""

    def __init__(self, codec: PillowCodec, compositor: Compositor | None = None, filename_generator: FilenameGenerator | None = None):
        """Initialize the transformer with its collaborators.

        Args:
            codec: Codec used to probe the source.
            compositor: Compositor producing the encoded canvas. Defaults to one
                built on ``codec``.
            filename_generator: Produces output names. Defaults to a
                timestamp + random token generator.
        """
        self.codec = codec
        self.compositor = compositor or Compositor(codec)
        self.filename_generator = filename_generator or FilenameGenerator()

    def transform(self, source: SourceImage, background: BackgroundSpec, target: ResizeTarget, index: int = 0) -> TransformResult:
        """
        Probes the source, picks the output format, plans the contain fit and
        composites the source onto the canvas.

        Args:
            source: The raw input image.
            background: Shared, already-resolved canvas fill.
            target: Shared canvas size.
            index: Position of the item in its batch (0 for single requests).

        Returns:
            A successful TransformResult.

        Raises:
            DecodeError: If the source is not a decodable image.
            EncodeError: If the canvas cannot be encoded.
        """
        info = self.codec.probe(source.content, source.declared_mime_type)
        output_format = select_output_format(background, info)
        plan = plan_fit(info.width, info.height, target)
        logger.info(f"Item {index}: {source.name or 'unnamed'} {info.dimensions_label} -> {target.label} {output_format.value}")

        encoded = self.compositor.composite(source.content, plan, background, output_format)
        filename = self.filename_generator.generate(source.name, output_format, index)

        return TransformResult(
            index=index,
            success=True,
            filename=filename,
            encoded_bytes=encoded,
            output_format=output_format,
            original_dimensions=(info.width, info.height),
            original_name=source.name,
            box_size=target.box_size,
        )
