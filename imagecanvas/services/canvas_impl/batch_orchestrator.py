import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from imagecanvas.services.canvas_impl.background import BackgroundSpec, resolve_background
from imagecanvas.services.canvas_impl.config import DEFAULT_MAX_BATCH_SIZE
from imagecanvas.services.canvas_impl.planner import ResizeTarget
from imagecanvas.services.canvas_impl.schemas import BatchResult, SourceImage, TransformResult
from imagecanvas.services.canvas_impl.transformer import CanvasTransformer
from imagecanvas.services.exceptions import ServiceError, ValidationError

logger = logging.getLogger(__name__)


class BatchResizeOrchestrator:
    """Runs the canvas pipeline concurrently over a bounded batch of images."""

    def __init__(self, transformer: CanvasTransformer, max_batch_size: int = DEFAULT_MAX_BATCH_SIZE):
        """Initialize with the per-item transformer.

        Args:
            transformer: Transformer applied to every item.
            max_batch_size: Largest batch accepted; also the worker pool ceiling.
        """
        self.transformer = transformer
        self.max_batch_size = max_batch_size

    def validate(self, sources: Sequence[SourceImage]) -> None:
        """Reject empty or oversized batches before any image work starts.

        Raises:
            ValidationError: If the batch has no items or more than ``max_batch_size``.
        """
        if not sources:
            raise ValidationError("At least one image file must be provided")
        if len(sources) > self.max_batch_size:
            raise ValidationError(f"Maximum {self.max_batch_size} images allowed per request", details={"count": len(sources)})

    def _process_item(self, index: int, source: SourceImage, background: BackgroundSpec, target: ResizeTarget) -> TransformResult:
        try:
            return self.transformer.transform(source, background, target, index=index)
        except ServiceError as e:
            logger.warning(f"Item {index} ({source.name or 'unnamed'}) failed: {e}")
            return TransformResult.failure(index, e.message, original_name=source.name)
        except Exception as e:
            logger.error(f"Unexpected error processing item {index} ({source.name or 'unnamed'}): {e}", exc_info=True)
            return TransformResult.failure(index, str(e), original_name=source.name)

    def run(self, sources: Sequence[SourceImage], background: BackgroundSpec | str | None, target: ResizeTarget) -> BatchResult:
        """
        Processes every item concurrently and waits for all of them to finish.

        A failing item never aborts the batch: it is recorded as a failed
        TransformResult at its own index.

        Args:
            sources: Inputs, in caller order.
            background: A resolved BackgroundSpec or a raw ``bg`` token, resolved
                once and shared by all items.
            target: Canvas size shared by all items.

        Returns:
            BatchResult whose items follow input order.

        Raises:
            ValidationError: If the batch size is out of bounds.
        """
        self.validate(sources)
        if not isinstance(background, BackgroundSpec):
            background = resolve_background(background)

        logger.info(f"Starting batch of {len(sources)} images at {target.label}.")
        with ThreadPoolExecutor(max_workers=len(sources), thread_name_prefix="canvas-batch") as executor:
            futures = [executor.submit(self._process_item, index, source, background, target) for index, source in enumerate(sources)]
            items = tuple(future.result() for future in futures)

        result = BatchResult(items=items)
        logger.info(f"Batch finished: {result.success_count} succeeded, {result.failure_count} failed.")
        return result
