from .background import BackgroundSpec, resolve_background
from .batch_orchestrator import BatchResizeOrchestrator
from .codec import PillowCodec, SourceImageInfo
from .compositor import Compositor
from .formats import OutputFormat, select_output_format
from .naming import FilenameGenerator
from .planner import FitPlan, ResizeTarget, plan_fit
from .schemas import BatchResult, SourceImage, TransformResult
from .transformer import CanvasTransformer

__all__ = [
    "BackgroundSpec",
    "BatchResizeOrchestrator",
    "BatchResult",
    "CanvasTransformer",
    "Compositor",
    "FilenameGenerator",
    "FitPlan",
    "OutputFormat",
    "PillowCodec",
    "ResizeTarget",
    "SourceImage",
    "SourceImageInfo",
    "TransformResult",
    "plan_fit",
    "resolve_background",
    "select_output_format",
]
