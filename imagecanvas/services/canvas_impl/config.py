from dataclasses import dataclass

from django.conf import settings

from imagecanvas.services.exceptions import ConfigurationError

from .planner import DEFAULT_BOX_SIZE

DEFAULT_MAX_BATCH_SIZE = 5
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class CanvasConfig:
    """Limits and defaults for the canvas pipeline, read from Django settings."""

    default_box_size: int = DEFAULT_BOX_SIZE
    max_batch_size: int = DEFAULT_MAX_BATCH_SIZE
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES

    def __post_init__(self):
        if self.default_box_size < 1:
            raise ConfigurationError("Default canvas size must be at least 1.")
        if self.max_batch_size < 1:
            raise ConfigurationError("Maximum batch size must be at least 1.")
        if self.max_upload_bytes < 1:
            raise ConfigurationError("Maximum upload size must be positive.")

    @classmethod
    def from_settings(cls) -> "CanvasConfig":
        return cls(
            default_box_size=int(getattr(settings, "IMAGECANVAS_DEFAULT_SIZE", DEFAULT_BOX_SIZE)),
            max_batch_size=int(getattr(settings, "IMAGECANVAS_MAX_BATCH_SIZE", DEFAULT_MAX_BATCH_SIZE)),
            max_upload_bytes=int(getattr(settings, "IMAGECANVAS_MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES)),
        )
