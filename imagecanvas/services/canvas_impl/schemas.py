"""Value objects passed into and returned from the canvas pipeline."""

import base64
from dataclasses import dataclass, field
from typing import Any

from imagecanvas.services.canvas_impl.formats import OutputFormat


@dataclass(frozen=True)
class SourceImage:
    """One caller-supplied input: raw bytes plus the name and MIME type it arrived with."""

    content: bytes = field(repr=False)
    name: str | None = None
    declared_mime_type: str = ""


@dataclass(frozen=True)
class TransformResult:
    """Outcome of processing one image. Exactly one of the success or error fields is populated."""

    index: int
    success: bool
    filename: str | None = None
    encoded_bytes: bytes | None = field(default=None, repr=False)
    output_format: OutputFormat | None = None
    original_dimensions: tuple[int, int] | None = None
    original_name: str | None = None
    box_size: int | None = None
    error_message: str | None = None

    @classmethod
    def failure(cls, index: int, error_message: str, original_name: str | None = None) -> "TransformResult":
        return cls(index=index, success=False, error_message=error_message, original_name=original_name)

    @property
    def content_type(self) -> str | None:
        return self.output_format.content_type if self.output_format else None

    def as_data_url(self) -> str:
        """Return the encoded bytes as a ``data:image/<fmt>;base64,...`` URL."""
        if not self.success or self.encoded_bytes is None or self.output_format is None:
            raise ValueError("Only successful results carry encoded bytes.")
        encoded = base64.b64encode(self.encoded_bytes).decode("ascii")
        return f"data:{self.output_format.content_type};base64,{encoded}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the batch response body."""
        if not self.success:
            return {
                "success": False,
                "error": self.error_message,
                "originalName": self.original_name,
                "index": self.index,
            }
        assert self.output_format is not None and self.original_dimensions is not None
        return {
            "success": True,
            "filename": self.filename,
            "base64": self.as_data_url(),
            "size": f"{self.box_size}x{self.box_size}",
            "format": self.output_format.value,
            "originalSize": f"{self.original_dimensions[0]}x{self.original_dimensions[1]}",
            "originalName": self.original_name,
            "index": self.index,
        }


@dataclass(frozen=True)
class BatchResult:
    """Aggregated batch outcome; ``items`` are in input order."""

    items: tuple[TransformResult, ...]

    @property
    def total_count(self) -> int:
        return len(self.items)

    @property
    def success_count(self) -> int:
        return sum(1 for item in self.items if item.success)

    @property
    def failure_count(self) -> int:
        return self.total_count - self.success_count

    @property
    def successes(self) -> list[TransformResult]:
        return [item for item in self.items if item.success]

    @property
    def failures(self) -> list[TransformResult]:
        return [item for item in self.items if not item.success]
