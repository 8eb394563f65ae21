from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from imagecanvas.services.canvas_impl.background import BackgroundSpec
    from imagecanvas.services.canvas_impl.codec import SourceImageInfo


class OutputFormat(enum.Enum):
    """Output encodings: opaque raster (JPEG) and alpha-capable raster (PNG)."""

    JPEG = "jpeg"
    PNG = "png"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def content_type(self) -> str:
        return f"image/{self.value}"

    @property
    def pillow_format(self) -> str:
        return self.name

    @property
    def supports_alpha(self) -> bool:
        return self is OutputFormat.PNG


def select_output_format(background: BackgroundSpec, info: SourceImageInfo) -> OutputFormat:
    """Pick the output encoding for one image.

    Rules, first match wins:

    1. A transparent background needs an alpha channel -> PNG.
    2. A source that carries alpha keeps it -> PNG.
    3. A source declared as PNG stays PNG.
    4. Everything else -> JPEG, the smaller opaque encoding.
    """
    if background.is_transparent:
        return OutputFormat.PNG
    if info.has_alpha:
        return OutputFormat.PNG
    if "png" in (info.declared_mime_type or "").lower():
        return OutputFormat.PNG
    return OutputFormat.JPEG
