import re
import secrets
import time
from pathlib import PurePosixPath, PureWindowsPath

from imagecanvas.services.canvas_impl.formats import OutputFormat

DEFAULT_BASE_NAME = "image"

_UNSAFE_CHARS = re.compile(r"[()\[\]+\s\-.]")


class FilenameGenerator:
    """Derives a filesystem-safe, per-item unique output name from the source name."""

    def __init__(self, clock=time.time, token_factory=None):
        self.clock = clock
        self.token_factory = token_factory or (lambda: secrets.token_hex(3))

    @staticmethod
    def sanitize(original_name: str | None) -> str:
        """Strip directories and extension and replace ``()[]+``, whitespace, ``-`` and ``.`` with ``_``."""
        if not original_name:
            return DEFAULT_BASE_NAME
        # PureWindowsPath splits on both separators; uploads from Windows clients may carry backslashes.
        stem = PurePosixPath(PureWindowsPath(original_name).name).stem
        sanitized = _UNSAFE_CHARS.sub("_", stem)
        return sanitized or DEFAULT_BASE_NAME

    def generate(self, original_name: str | None, output_format: OutputFormat, index: int = 0) -> str:
        """Build ``<base>_resized_<millis>_<index>_<random>.<ext>``.

        The index and random token keep names distinct when several items in
        the same batch share a base name and finish in the same millisecond.
        """
        timestamp = int(self.clock() * 1000)
        return f"{self.sanitize(original_name)}_resized_{timestamp}_{index}_{self.token_factory()}.{output_format.extension}"
