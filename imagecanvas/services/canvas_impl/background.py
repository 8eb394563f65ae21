import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

TRANSPARENT_KEYWORD = "transparent"
WHITE_KEYWORD = "white"

_HEX_PATTERN = re.compile(r"^[0-9A-Fa-f]{6}$")
_RGB_PATTERN = re.compile(r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$", re.IGNORECASE)


@dataclass(frozen=True)
class BackgroundSpec:
    """Canvas fill color. Alpha is either fully opaque (1.0) or fully transparent (0.0).

    ``is_fallback`` marks a spec produced because the caller's token could not be
    parsed, so an explicit white request can be told apart from ignored input.
    """

    red: int
    green: int
    blue: int
    alpha: float = 1.0
    is_fallback: bool = False

    @property
    def is_transparent(self) -> bool:
        return self.alpha == 0

    def as_rgba(self) -> tuple[int, int, int, int]:
        """Return the fill as an 8-bit RGBA tuple for the codec."""
        return (self.red, self.green, self.blue, 255 if self.alpha else 0)

    def as_rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


OPAQUE_WHITE = BackgroundSpec(255, 255, 255, 1.0)
TRANSPARENT = BackgroundSpec(0, 0, 0, 0.0)


def _parse_hex(token: str) -> BackgroundSpec | None:
    hex_value = token[1:] if token.startswith("#") else token
    if not _HEX_PATTERN.match(hex_value):
        return None
    red, green, blue = (int(hex_value[i : i + 2], 16) for i in (0, 2, 4))
    return BackgroundSpec(red, green, blue, 1.0)


def _parse_rgb(token: str) -> BackgroundSpec | None:
    match = _RGB_PATTERN.match(token)
    if not match:
        return None
    red, green, blue = (int(component) for component in match.groups())
    if max(red, green, blue) > 255:
        return None
    return BackgroundSpec(red, green, blue, 1.0)


def resolve_background(token: str | None) -> BackgroundSpec:
    """Turn a caller-supplied background token into a concrete fill.

    Accepted forms, case-insensitive where it matters:

    * absent or empty -> opaque white
    * ``transparent`` -> fully transparent black
    * ``white`` -> opaque white
    * ``RRGGBB`` or ``#RRGGBB`` -> opaque color
    * ``rgb(r, g, b)`` with components 0-255 -> opaque color

    Any other token is not rejected: it resolves to opaque white with
    ``is_fallback=True``.

    Args:
        token: The raw ``bg`` parameter, possibly None.

    Returns:
        An immutable BackgroundSpec.
    """
    if not token:
        return OPAQUE_WHITE

    candidate = token.strip()
    lowered = candidate.lower()
    if lowered == TRANSPARENT_KEYWORD:
        return TRANSPARENT
    if lowered == WHITE_KEYWORD:
        return OPAQUE_WHITE

    spec = _parse_hex(candidate) or _parse_rgb(candidate)
    if spec is not None:
        return spec

    logger.warning(f"Unrecognized background token {token!r}; falling back to opaque white.")
    return BackgroundSpec(255, 255, 255, 1.0, is_fallback=True)
