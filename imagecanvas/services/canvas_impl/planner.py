import math
from dataclasses import dataclass

from imagecanvas.services.exceptions import ValidationError

DEFAULT_BOX_SIZE = 3000


@dataclass(frozen=True)
class ResizeTarget:
    """Side length of the square output canvas."""

    box_size: int = DEFAULT_BOX_SIZE

    def __post_init__(self):
        if self.box_size < 1:
            # frozen dataclass: clamp through object.__setattr__
            object.__setattr__(self, "box_size", 1)

    @classmethod
    def from_param(cls, value: str | int | None, default: int = DEFAULT_BOX_SIZE) -> "ResizeTarget":
        """Build a target from a raw ``size`` parameter.

        Absent or blank values use ``default``; values below 1 clamp to 1.

        Raises:
            ValidationError: If the value is not an integer.
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls(default)
        try:
            box_size = int(value)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid size parameter: {value!r}", details={"size": value}) from e
        return cls(box_size)

    @property
    def label(self) -> str:
        return f"{self.box_size}x{self.box_size}"


@dataclass(frozen=True)
class FitPlan:
    """Placement of a scaled source inside the square canvas."""

    scaled_width: int
    scaled_height: int
    offset_x: int
    offset_y: int
    box_size: int

    @property
    def canvas_size(self) -> tuple[int, int]:
        return (self.box_size, self.box_size)

    @property
    def scaled_size(self) -> tuple[int, int]:
        return (self.scaled_width, self.scaled_height)

    @property
    def offset(self) -> tuple[int, int]:
        return (self.offset_x, self.offset_y)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _clamp(value: int, box_size: int) -> int:
    return max(1, min(box_size, value))


def plan_fit(width: int, height: int, target: ResizeTarget) -> FitPlan:
    """Compute a "contain" fit of a ``width x height`` source in the target canvas.

    The source is scaled by ``min(box / width, box / height)`` so that it fits
    entirely inside the canvas with its aspect ratio preserved, then centered.
    Sources smaller than the box are scaled up.

    Args:
        width: Source width in pixels.
        height: Source height in pixels.
        target: The square canvas to fit into.

    Returns:
        The FitPlan for the source.

    Raises:
        ValidationError: If either source dimension is not positive.
    """
    if width < 1 or height < 1:
        raise ValidationError(f"Source dimensions must be positive, got {width}x{height}.")

    box_size = target.box_size
    scale_factor = min(box_size / width, box_size / height)

    scaled_width = _clamp(_round_half_up(width * scale_factor), box_size)
    scaled_height = _clamp(_round_half_up(height * scale_factor), box_size)

    return FitPlan(
        scaled_width=scaled_width,
        scaled_height=scaled_height,
        offset_x=(box_size - scaled_width) // 2,
        offset_y=(box_size - scaled_height) // 2,
        box_size=box_size,
    )
