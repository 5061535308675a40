"""Letterbox transform from field units to screen pixels."""

from dataclasses import dataclass
from typing import Tuple

from models import Vector2D, Resolution


@dataclass(frozen=True)
class Viewport:
    """Uniform scale plus centring offset.

    The whole field is always visible; the spare space on the longer axis
    is split evenly on both sides.
    """
    scale: float
    offset_x: float
    offset_y: float

    @classmethod
    def fit(cls, screen_width: int, screen_height: int, field: Resolution) -> 'Viewport':
        """Largest viewport that fits the field inside the screen."""
        scale = min(screen_width / field.width, screen_height / field.height)
        offset_x = (screen_width - field.width * scale) / 2
        offset_y = (screen_height - field.height * scale) / 2
        return cls(scale, offset_x, offset_y)

    def to_screen(self, point: Vector2D) -> Tuple[int, int]:
        """Field point to integer pixel coordinates."""
        return (
            int(round(point.x * self.scale + self.offset_x)),
            int(round(point.y * self.scale + self.offset_y)),
        )

    def length(self, value: float, minimum: int = 1) -> int:
        """Field distance to pixels, never below `minimum`."""
        return max(minimum, int(round(value * self.scale)))
