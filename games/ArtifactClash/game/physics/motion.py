"""Motion helpers for robots: steering input and wall containment."""

from typing import Mapping, TYPE_CHECKING

from models import Vector2D

if TYPE_CHECKING:
    from ..entities.robot import Controls


def desired_direction(keys: Mapping[str, bool], controls: 'Controls') -> Vector2D:
    """Unit vector the driver is asking for.

    Opposite keys cancel. Diagonals are normalized so they are no faster
    than straight moves. No key (or cancelled keys) gives the zero vector.

    Args:
        keys: Logical key id -> pressed
        controls: Key ids for this robot

    Returns:
        Unit vector or zero vector
    """
    dx = 0.0
    dy = 0.0
    if keys.get(controls.up, False):
        dy -= 1.0
    if keys.get(controls.down, False):
        dy += 1.0
    if keys.get(controls.left, False):
        dx -= 1.0
    if keys.get(controls.right, False):
        dx += 1.0
    return Vector2D(x=dx, y=dy).normalize()


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds."""
    return lo if value < lo else hi if value > hi else value


def clamp_to_field(
    position: Vector2D,
    margin: float,
    width: float,
    height: float,
) -> Vector2D:
    """Keep a point at least `margin` away from every wall.

    Args:
        position: Point to contain
        margin: Minimum distance from each wall
        width: Field width
        height: Field height

    Returns:
        Contained point (the same value when already inside)
    """
    x = clamp(position.x, margin, width - margin)
    y = clamp(position.y, margin, height - margin)
    if x == position.x and y == position.y:
        return position
    return Vector2D(x=x, y=y)
