"""
Shared primitive data types for the arena games.

This module provides the basic geometric types used throughout the
codebase: the immutable 2D vector used for every position and velocity,
and display resolutions.
"""

import math

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Vector2D(BaseModel):
    """Immutable 2D vector for positions, velocities, and directions.

    Every operation returns a new vector; nothing mutates in place, so a
    direction can be reused for several computations without cloning.

    Attributes:
        x: X component (field units, grows to the right)
        y: Y component (field units, grows downward)

    Examples:
        >>> pos = Vector2D(x=100.0, y=200.0)
        >>> vel = Vector2D(x=3.0, y=4.0)
        >>> (pos + vel).x
        103.0
        >>> vel.magnitude()
        5.0
        >>> Vector2D(x=0.0, y=0.0).normalize() == Vector2D.zero()
        True
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    @classmethod
    def zero(cls) -> 'Vector2D':
        """The zero vector."""
        return cls(x=0.0, y=0.0)

    @classmethod
    def from_angle(cls, radians: float, length: float = 1.0) -> 'Vector2D':
        """Vector of the given length pointing along an angle.

        Args:
            radians: Direction (0 = +x, pi/2 = +y)
            length: Magnitude of the result
        """
        return cls(x=math.cos(radians) * length, y=math.sin(radians) * length)

    def add(self, other: 'Vector2D') -> 'Vector2D':
        """Component-wise sum."""
        return Vector2D(x=self.x + other.x, y=self.y + other.y)

    def sub(self, other: 'Vector2D') -> 'Vector2D':
        """Component-wise difference."""
        return Vector2D(x=self.x - other.x, y=self.y - other.y)

    def scale(self, factor: float) -> 'Vector2D':
        """Multiply both components by a scalar."""
        return Vector2D(x=self.x * factor, y=self.y * factor)

    def __add__(self, other: 'Vector2D') -> 'Vector2D':
        return self.add(other)

    def __sub__(self, other: 'Vector2D') -> 'Vector2D':
        return self.sub(other)

    def __mul__(self, factor: float) -> 'Vector2D':
        return self.scale(factor)

    def __rmul__(self, factor: float) -> 'Vector2D':
        return self.scale(factor)

    def __neg__(self) -> 'Vector2D':
        return self.scale(-1.0)

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> 'Vector2D':
        """Unit vector in the same direction.

        The zero vector normalizes to itself instead of dividing by zero.
        """
        m = self.magnitude()
        if m > 0:
            return self.scale(1.0 / m)
        return self

    def copy(self) -> 'Vector2D':
        """Independent clone (equal value, distinct object)."""
        return Vector2D(x=self.x, y=self.y)

    def distance_to(self, other: 'Vector2D') -> float:
        """Euclidean distance to another vector."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def angle(self) -> float:
        """Direction in radians, atan2(y, x)."""
        return math.atan2(self.y, self.x)

    def as_tuple(self) -> tuple:
        """(x, y) tuple, handy for pygame calls."""
        return (self.x, self.y)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Vector2D(x={self.x:.2f}, y={self.y:.2f})"


# Positions read better as points; same type.
Point2D = Vector2D


class Resolution(BaseModel):
    """Display or field resolution.

    Attributes:
        width: Width in pixels or field units (must be positive)
        height: Height in pixels or field units (must be positive)

    Examples:
        >>> field = Resolution(width=2000, height=1400)
        >>> field.aspect_ratio
        1.4285714285714286
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"
