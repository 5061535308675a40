"""Artifact Clash physics and collision detection."""

from .motion import clamp, clamp_to_field, desired_direction
from .collision import (
    bounce_off_walls,
    push_from_robots,
    in_intake_range,
    check_goal,
)

__all__ = [
    'clamp',
    'clamp_to_field',
    'desired_direction',
    'bounce_off_walls',
    'push_from_robots',
    'in_intake_range',
    'check_goal',
]
