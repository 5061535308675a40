"""Robot entity with momentum-based driving.

Robots accelerate toward the pressed direction, coast under friction and
stop hard at the walls. Heading follows the velocity, not the keys, so it
lags the stick by a frame of friction.
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from models import Vector2D
from models.arena import Team

from ...config import (
    ACTION_COOLDOWN_FRAMES,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    MAX_INVENTORY,
    ROBOT_ACCELERATION,
    ROBOT_FRICTION,
    ROBOT_HALF_SIZE,
    START_POSES,
)
from ..physics.motion import clamp_to_field, desired_direction
from .artifact import Artifact


@dataclass(frozen=True)
class Controls:
    """Logical key ids that drive one robot."""
    up: str
    down: str
    left: str
    right: str
    action: str


DEFAULT_CONTROLS: Dict[Team, Controls] = {
    Team.RED: Controls(up='w', down='s', left='a', right='d', action='f'),
    Team.BLUE: Controls(up='up', down='down', left='left', right='right', action='m'),
}

# Global start/restart key
START_KEY = 'space'


class Robot:
    """One team's robot: position, momentum, heading and an artifact queue."""

    def __init__(
        self,
        team: Team,
        position: Vector2D,
        heading: float = 0.0,
        controls: Optional[Controls] = None,
    ):
        """Initialize robot.

        Args:
            team: Owning team
            position: Centre in field units
            heading: Facing direction in radians
            controls: Key ids (defaults to the team's standard layout)
        """
        self.team = team
        self.position = position
        self.velocity = Vector2D.zero()
        self.heading = heading
        self.controls = controls or DEFAULT_CONTROLS[team]
        self.inventory: List[Artifact] = []
        self.cooldown = 0

    @classmethod
    def at_start(cls, team: Team) -> 'Robot':
        """Robot placed at its team's starting pose."""
        (x, y), heading = START_POSES[team]
        return cls(team, Vector2D(x=x, y=y), heading)

    @property
    def facing(self) -> Vector2D:
        """Unit vector along the heading."""
        return Vector2D.from_angle(self.heading)

    @property
    def is_full(self) -> bool:
        return len(self.inventory) >= MAX_INVENTORY

    def drive(self, keys: Mapping[str, bool]) -> None:
        """Apply one frame of steering, friction, motion and wall containment."""
        direction = desired_direction(keys, self.controls)

        if direction.magnitude() > 0:
            self.velocity = self.velocity + direction * ROBOT_ACCELERATION
            self.heading = self.velocity.angle()

        self.velocity = self.velocity * ROBOT_FRICTION
        self.position = clamp_to_field(
            self.position + self.velocity,
            ROBOT_HALF_SIZE,
            FIELD_WIDTH,
            FIELD_HEIGHT,
        )

    def action_ready(self, keys: Mapping[str, bool]) -> bool:
        """Action key is down and the cooldown has run out."""
        return bool(keys.get(self.controls.action, False)) and self.cooldown <= 0

    def start_cooldown(self) -> None:
        self.cooldown = ACTION_COOLDOWN_FRAMES

    def tick_cooldown(self) -> None:
        """Count the cooldown down by one frame, never below zero."""
        if self.cooldown > 0:
            self.cooldown -= 1

    def take(self, artifact: Artifact) -> bool:
        """Store a free artifact at the back of the queue.

        Returns:
            False when the inventory is already full
        """
        if self.is_full:
            return False
        artifact.pick_up(self.team)
        self.inventory.append(artifact)
        return True

    def pop_oldest(self) -> Optional[Artifact]:
        """Remove and return the first stored artifact, None when empty."""
        if not self.inventory:
            return None
        return self.inventory.pop(0)

    def apply_recoil(self, impulse: Vector2D) -> None:
        """Kick the robot's velocity by `impulse`."""
        self.velocity = self.velocity + impulse

    def reset(self) -> None:
        """Return to the team's starting pose, at rest and empty-handed."""
        (x, y), heading = START_POSES[self.team]
        self.position = Vector2D(x=x, y=y)
        self.velocity = Vector2D.zero()
        self.heading = heading
        self.inventory = []
        self.cooldown = 0

    def __repr__(self) -> str:
        return (f"Robot({self.team.value}, pos=({self.position.x:.1f}, {self.position.y:.1f}), "
                f"heading={math.degrees(self.heading):.0f}deg, inv={len(self.inventory)})")
