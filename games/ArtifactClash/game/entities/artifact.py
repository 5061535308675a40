"""Artifact entity.

An artifact is always in exactly one of three states, modelled as a tagged
variant so that "held and scored" cannot be expressed:

- Free: rolling on the field, subject to physics
- Held(holder): stored in a robot's inventory
- Scored(team): terminal, inert, never drawn or simulated again
"""

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from models import Vector2D
from models.arena import ArtifactType, Team

from ...config import (
    ARTIFACT_FRICTION,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    SPAWN_MARGIN,
    WAVE_COMPOSITION,
)


@dataclass(frozen=True)
class Free:
    """Artifact is loose on the field."""


@dataclass(frozen=True)
class Held:
    """Artifact is in a robot's inventory."""
    holder: Team


@dataclass(frozen=True)
class Scored:
    """Artifact went into a goal. Terminal."""
    team: Team


ArtifactStatus = Union[Free, Held, Scored]


@dataclass(eq=False)
class Artifact:
    """A purple or green game piece.

    Compared by identity: two artifacts at the same spot are still two
    artifacts.
    """

    type: ArtifactType
    position: Vector2D
    velocity: Vector2D = field(default_factory=Vector2D.zero)
    status: ArtifactStatus = field(default_factory=Free)

    @property
    def is_free(self) -> bool:
        return isinstance(self.status, Free)

    @property
    def is_held(self) -> bool:
        return isinstance(self.status, Held)

    @property
    def is_scored(self) -> bool:
        return isinstance(self.status, Scored)

    @property
    def holder(self) -> Optional[Team]:
        """Team holding this artifact, None unless held."""
        if isinstance(self.status, Held):
            return self.status.holder
        return None

    def pick_up(self, team: Team) -> None:
        """Move into a robot's inventory.

        Raises:
            ValueError: If the artifact is not free
        """
        if not self.is_free:
            raise ValueError(f"cannot pick up artifact in state {self.status}")
        self.status = Held(team)

    def release(self, position: Vector2D, velocity: Vector2D) -> None:
        """Leave a robot's inventory at the given position and velocity.

        Raises:
            ValueError: If the artifact is not held
        """
        if not self.is_held:
            raise ValueError(f"cannot release artifact in state {self.status}")
        self.status = Free()
        self.position = position
        self.velocity = velocity

    def mark_scored(self, team: Team) -> None:
        """Score into a team's goal. Position is kept as the last known spot.

        Raises:
            ValueError: If the artifact is not free
        """
        if not self.is_free:
            raise ValueError(f"cannot score artifact in state {self.status}")
        self.status = Scored(team)
        self.velocity = Vector2D.zero()

    def update(self, friction: float = ARTIFACT_FRICTION) -> None:
        """Integrate one frame of motion. Only free artifacts move."""
        if not self.is_free:
            return
        self.position = self.position + self.velocity
        self.velocity = self.velocity * friction


def spawn_wave(
    rng: random.Random,
    composition: Dict[ArtifactType, int] = WAVE_COMPOSITION,
    width: float = FIELD_WIDTH,
    height: float = FIELD_HEIGHT,
    margin: float = SPAWN_MARGIN,
) -> List[Artifact]:
    """Create a batch of free, motionless artifacts at random positions.

    Positions are uniform inside the field inset by `margin`. Artifacts are
    returned grouped by type in the composition's order (purple first).

    Args:
        rng: Random source
        composition: Count per artifact type
        width: Field width
        height: Field height
        margin: Distance kept from every wall

    Returns:
        New artifacts
    """
    artifacts = []
    for artifact_type, count in composition.items():
        for _ in range(count):
            x = rng.random() * (width - 2 * margin) + margin
            y = rng.random() * (height - 2 * margin) + margin
            artifacts.append(Artifact(artifact_type, Vector2D(x=x, y=y)))
    return artifacts
