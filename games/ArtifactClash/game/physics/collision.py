"""Collision detection and response for Artifact Clash.

Handles artifact-wall bounces, robot-artifact pushing, intake range and
goal detection. All checks are centre-distance circle tests.
"""

from typing import Iterable, Mapping, Optional, TYPE_CHECKING

from models import Vector2D
from models.arena import Team

from ...config import (
    ARTIFACT_RADIUS,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    GOAL_SIZE,
    INTAKE_REACH,
    PUSH_DISTANCE,
    PUSH_STRENGTH,
)

if TYPE_CHECKING:
    from ..entities.artifact import Artifact
    from ..entities.robot import Robot


def bounce_off_walls(
    artifact: 'Artifact',
    width: float = FIELD_WIDTH,
    height: float = FIELD_HEIGHT,
    radius: float = ARTIFACT_RADIUS,
) -> None:
    """Reflect the velocity component of an artifact past a wall.

    The position is not corrected, so an artifact may sit slightly beyond
    the wall for a frame until the flipped velocity carries it back.
    """
    vx = artifact.velocity.x
    vy = artifact.velocity.y
    if artifact.position.x < radius or artifact.position.x > width - radius:
        vx = -vx
    if artifact.position.y < radius or artifact.position.y > height - radius:
        vy = -vy
    if vx != artifact.velocity.x or vy != artifact.velocity.y:
        artifact.velocity = Vector2D(x=vx, y=vy)


def push_from_robots(
    artifact: 'Artifact',
    robots: Iterable['Robot'],
    distance: float = PUSH_DISTANCE,
    strength: float = PUSH_STRENGTH,
) -> int:
    """Shove an artifact away from every robot overlapping it.

    The impulse is applied on every frame the overlap lasts, so velocity
    builds up while a robot drives into an artifact.

    Returns:
        Number of robots that pushed
    """
    pushes = 0
    for robot in robots:
        if robot.position.distance_to(artifact.position) < distance:
            push = (artifact.position - robot.position).normalize() * strength
            artifact.velocity = artifact.velocity + push
            pushes += 1
    return pushes


def in_intake_range(robot: 'Robot', artifact: 'Artifact', reach: float = INTAKE_REACH) -> bool:
    """Whether a robot is close enough to grab an artifact."""
    return robot.position.distance_to(artifact.position) < reach


def check_goal(
    artifact: 'Artifact',
    goals: Mapping[Team, Vector2D],
    radius: float = GOAL_SIZE,
) -> Optional[Team]:
    """Team whose goal the artifact is inside, if any.

    Goals are tested in mapping order (red first), so red wins a tie.
    """
    for team, center in goals.items():
        if artifact.position.distance_to(center) < radius:
            return team
    return None
