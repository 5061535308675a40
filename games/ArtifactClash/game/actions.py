"""Robot actions: per-frame robot update plus the intake-or-shoot button.

One button does both jobs. Intake wins whenever there is room and an
artifact within reach; otherwise the oldest stored artifact is fired.
"""

import random
from enum import Enum
from typing import List, Mapping

from arena.logging import get_logger

from ..config import RECOIL, SHOOT_OFFSET, SHOOT_SPEED, SHOT_BURST, WHITE
from .entities.artifact import Artifact
from .entities.particle import Particle, spawn_burst
from .entities.robot import Robot
from .physics.collision import in_intake_range

log = get_logger('actions')


class ActionResult(Enum):
    """What one press of the action button did."""
    NONE = "none"        # Cooling down, nothing in reach and nothing stored
    INTAKE = "intake"
    SHOOT = "shoot"


def try_intake(robot: Robot, artifacts: List[Artifact]) -> bool:
    """Grab the first free artifact in reach, in collection order.

    First match wins; there is no nearest-first tie-break.

    Returns:
        True if an artifact was captured
    """
    if robot.is_full:
        return False
    for artifact in artifacts:
        if artifact.is_free and in_intake_range(robot, artifact):
            robot.take(artifact)
            log.debug(f"{robot.team.value} picked up {artifact.type.value}")
            return True
    return False


def shoot(robot: Robot, particles: List[Particle], rng: random.Random) -> bool:
    """Fire the oldest stored artifact along the robot's heading.

    The artifact appears just in front of the robot, the robot gets a
    small kick backwards and a white spark burst marks the release point.

    Returns:
        False (and changes nothing) when the inventory is empty
    """
    artifact = robot.pop_oldest()
    if artifact is None:
        return False

    direction = robot.facing
    artifact.release(
        position=robot.position + direction * SHOOT_OFFSET,
        velocity=direction * SHOOT_SPEED,
    )
    robot.apply_recoil(-(direction * RECOIL))
    spawn_burst(particles, artifact.position, WHITE, SHOT_BURST, rng)
    log.debug(f"{robot.team.value} shot {artifact.type.value}")
    return True


def intake_or_shoot(
    robot: Robot,
    artifacts: List[Artifact],
    particles: List[Particle],
    rng: random.Random,
) -> ActionResult:
    """Resolve one activation of the action button."""
    if try_intake(robot, artifacts):
        return ActionResult.INTAKE
    if shoot(robot, particles, rng):
        return ActionResult.SHOOT
    return ActionResult.NONE


def update_robot(
    robot: Robot,
    keys: Mapping[str, bool],
    artifacts: List[Artifact],
    particles: List[Particle],
    rng: random.Random,
) -> ActionResult:
    """Advance a robot by one frame.

    Drives the robot, fires the action when the button is down and the
    cooldown is clear, then counts the cooldown down. A press restarts the
    cooldown even if the action found nothing to do.
    """
    robot.drive(keys)

    result = ActionResult.NONE
    if robot.action_ready(keys):
        result = intake_or_shoot(robot, artifacts, particles, rng)
        robot.start_cooldown()

    robot.tick_cooldown()
    return result
