"""
Arena snapshot models.

Read-only views of a match that the render and UI adapters consume. The
simulation owns mutable entities; once per frame they are projected into
these frozen models so a skin can never change game state.
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..primitives import Point2D, Resolution
from .enums import ArtifactType, Team


class RobotView(BaseModel):
    """Robot state as drawn on the field.

    Attributes:
        team: Owning team
        position: Centre in field units
        heading: Facing direction in radians
        inventory: Held artifact types, oldest first (at most 3)
    """
    team: Team
    position: Point2D
    heading: float
    inventory: List[ArtifactType] = Field(default_factory=list, max_length=3)

    model_config = ConfigDict(frozen=True)


class ArtifactView(BaseModel):
    """A free artifact lying or rolling on the field."""
    type: ArtifactType
    position: Point2D

    model_config = ConfigDict(frozen=True)


class ParticleView(BaseModel):
    """A fading particle.

    Attributes:
        position: Centre in field units
        color: RGB colour
        alpha: Remaining life fraction in [0, 1]
    """
    position: Point2D
    color: Tuple[int, int, int]
    alpha: float = Field(..., ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True)


class GoalView(BaseModel):
    """Circular scoring zone for one team."""
    team: Team
    center: Point2D
    radius: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)


class MatchSnapshot(BaseModel):
    """Everything a skin needs to draw one frame.

    Attributes:
        field: Field dimensions in field units
        running: Whether a match is in progress
        time_left: Whole seconds remaining
        scores: Points per team
        target_pattern: Current bonus pattern (3 types)
        robots: Robot views, red first
        artifacts: Free artifacts only (held and scored are not drawn)
        particles: Live particles
        goals: Goal zones, red first
        outcome: End-of-match result text, None while undecided
    """
    field: Resolution
    running: bool
    time_left: int
    scores: Dict[Team, int]
    target_pattern: List[ArtifactType]
    robots: List[RobotView]
    artifacts: List[ArtifactView]
    particles: List[ParticleView]
    goals: List[GoalView]
    outcome: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def leader(self) -> Optional[Team]:
        """Team currently ahead, None when level."""
        red = self.scores.get(Team.RED, 0)
        blue = self.scores.get(Team.BLUE, 0)
        if red > blue:
            return Team.RED
        if blue > red:
            return Team.BLUE
        return None

    def robot(self, team: Team) -> RobotView:
        """View of the given team's robot."""
        for robot in self.robots:
            if robot.team == team:
                return robot
        raise KeyError(team)
