"""MatchState - the whole simulation state in one explicit object.

Every simulation function takes the state it works on; there are no module
globals. The state is created once at start-up (idle, not running) and
reset in place by start_match().
"""

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from models import Vector2D
from models.arena import ArtifactType, Team

from ..config import GOAL_CENTERS, MATCH_DURATION
from .entities.artifact import Artifact
from .entities.particle import Particle
from .entities.robot import Robot
from .events import MatchEvent
from .scoring import generate_pattern

# Goal centres as vectors, red first (red wins a same-frame tie)
GOALS: Dict[Team, Vector2D] = {
    team: Vector2D(x=x, y=y) for team, (x, y) in GOAL_CENTERS.items()
}


def _team_zeros() -> Dict[Team, int]:
    return {team: 0 for team in Team}


def _team_histories() -> Dict[Team, List[ArtifactType]]:
    return {team: [] for team in Team}


@dataclass
class MatchState:
    """Mutable state of one arena.

    Attributes:
        robots: One robot per team
        rng: Random source for spawns, patterns and particles
        running: True while a match is being played
        time_left: Whole seconds remaining
        clock: Simulated seconds since the match started
        last_tick: Clock value of the last timer tick
        target_pattern: Bonus pattern, exactly 3 types
        scores: Points per team
        histories: Last (up to 3) scored types per team, oldest first
        artifacts: Every artifact spawned this match (scored ones stay, inert)
        particles: Live particles
        wave_spawned: Mid-match wave already dropped
        winner: Winning team after the match, None before or on a tie
        outcome: Result text after the match, None before
        events: Events produced by the current step
    """

    robots: Dict[Team, Robot]
    rng: random.Random
    running: bool = False
    time_left: int = MATCH_DURATION
    clock: float = 0.0
    last_tick: float = 0.0
    target_pattern: List[ArtifactType] = field(default_factory=list)
    scores: Dict[Team, int] = field(default_factory=_team_zeros)
    histories: Dict[Team, List[ArtifactType]] = field(default_factory=_team_histories)
    artifacts: List[Artifact] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)
    wave_spawned: bool = False
    winner: Optional[Team] = None
    outcome: Optional[str] = None
    events: List[MatchEvent] = field(default_factory=list)

    @classmethod
    def create(cls, seed: Optional[int] = None) -> 'MatchState':
        """Idle arena: robots on their marks, no artifacts, a fresh pattern.

        Args:
            seed: Seed for the state's random source (None = nondeterministic)
        """
        rng = random.Random(seed)
        robots = {team: Robot.at_start(team) for team in Team}
        return cls(robots=robots, rng=rng, target_pattern=generate_pattern(rng))
