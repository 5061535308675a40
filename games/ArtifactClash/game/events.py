"""Match events - what happened during a frame, for the UI and the log.

The simulation appends events while it steps; the game mode reacts to them
(banner text, structured match records). Events never feed back into the
simulation.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from models.arena import ArtifactType, Team


@dataclass(frozen=True)
class MatchEvent:
    """Base class for everything the simulation reports."""

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_record(self) -> Dict[str, Any]:
        """JSON-serializable dict for structured logging."""
        record: Dict[str, Any] = {'type': self.kind}
        for key, value in asdict(self).items():
            if isinstance(value, (Team, ArtifactType)):
                value = value.value
            elif isinstance(value, dict):
                value = {getattr(k, 'value', k): v for k, v in value.items()}
            record[key] = value
        return record


@dataclass(frozen=True)
class MatchStarted(MatchEvent):
    """A new match began."""
    duration: int


@dataclass(frozen=True)
class ArtifactScored(MatchEvent):
    """An artifact entered a goal."""
    team: Team
    artifact_type: ArtifactType
    points: int


@dataclass(frozen=True)
class PatternMatched(MatchEvent):
    """A team's last three goals matched the target pattern."""
    team: Team
    bonus: int
    message: str


@dataclass(frozen=True)
class WaveSpawned(MatchEvent):
    """Reinforcement artifacts were dropped onto the field."""
    count: int
    time_left: int


@dataclass(frozen=True)
class MatchEnded(MatchEvent):
    """Time ran out.

    Attributes:
        winner: Winning team, None on a tie
        outcome: "RED WINS", "BLUE WINS" or "TIE"
        message: Banner text shown until the next match
        scores: Final points per team
    """
    winner: Optional[Team]
    outcome: str
    message: str
    scores: Dict[Team, int]
