"""Scoring and the target-pattern bonus.

Each goal adds the artifact's points and appends its type to the team's
rolling history of the last three goals. When a full history equals the
target pattern, the team earns a bonus, a new pattern is drawn and both
teams start their histories over.
"""

import random
from typing import List, TYPE_CHECKING

from arena.logging import get_logger
from models.arena import ArtifactType, Team

from ..config import (
    ARTIFACT_POINTS,
    PATTERN_BONUS,
    PATTERN_LENGTH,
    SCORE_BURST,
    TEAM_COLORS,
)
from .entities.artifact import Artifact
from .entities.particle import spawn_burst
from .events import ArtifactScored, PatternMatched

if TYPE_CHECKING:
    from .state import MatchState

log = get_logger('scoring')


def generate_pattern(rng: random.Random, length: int = PATTERN_LENGTH) -> List[ArtifactType]:
    """Draw a new target pattern, each slot independently purple or green."""
    choices = [ArtifactType.PURPLE, ArtifactType.GREEN]
    return [rng.choice(choices) for _ in range(length)]


def pattern_message(team: Team, bonus: int = PATTERN_BONUS) -> str:
    """Banner text for a matched pattern."""
    return f"{team.label} MATCHED PATTERN (+{bonus})!"


def score_artifact(state: 'MatchState', team: Team, artifact: Artifact) -> int:
    """Score a free artifact for a team.

    Marks the artifact scored, bursts team-coloured sparks at its position,
    awards its points, records its type in the team's history (last three
    kept) and checks the pattern.

    Returns:
        Points awarded, including any pattern bonus
    """
    artifact.mark_scored(team)
    spawn_burst(state.particles, artifact.position, TEAM_COLORS[team], SCORE_BURST, state.rng)

    points = ARTIFACT_POINTS[artifact.type]
    state.scores[team] += points

    history = state.histories[team]
    history.append(artifact.type)
    if len(history) > PATTERN_LENGTH:
        del history[:-PATTERN_LENGTH]

    state.events.append(ArtifactScored(team=team, artifact_type=artifact.type, points=points))
    log.debug(f"{team.value} scored {artifact.type.value} (+{points}), total {state.scores[team]}")

    if check_pattern(state, team):
        points += PATTERN_BONUS
    return points


def check_pattern(state: 'MatchState', team: Team) -> bool:
    """Award the pattern bonus if the team's history equals the target.

    Nothing happens unless the history is full. On a match the bonus is
    added, a new pattern is drawn and BOTH teams' histories are cleared.

    Returns:
        True if the pattern matched
    """
    history = state.histories[team]
    if len(history) != PATTERN_LENGTH:
        return False

    for scored, wanted in zip(history, state.target_pattern):
        if scored != wanted:
            return False

    state.scores[team] += PATTERN_BONUS
    message = pattern_message(team)
    state.events.append(PatternMatched(team=team, bonus=PATTERN_BONUS, message=message))
    log.info(message)

    state.target_pattern = generate_pattern(state.rng)
    for other in state.histories:
        state.histories[other] = []
    return True
