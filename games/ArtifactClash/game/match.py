"""Match lifecycle and the per-frame simulation step.

step() is the only entry point the game mode calls each frame. Physics is
per frame (tuned for 60 FPS); dt only advances the match clock.
"""

from typing import List, Mapping

from arena.logging import get_logger
from models.arena import Team

from ..config import MATCH_DURATION, TICK_INTERVAL, WAVE_COMPOSITION, WAVE_TIME
from .actions import update_robot
from .entities.artifact import spawn_wave
from .entities.particle import update_particles
from .entities.robot import START_KEY
from .events import MatchEnded, MatchEvent, MatchStarted, WaveSpawned
from .physics.collision import bounce_off_walls, check_goal, push_from_robots
from .scoring import generate_pattern, score_artifact
from .state import GOALS, MatchState

log = get_logger('match')

# Float sums of frame times land just short of whole seconds
_TICK_EPSILON = 1e-9


def start_match(state: MatchState) -> None:
    """Reset the arena in place and start the clock.

    Everything from the previous match is discarded: scores, histories,
    artifacts, particles and the result. Robots go back to their marks.
    """
    state.running = True
    state.time_left = MATCH_DURATION
    state.clock = 0.0
    state.last_tick = 0.0
    state.wave_spawned = False
    state.winner = None
    state.outcome = None

    for team in state.scores:
        state.scores[team] = 0
    for team in state.histories:
        state.histories[team] = []

    state.artifacts = spawn_wave(state.rng)
    state.particles = []
    state.target_pattern = generate_pattern(state.rng)

    for robot in state.robots.values():
        robot.reset()

    state.events.append(MatchStarted(duration=MATCH_DURATION))
    log.info(f"Match started: {len(state.artifacts)} artifacts, "
             f"pattern {[t.value for t in state.target_pattern]}")


def match_outcome(state: MatchState) -> str:
    """Result text for the current scores."""
    red = state.scores[Team.RED]
    blue = state.scores[Team.BLUE]
    if red > blue:
        return "RED WINS"
    if blue > red:
        return "BLUE WINS"
    return "TIE"


def end_match(state: MatchState) -> None:
    """Stop the match and record the result."""
    state.running = False
    red = state.scores[Team.RED]
    blue = state.scores[Team.BLUE]
    state.winner = Team.RED if red > blue else Team.BLUE if blue > red else None
    state.outcome = match_outcome(state)

    state.events.append(MatchEnded(
        winner=state.winner,
        outcome=state.outcome,
        message=f"{state.outcome} - PRESS SPACE TO RESTART",
        scores=dict(state.scores),
    ))
    log.info(f"Match over: {state.outcome} ({red} - {blue})")


def advance_clock(state: MatchState, dt: float) -> None:
    """Advance the match clock, tick the timer, drop the wave, end on zero.

    Ticks fall on whole multiples of TICK_INTERVAL (last_tick advances by
    the interval, not to the current clock), so the timer does not drift
    with frame timing. At most one tick happens per call; a long frame is
    caught up one tick per following frame.
    """
    state.clock += dt
    if state.clock - state.last_tick >= TICK_INTERVAL - _TICK_EPSILON:
        state.time_left -= 1
        state.last_tick += TICK_INTERVAL

    if not state.wave_spawned and state.time_left <= WAVE_TIME:
        wave = spawn_wave(state.rng, WAVE_COMPOSITION)
        state.artifacts.extend(wave)
        state.wave_spawned = True
        state.events.append(WaveSpawned(count=len(wave), time_left=state.time_left))
        log.info(f"Second wave: {len(wave)} artifacts at {state.time_left}s")

    if state.time_left <= 0:
        end_match(state)


def update_artifacts(state: MatchState) -> None:
    """Move, bounce, push and score every free artifact."""
    robots = list(state.robots.values())
    for artifact in state.artifacts:
        if not artifact.is_free:
            continue
        artifact.update()
        bounce_off_walls(artifact)
        push_from_robots(artifact, robots)

        team = check_goal(artifact, GOALS)
        if team is not None:
            score_artifact(state, team, artifact)


def step(state: MatchState, keys: Mapping[str, bool], dt: float) -> List[MatchEvent]:
    """Advance the match by one frame.

    While idle (before the first match or after one ends) only the start
    key does anything: it starts a match and the frame ends there.

    Args:
        state: Arena to advance
        keys: Logical key id -> pressed, for this frame
        dt: Real seconds since the previous frame

    Returns:
        Events produced this frame, in order

    Raises:
        ValueError: If dt is negative
    """
    if dt < 0:
        raise ValueError(f"dt must be non-negative, got {dt}")

    state.events = []

    if not state.running:
        if keys.get(START_KEY, False):
            start_match(state)
        return list(state.events)

    advance_clock(state, dt)
    if not state.running:
        return list(state.events)

    for team in Team:
        update_robot(state.robots[team], keys, state.artifacts, state.particles, state.rng)

    update_artifacts(state)
    state.particles = update_particles(state.particles)
    return list(state.events)
