"""Build read-only snapshots of a match for rendering."""

from models import Resolution
from models.arena import (
    ArtifactView,
    GoalView,
    MatchSnapshot,
    ParticleView,
    RobotView,
)

from ..config import FIELD_HEIGHT, FIELD_WIDTH, GOAL_SIZE
from .state import GOALS, MatchState


def take_snapshot(state: MatchState) -> MatchSnapshot:
    """Freeze the parts of the state a renderer needs.

    Only free artifacts are listed; held ones are drawn as inventory dots on
    their robot and scored ones are not drawn at all.
    """
    robots = [
        RobotView(
            team=robot.team,
            position=robot.position,
            heading=robot.heading,
            inventory=[a.type for a in robot.inventory],
        )
        for robot in state.robots.values()
    ]
    artifacts = [
        ArtifactView(type=a.type, position=a.position)
        for a in state.artifacts
        if a.is_free
    ]
    particles = [
        ParticleView(position=p.position, color=p.color, alpha=p.alpha)
        for p in state.particles
    ]
    goals = [
        GoalView(team=team, center=center, radius=GOAL_SIZE)
        for team, center in GOALS.items()
    ]

    return MatchSnapshot(
        field=Resolution(width=FIELD_WIDTH, height=FIELD_HEIGHT),
        running=state.running,
        time_left=state.time_left,
        scores=dict(state.scores),
        target_pattern=list(state.target_pattern),
        robots=robots,
        artifacts=artifacts,
        particles=particles,
        goals=goals,
        outcome=state.outcome,
    )
