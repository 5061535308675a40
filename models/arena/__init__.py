"""
Arena data models.

Enumerations and read-only snapshot models for Artifact Arena matches.
"""

from .enums import Team, ArtifactType
from .models import (
    RobotView,
    ArtifactView,
    ParticleView,
    GoalView,
    MatchSnapshot,
)

__all__ = [
    'Team',
    'ArtifactType',
    'RobotView',
    'ArtifactView',
    'ParticleView',
    'GoalView',
    'MatchSnapshot',
]
