"""
Unified models library for the Artifact Arena project.

This package provides the Pydantic data models used across the system:
- Primitives: Basic geometric types (Vector2D, Point2D, Resolution)
- Arena: Teams, artifact types and frame snapshot models

Usage:
    >>> from models import Vector2D, Resolution
    >>> from models.arena import Team, ArtifactType, MatchSnapshot
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Vector2D,
    Point2D,  # Alias for Vector2D
    Resolution,
)

# ============================================================================
# Arena models
# ============================================================================
from .arena import (
    Team,
    ArtifactType,
    RobotView,
    ArtifactView,
    ParticleView,
    GoalView,
    MatchSnapshot,
)

__all__ = [
    # Primitives
    'Vector2D',
    'Point2D',
    'Resolution',
    # Arena
    'Team',
    'ArtifactType',
    'RobotView',
    'ArtifactView',
    'ParticleView',
    'GoalView',
    'MatchSnapshot',
]
