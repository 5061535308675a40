"""
Artifact Arena platform.

Shared framework for the arena games: the base game class, the standard
game state enum and the platform logger.
"""

from arena.logging import get_logger

__all__ = ['get_logger']
