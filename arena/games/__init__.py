"""
Arena Game Framework.

Provides:
- base_game: BaseGame class that all games should inherit from
- game_state: Standard GameState enum for platform compatibility
"""

from arena.games.game_state import GameState
from arena.games.base_game import BaseGame

__all__ = [
    'GameState',
    'BaseGame',
]
