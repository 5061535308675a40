"""Base class for all arena games.

All games should inherit from BaseGame to ensure a consistent interface
with their standalone launchers and tests.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes so a launcher can build its argparse
parser from the game class alone.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from arena.games.game_state import GameState
from arena.logging import get_logger

log = get_logger('base_game')


class BaseGame(ABC):
    """Abstract base class for all arena games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - _get_internal_state() -> GameState: Map internal state to standard state
        - get_score() -> int: Return current score
        - handle_input(keys): Process the frame's key states
        - update(dt): Update game logic
        - render(screen): Draw the game

    Optional overrides:
        - reset(): Reset game to initial state
    """

    # =========================================================================
    # Game Metadata (override in subclasses)
    # =========================================================================

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # CLI argument definitions for argparse
    # Each entry is a dict with keys: name, type, default, help, choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    # =========================================================================
    # Standard Arguments (automatically available to all games)
    # =========================================================================

    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for reproducible spawns'
        },
        {
            'name': '--log-level',
            'type': str,
            'default': None,
            'choices': ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
            'help': 'Console log level'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific + base).

        Game-specific arguments come first, then base arguments.
        Duplicates by name are removed (game-specific takes precedence).
        """
        seen_names = set()
        result = []

        for arg in cls.ARGUMENTS + cls._BASE_ARGUMENTS:
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)

        return result

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary.

        Returns:
            Dict with keys: name, description, version, author, arguments
        """
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    @property
    def state(self) -> GameState:
        """Current game state (standard interface).

        Games should not override this - override _get_internal_state instead.
        """
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        """Map internal game state to standard GameState.

        Returns:
            GameState.PLAYING, GameState.GAME_OVER, GameState.PAUSED, etc.
        """
        pass

    @abstractmethod
    def get_score(self) -> int:
        """Get current score.

        Returns:
            Integer score value
        """
        pass

    @abstractmethod
    def handle_input(self, keys: Dict[str, bool]) -> None:
        """Process the current frame's input.

        Args:
            keys: Mapping of logical key id -> pressed
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update game logic.

        Args:
            dt: Delta time in seconds since last frame
        """
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    def reset(self) -> None:
        """Reset game to initial state.

        Override this to implement game-specific reset logic.
        """
        log.debug(f"{self.NAME}: reset")
