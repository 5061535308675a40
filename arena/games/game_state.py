"""Common GameState enum for all arena games.

All games must use this standard GameState enum so launchers and tests can
reason about any game without knowing its internals.

Games can have additional internal states, but must map them to these
standard states via the `state` property.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states used by the arena platform.

    States:
        PLAYING: Active gameplay in progress
        PAUSED: Waiting to start (idle screen) or manually paused
        GAME_OVER: Game ended (time up, loss)
        WON: Game ended in success/victory

    For games with internal states:
        class MyGameMode(BaseGame):
            def _get_internal_state(self) -> GameState:
                if self._match.running:
                    return GameState.PLAYING
                if self._match.outcome is not None:
                    return GameState.GAME_OVER
                return GameState.PAUSED
    """
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    WON = "won"
