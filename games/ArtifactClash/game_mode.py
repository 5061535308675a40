"""Artifact Clash - two-robot artifact scoring battle.

Features:
- Two robots on one keyboard (WASD+F vs arrows+M)
- One button intakes nearby artifacts or shoots the oldest one held
- Purple 5 / green 10 points, +20 for matching the target pattern
- Two-minute matches with a reinforcement wave at the one-minute mark
"""

import time
from typing import Callable, Dict, Optional

import pygame

from arena.games import BaseGame, GameState
from arena.logging import emit_record, get_logger
from models.arena import Team

from .game.events import MatchEnded, MatchEvent, MatchStarted, PatternMatched
from .game.match import step
from .game.skins import ArenaSkin, GeometricSkin
from .game.snapshot import take_snapshot
from .game.state import MatchState
from .game.hud import MessageBanner

log = get_logger('artifact_clash')

START_MESSAGE = "PRESS SPACE TO START"


class ArtifactClashMode(BaseGame):
    """Artifact Clash game mode.

    Wraps the match simulation: keys go in through handle_input(), the
    simulation steps in update(), events drive the banner and the match
    log, and render() hands a snapshot to the skin.
    """

    # Game metadata
    NAME = "Artifact Clash"
    DESCRIPTION = "Two robots race to collect and shoot artifacts into their goals."
    VERSION = "1.0.0"
    AUTHOR = "Arena Team"

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--skin',
            'type': str,
            'default': 'geometric',
            'choices': ['geometric'],
            'help': 'Visual skin (geometric=shapes)'
        },
    ]

    def __init__(
        self,
        skin: str = 'geometric',
        seed: Optional[int] = None,
        time_source: Callable[[], float] = time.monotonic,
        **kwargs,
    ):
        """Initialize Artifact Clash.

        Args:
            skin: Visual skin to use
            seed: Random seed for spawns and patterns (None = random)
            time_source: Monotonic clock for banner timing
            **kwargs: Ignored launcher options (width, height, log_level, etc.)
        """
        self._seed = seed
        self._now = time_source

        # Skin registry
        self.SKINS: Dict[str, type] = {
            'geometric': GeometricSkin,
        }
        skin_class = self.SKINS.get(skin, GeometricSkin)
        self._skin: ArenaSkin = skin_class()

        self._keys: Dict[str, bool] = {}
        self._match = MatchState.create(seed)
        self._banner = MessageBanner()
        self._banner.show(START_MESSAGE, self._now())

    @property
    def match(self) -> MatchState:
        """Live simulation state."""
        return self._match

    @property
    def banner(self) -> MessageBanner:
        return self._banner

    def _get_internal_state(self) -> GameState:
        if self._match.running:
            return GameState.PLAYING
        if self._match.outcome is not None:
            return GameState.GAME_OVER
        return GameState.PAUSED

    def get_score(self) -> int:
        """Leading team's score."""
        return max(self._match.scores.values())

    def get_scores(self) -> Dict[Team, int]:
        """Points per team."""
        return dict(self._match.scores)

    def handle_input(self, keys: Dict[str, bool]) -> None:
        """Store this frame's key state for the next update."""
        self._keys = dict(keys)

    def update(self, dt: float) -> None:
        """Step the match and react to what happened."""
        for event in step(self._match, self._keys, dt):
            self._on_event(event)
        self._banner.update(self._now(), self._match.running)

    def _on_event(self, event: MatchEvent) -> None:
        """Route a match event to the banner and the match log."""
        if isinstance(event, MatchStarted):
            self._banner.hide()
        elif isinstance(event, PatternMatched):
            self._banner.show(event.message, self._now(), auto_hide=True)
        elif isinstance(event, MatchEnded):
            self._banner.show(event.message, self._now())

        emit_record('match', event.to_record())

    def render(self, screen: pygame.Surface) -> None:
        """Render the current frame through the skin."""
        banner_text = self._banner.text if self._banner.visible else None
        self._skin.render(take_snapshot(self._match), screen, banner_text)

    def reset(self) -> None:
        """Return to the idle start screen with a fresh arena."""
        super().reset()
        self._match = MatchState.create(self._seed)
        self._keys = {}
        self._banner.show(START_MESSAGE, self._now())
