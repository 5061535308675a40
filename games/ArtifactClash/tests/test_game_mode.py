"""
Tests for ArtifactClashMode, the game wrapper around the match.
"""

from typing import Any, Dict, List

import pygame
import pytest

from arena.games import BaseGame, GameState
from arena.logging import LogSink, close_all_sinks, register_sink
from models import Vector2D
from models.arena import ArtifactType, Team
from games.ArtifactClash.game.entities import Artifact
from games.ArtifactClash.game_info import get_game_mode
from games.ArtifactClash.game_mode import START_MESSAGE, ArtifactClashMode

P = ArtifactType.PURPLE


class RecordingSink(LogSink):
    """Keeps emitted records in memory."""

    def __init__(self):
        self.records: List[Dict[str, Any]] = []

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        self.records.append(record)

    def close(self) -> None:
        pass


@pytest.fixture
def sink():
    sink = RecordingSink()
    register_sink('match', sink)
    yield sink
    close_all_sinks()


@pytest.fixture
def game(fake_clock):
    return ArtifactClashMode(seed=11, time_source=fake_clock)


def start(game):
    game.handle_input({'space': True})
    game.update(1 / 60)
    game.handle_input({})


class TestMetadata:
    """Test class-level metadata and arguments."""

    def test_is_base_game(self):
        assert issubclass(ArtifactClashMode, BaseGame)

    def test_arguments(self):
        names = [arg['name'] for arg in ArtifactClashMode.get_arguments()]
        assert names == ['--skin', '--seed', '--log-level']

    def test_info(self):
        info = ArtifactClashMode.get_info()
        assert info['name'] == "Artifact Clash"

    def test_factory(self, fake_clock):
        assert isinstance(get_game_mode(time_source=fake_clock), ArtifactClashMode)


class TestLifecycle:
    """Test state mapping and start/restart."""

    def test_idle_is_paused_with_prompt(self, game):
        assert game.state == GameState.PAUSED
        assert game.banner.visible
        assert game.banner.text == START_MESSAGE

    def test_space_starts(self, game):
        start(game)
        assert game.state == GameState.PLAYING
        assert not game.banner.visible
        assert len(game.match.artifacts) == 36

    def test_match_end_shows_result(self, game, fake_clock):
        start(game)
        game.match.scores[Team.BLUE] = 25
        game.match.time_left = 1
        game.update(1.0)
        assert game.state == GameState.GAME_OVER
        assert game.banner.text == "BLUE WINS - PRESS SPACE TO RESTART"

        fake_clock.advance(10.0)
        game.update(1 / 60)
        assert game.banner.visible

    def test_restart_after_end(self, game):
        start(game)
        game.match.time_left = 1
        game.update(1.0)
        start(game)
        assert game.state == GameState.PLAYING
        assert game.get_score() == 0

    def test_reset_returns_to_idle(self, game):
        start(game)
        game.reset()
        assert game.state == GameState.PAUSED
        assert game.match.artifacts == []
        assert game.banner.text == START_MESSAGE


class TestPatternBanner:
    """Test the timed pattern banner."""

    def score_pattern(self, game):
        game.match.target_pattern = [P, P, P]
        game.match.histories[Team.RED] = [P, P]
        game.match.artifacts = [Artifact(P, Vector2D(x=60.0, y=700.0))]
        game.update(1 / 60)

    def test_banner_shows_then_hides(self, game, fake_clock):
        start(game)
        self.score_pattern(game)
        assert game.banner.visible
        assert game.banner.text == "RED MATCHED PATTERN (+20)!"

        fake_clock.advance(1.5)
        game.update(1 / 60)
        assert game.banner.visible

        fake_clock.advance(0.5)
        game.update(1 / 60)
        assert not game.banner.visible

    def test_scores(self, game):
        start(game)
        self.score_pattern(game)
        assert game.get_scores() == {Team.RED: 25, Team.BLUE: 0}
        assert game.get_score() == 25


class TestMatchRecords:
    """Test structured match records."""

    def test_start_and_end_recorded(self, game, sink):
        start(game)
        game.match.scores[Team.RED] = 5
        game.match.wave_spawned = True
        game.match.time_left = 1
        game.update(1.0)

        types = [r['type'] for r in sink.records]
        assert types == ['MatchStarted', 'MatchEnded']
        end = sink.records[-1]
        assert end['outcome'] == "RED WINS"
        assert end['winner'] == 'red'
        assert end['scores'] == {'red': 5, 'blue': 0}

    def test_goal_recorded(self, game, sink):
        start(game)
        game.match.artifacts = [Artifact(P, Vector2D(x=1950.0, y=700.0))]
        game.update(1 / 60)
        assert sink.records[-1] == {
            'type': 'ArtifactScored',
            'team': 'blue',
            'artifact_type': 'purple',
            'points': 5,
        }


class TestRender:
    """Test rendering through the game mode."""

    def test_render_idle_and_running(self, game):
        pygame.font.init()
        screen = pygame.Surface((800, 560))
        game.render(screen)
        start(game)
        game.update(1 / 60)
        game.render(screen)

    def test_view_follows_surface_size(self, fake_clock):
        """Launcher size options are ignored; the surface decides the view."""
        pygame.font.init()
        game = ArtifactClashMode(width=320, height=200, log_level='DEBUG', time_source=fake_clock)
        screen = pygame.Surface((640, 448))
        game.render(screen)
        assert game._skin.viewport.scale == pytest.approx(0.32)

        screen = pygame.Surface((1000, 700))
        game.render(screen)
        assert game._skin.viewport.scale == pytest.approx(0.5)
