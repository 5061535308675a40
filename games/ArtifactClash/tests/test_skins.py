"""
Tests for the viewport transform and the geometric skin.

Skins draw onto an off-screen surface, so no window is opened.
"""

import pygame
import pytest

from models import Resolution, Vector2D
from models.arena import Team
from games.ArtifactClash.config import BACKGROUND_COLOR, ROBOT_BODY_COLOR, TEAM_COLORS
from games.ArtifactClash.game.match import start_match
from games.ArtifactClash.game.skins import ArenaSkin, GeometricSkin, Viewport
from games.ArtifactClash.game.snapshot import take_snapshot

FIELD = Resolution(width=2000, height=1400)


@pytest.fixture(autouse=True)
def pygame_fonts():
    pygame.font.init()


class TestViewport:
    """Test the letterbox transform."""

    def test_exact_fit(self):
        vp = Viewport.fit(1000, 700, FIELD)
        assert vp.scale == pytest.approx(0.5)
        assert vp.offset_x == pytest.approx(0.0)
        assert vp.offset_y == pytest.approx(0.0)

    def test_letterbox_vertical(self):
        """A taller screen keeps the width scale and centres vertically."""
        vp = Viewport.fit(1280, 900, FIELD)
        assert vp.scale == pytest.approx(0.64)
        assert vp.offset_x == pytest.approx(0.0)
        assert vp.offset_y == pytest.approx(2.0)

    def test_pillarbox_horizontal(self):
        vp = Viewport.fit(2000, 700, FIELD)
        assert vp.scale == pytest.approx(0.5)
        assert vp.offset_x == pytest.approx(500.0)

    def test_to_screen(self):
        vp = Viewport.fit(1280, 900, FIELD)
        assert vp.to_screen(Vector2D(x=1000.0, y=700.0)) == (640, 450)

    def test_length_has_minimum(self):
        vp = Viewport.fit(100, 70, FIELD)
        assert vp.length(8.0) == 1
        assert vp.length(8.0, minimum=2) == 2


class TestArenaSkin:
    """Test the skin base class."""

    def test_is_abstract(self):
        with pytest.raises(TypeError):
            ArenaSkin()


class TestGeometricSkin:
    """Test drawing a frame off-screen."""

    def test_idle_frame(self, state):
        """Background and the red robot body land where expected."""
        screen = pygame.Surface((640, 448))
        skin = GeometricSkin()
        skin.render(take_snapshot(state), screen)

        assert skin.viewport.scale == pytest.approx(0.32)
        # Red robot centre (100, 700) -> (32, 224)
        assert tuple(screen.get_at((32, 224)))[:3] == ROBOT_BODY_COLOR
        # Open field away from grid lines, goals and HUD
        assert tuple(screen.get_at((336, 336)))[:3] == BACKGROUND_COLOR

    def test_heading_marker_in_team_colour(self, state):
        """The nose marker sits on the leading edge in the robot's colour."""
        screen = pygame.Surface((1000, 700))
        GeometricSkin().render(take_snapshot(state), screen)

        # Red faces +x: marker spans x 110..120 around y 700 -> (57, 350)
        assert tuple(screen.get_at((57, 350)))[:3] == TEAM_COLORS[Team.RED]
        # Blue faces -x from (1900, 700): marker spans x 1880..1890 -> (943, 350)
        assert tuple(screen.get_at((943, 350)))[:3] == TEAM_COLORS[Team.BLUE]

    def test_running_frame_with_banner(self, state):
        start_match(state)
        screen = pygame.Surface((1280, 900))
        GeometricSkin().render(take_snapshot(state), screen, "RED MATCHED PATTERN (+20)!")

    def test_tiny_window(self, state):
        start_match(state)
        screen = pygame.Surface((64, 45))
        GeometricSkin().render(take_snapshot(state), screen)
