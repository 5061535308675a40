"""Base class for Artifact Clash skins.

Skins handle ALL rendering - the game only manages state. A skin sees a
frozen MatchSnapshot, never the live simulation.
"""

from abc import ABC, abstractmethod
from typing import Optional

import pygame

from models.arena import ArtifactView, GoalView, MatchSnapshot, ParticleView, RobotView

from .viewport import Viewport


class ArenaSkin(ABC):
    """Base class for game skins.

    render() lays down one frame in a fixed order: field, goals,
    artifacts, particles, robots, HUD. Subclasses draw the pieces.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def __init__(self):
        self.viewport: Optional[Viewport] = None

    def render(
        self,
        snapshot: MatchSnapshot,
        screen: pygame.Surface,
        banner_text: Optional[str] = None,
    ) -> None:
        """Draw a full frame.

        Args:
            snapshot: Match state to draw
            screen: Pygame surface to draw on
            banner_text: Centre message, None when hidden
        """
        width, height = screen.get_size()
        self.viewport = Viewport.fit(width, height, snapshot.field)

        self.render_field(snapshot, screen)
        for goal in snapshot.goals:
            self.render_goal(goal, screen)
        for artifact in snapshot.artifacts:
            self.render_artifact(artifact, screen)
        for particle in snapshot.particles:
            self.render_particle(particle, screen)
        for robot in snapshot.robots:
            self.render_robot(robot, screen)
        self.render_hud(snapshot, screen)
        if banner_text:
            self.render_banner(banner_text, screen)

    @abstractmethod
    def render_field(self, snapshot: MatchSnapshot, screen: pygame.Surface) -> None:
        """Render background, field border and grid."""
        pass

    @abstractmethod
    def render_goal(self, goal: GoalView, screen: pygame.Surface) -> None:
        pass

    @abstractmethod
    def render_artifact(self, artifact: ArtifactView, screen: pygame.Surface) -> None:
        pass

    @abstractmethod
    def render_particle(self, particle: ParticleView, screen: pygame.Surface) -> None:
        pass

    @abstractmethod
    def render_robot(self, robot: RobotView, screen: pygame.Surface) -> None:
        """Render a robot with its heading and held artifacts.

        Args:
            robot: Robot to render
            screen: Pygame surface to draw on
        """
        pass

    def render_hud(self, snapshot: MatchSnapshot, screen: pygame.Surface) -> None:
        """Render the heads-up display (scores, timer, pattern, inventories)."""
        pass

    def render_banner(self, text: str, screen: pygame.Surface) -> None:
        """Render the centre message."""
        pass
