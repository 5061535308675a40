"""Geometric skin - flat shapes on a dark grid."""

import math
from typing import List, Optional, Tuple

import pygame

from models import Vector2D
from models.arena import ArtifactView, GoalView, MatchSnapshot, ParticleView, RobotView, Team

from .base import ArenaSkin
from ..hud import format_time, inventory_slots
from ...config import (
    ARTIFACT_COLORS,
    ARTIFACT_RADIUS,
    BACKGROUND_COLOR,
    FIELD_BORDER_COLOR,
    GRID_COLOR,
    GRID_SPACING,
    HUD_COLOR,
    PARTICLE_RADIUS,
    ROBOT_BODY_COLOR,
    ROBOT_HALF_SIZE,
    TEAM_COLORS,
    WHITE,
)


class GeometricSkin(ArenaSkin):
    """Renders the arena using simple geometric shapes.

    - Field: dark background, grey border, grid every 100 field units
    - Goals: translucent discs in team colour
    - Artifacts: filled circles (purple or green)
    - Robots: rotated squares outlined in team colour, a white heading
      marker at the front and one dot per held artifact
    - Particles: small dots fading into the background
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes on a dark grid"

    GOAL_FILL_ALPHA = 40
    GOAL_OUTLINE = 3
    ROBOT_OUTLINE = 3
    MARKER_SIZE = 10
    HUD_MARGIN = 16
    SLOT_SIZE = 18
    BANNER_BG_COLOR = (0, 0, 0)

    def __init__(self):
        """Initialize geometric skin."""
        super().__init__()
        self._font: Optional[pygame.font.Font] = None
        self._font_large: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> None:
        """Ensure fonts are initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 36)
            self._font_large = pygame.font.Font(None, 56)

    def _rotated(self, center: Vector2D, heading: float, local: Tuple[float, float]) -> Tuple[int, int]:
        """Robot-local point (x forward, y right) to screen pixels."""
        cos_h = math.cos(heading)
        sin_h = math.sin(heading)
        x, y = local
        world = Vector2D(
            x=center.x + x * cos_h - y * sin_h,
            y=center.y + x * sin_h + y * cos_h,
        )
        return self.viewport.to_screen(world)

    def render_field(self, snapshot: MatchSnapshot, screen: pygame.Surface) -> None:
        """Fill the screen, draw the grid and outline the field."""
        screen.fill(BACKGROUND_COLOR)
        vp = self.viewport
        field = snapshot.field

        for x in range(0, field.width + 1, GRID_SPACING):
            top = vp.to_screen(Vector2D(x=x, y=0))
            bottom = vp.to_screen(Vector2D(x=x, y=field.height))
            pygame.draw.line(screen, GRID_COLOR, top, bottom, 1)
        for y in range(0, field.height + 1, GRID_SPACING):
            left = vp.to_screen(Vector2D(x=0, y=y))
            right = vp.to_screen(Vector2D(x=field.width, y=y))
            pygame.draw.line(screen, GRID_COLOR, left, right, 1)

        left, top = vp.to_screen(Vector2D.zero())
        right, bottom = vp.to_screen(Vector2D(x=field.width, y=field.height))
        pygame.draw.rect(screen, FIELD_BORDER_COLOR, (left, top, right - left, bottom - top), 2)

    def render_goal(self, goal: GoalView, screen: pygame.Surface) -> None:
        """Translucent disc with a solid rim."""
        color = TEAM_COLORS[goal.team]
        center = self.viewport.to_screen(goal.center)
        radius = self.viewport.length(goal.radius)

        overlay = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(overlay, (*color, self.GOAL_FILL_ALPHA), (radius, radius), radius)
        screen.blit(overlay, (center[0] - radius, center[1] - radius))
        pygame.draw.circle(screen, color, center, radius, self.GOAL_OUTLINE)

    def render_artifact(self, artifact: ArtifactView, screen: pygame.Surface) -> None:
        pos = self.viewport.to_screen(artifact.position)
        radius = self.viewport.length(ARTIFACT_RADIUS, minimum=2)
        pygame.draw.circle(screen, ARTIFACT_COLORS[artifact.type], pos, radius)

    def render_particle(self, particle: ParticleView, screen: pygame.Surface) -> None:
        """Blend the particle colour toward the background by its alpha."""
        color = tuple(
            int(c * particle.alpha + bg * (1 - particle.alpha))
            for c, bg in zip(particle.color, BACKGROUND_COLOR)
        )
        pos = self.viewport.to_screen(particle.position)
        pygame.draw.circle(screen, color, pos, self.viewport.length(PARTICLE_RADIUS))

    def render_robot(self, robot: RobotView, screen: pygame.Surface) -> None:
        """Rotated square body, heading marker and inventory dots."""
        h = ROBOT_HALF_SIZE
        corners = [
            self._rotated(robot.position, robot.heading, local)
            for local in ((h, -h), (h, h), (-h, h), (-h, -h))
        ]
        pygame.draw.polygon(screen, ROBOT_BODY_COLOR, corners)
        pygame.draw.polygon(screen, TEAM_COLORS[robot.team], corners, self.ROBOT_OUTLINE)

        m = self.MARKER_SIZE
        marker = [
            self._rotated(robot.position, robot.heading, local)
            for local in ((h, -m / 2), (h, m / 2), (h - m, m / 2), (h - m, -m / 2))
        ]
        pygame.draw.polygon(screen, TEAM_COLORS[robot.team], marker)

        dot_radius = self.viewport.length(ARTIFACT_RADIUS / 2, minimum=2)
        for i, artifact_type in enumerate(robot.inventory):
            pos = self._rotated(robot.position, robot.heading, (-10 + i * 10, 0))
            pygame.draw.circle(screen, ARTIFACT_COLORS[artifact_type], pos, dot_radius)

    def _render_slots(self, slots: List, screen: pygame.Surface, left: int, top: int) -> None:
        size = self.SLOT_SIZE
        for i, slot in enumerate(slots):
            rect = (left + i * (size + 6), top, size, size)
            if slot is None:
                pygame.draw.rect(screen, FIELD_BORDER_COLOR, rect, 2)
            else:
                pygame.draw.rect(screen, ARTIFACT_COLORS[slot], rect)

    def render_hud(self, snapshot: MatchSnapshot, screen: pygame.Surface) -> None:
        """Scores and inventories in the corners, timer and pattern in the middle."""
        self._ensure_font()
        if not self._font:
            return

        width = screen.get_width()
        margin = self.HUD_MARGIN
        slots_width = 3 * self.SLOT_SIZE + 2 * 6

        # Red (top left)
        red_text = self._font.render(f"RED {snapshot.scores.get(Team.RED, 0)}", True, TEAM_COLORS[Team.RED])
        screen.blit(red_text, (margin, margin))
        self._render_slots(
            inventory_slots(snapshot.robot(Team.RED)), screen,
            margin, margin + red_text.get_height() + 6,
        )

        # Blue (top right)
        blue_text = self._font.render(f"BLUE {snapshot.scores.get(Team.BLUE, 0)}", True, TEAM_COLORS[Team.BLUE])
        blue_rect = blue_text.get_rect()
        blue_rect.topright = (width - margin, margin)
        screen.blit(blue_text, blue_rect)
        self._render_slots(
            inventory_slots(snapshot.robot(Team.BLUE)), screen,
            width - margin - slots_width, margin + blue_text.get_height() + 6,
        )

        # Timer (top center)
        timer_text = self._font.render(format_time(snapshot.time_left), True, HUD_COLOR)
        timer_rect = timer_text.get_rect()
        timer_rect.midtop = (width // 2, margin)
        screen.blit(timer_text, timer_rect)

        # Target pattern under the timer
        spacing = 28
        y = timer_rect.bottom + 16
        x0 = width // 2 - spacing * (len(snapshot.target_pattern) - 1) // 2
        for i, artifact_type in enumerate(snapshot.target_pattern):
            pygame.draw.circle(screen, ARTIFACT_COLORS[artifact_type], (x0 + i * spacing, y), 9)

    def render_banner(self, text: str, screen: pygame.Surface) -> None:
        """Centre message on a dark plate."""
        self._ensure_font()
        if not self._font_large:
            return

        rendered = self._font_large.render(text, True, WHITE)
        rect = rendered.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
        plate = rect.inflate(40, 24)
        pygame.draw.rect(screen, self.BANNER_BG_COLOR, plate)
        pygame.draw.rect(screen, HUD_COLOR, plate, 2)
        screen.blit(rendered, rect)
