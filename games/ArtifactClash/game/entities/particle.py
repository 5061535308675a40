"""Particle entity - short-lived visual sparks.

Particles have no gameplay effect but live in the match state so the
simulation, not the renderer, decides when they move and expire.
"""

import random
from typing import List, Tuple

from models import Vector2D

from ...config import PARTICLE_FRICTION, PARTICLE_LIFE, PARTICLE_SPEED


class Particle:
    """A spark that drifts, slows down and fades out."""

    def __init__(
        self,
        position: Vector2D,
        velocity: Vector2D,
        color: Tuple[int, int, int],
        life: int = PARTICLE_LIFE,
    ):
        self.position = position
        self.velocity = velocity
        self.color = color
        self.life = life
        self.max_life = life

    @property
    def alive(self) -> bool:
        return self.life > 0

    @property
    def alpha(self) -> float:
        """Remaining life fraction, 1.0 when fresh and 0.0 when expired."""
        if self.max_life <= 0:
            return 0.0
        return max(0.0, min(1.0, self.life / self.max_life))

    def update(self, friction: float = PARTICLE_FRICTION) -> None:
        """Advance one frame."""
        self.position = self.position + self.velocity
        self.life -= 1
        self.velocity = self.velocity * friction


def spawn_burst(
    particles: List[Particle],
    position: Vector2D,
    color: Tuple[int, int, int],
    count: int,
    rng: random.Random,
    speed: float = PARTICLE_SPEED,
    life: int = PARTICLE_LIFE,
) -> None:
    """Append `count` particles flying out of `position` in random directions."""
    for _ in range(count):
        direction = Vector2D(x=rng.random() - 0.5, y=rng.random() - 0.5).normalize()
        particles.append(Particle(position, direction * speed, color, life))


def update_particles(particles: List[Particle]) -> List[Particle]:
    """Advance every particle one frame and drop the expired ones.

    Returns:
        The surviving particles, in their original order
    """
    for particle in particles:
        particle.update()
    return [p for p in particles if p.alive]
