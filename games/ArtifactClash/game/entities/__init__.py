"""Artifact Clash game entities."""

from .artifact import Artifact, ArtifactStatus, Free, Held, Scored, spawn_wave
from .particle import Particle, spawn_burst, update_particles
from .robot import Robot, Controls, DEFAULT_CONTROLS, START_KEY

__all__ = [
    'Artifact', 'ArtifactStatus', 'Free', 'Held', 'Scored', 'spawn_wave',
    'Particle', 'spawn_burst', 'update_particles',
    'Robot', 'Controls', 'DEFAULT_CONTROLS', 'START_KEY',
]
