"""Configuration for Artifact Clash.

Display settings are read from the environment (and an optional .env file
next to this module). Game rules are fixed constants: every match is played
with exactly these numbers.
"""
import math
import os
from pathlib import Path
from typing import Dict, Tuple

from dotenv import load_dotenv

from models.arena import ArtifactType, Team

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


# Display settings
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 1280)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 900)
FPS = _get_int('FPS', 60)
FULLSCREEN = _get_bool('FULLSCREEN', False)

# Field (all gameplay happens in field units, scaled to the window)
FIELD_WIDTH: int = 2000
FIELD_HEIGHT: int = 1400

# Robot physics (per frame; tuned for ~60 FPS and not scaled by dt)
ROBOT_SIZE: float = 40.0
ROBOT_HALF_SIZE: float = ROBOT_SIZE / 2
ROBOT_ACCELERATION: float = 0.5
ROBOT_FRICTION: float = 0.92
ACTION_COOLDOWN_FRAMES: int = 15
MAX_INVENTORY: int = 3
INTAKE_REACH: float = ROBOT_SIZE + 20
SHOOT_OFFSET: float = ROBOT_SIZE + 10
SHOOT_SPEED: float = 15.0
RECOIL: float = 0.2
ROBOT_START_INSET: float = 100.0

# Artifact physics
ARTIFACT_RADIUS: float = 8.0
ARTIFACT_FRICTION: float = 0.98
PUSH_STRENGTH: float = 2.0
PUSH_DISTANCE: float = ROBOT_SIZE / 2 + ARTIFACT_RADIUS
SPAWN_MARGIN: float = 100.0

# Goals
GOAL_SIZE: float = 120.0
GOAL_INSET: float = 50.0

# Scoring
ARTIFACT_POINTS: Dict[ArtifactType, int] = {
    ArtifactType.PURPLE: 5,
    ArtifactType.GREEN: 10,
}
PATTERN_LENGTH: int = 3
PATTERN_BONUS: int = 20

# Match timing
MATCH_DURATION: int = 120    # seconds
WAVE_TIME: int = 60          # second wave when the clock reaches this
TICK_INTERVAL: float = 1.0   # seconds per timer tick
WAVE_COMPOSITION: Dict[ArtifactType, int] = {
    ArtifactType.PURPLE: 24,
    ArtifactType.GREEN: 12,
}
MESSAGE_DURATION: float = 2.0

# Particles
PARTICLE_SPEED: float = 4.0
PARTICLE_LIFE: int = 30
PARTICLE_FRICTION: float = 0.95
PARTICLE_RADIUS: float = 2.0
SHOT_BURST: int = 5
SCORE_BURST: int = 20

# Starting poses: position and heading per team
START_POSES: Dict[Team, Tuple[Tuple[float, float], float]] = {
    Team.RED: ((ROBOT_START_INSET, FIELD_HEIGHT / 2), 0.0),
    Team.BLUE: ((FIELD_WIDTH - ROBOT_START_INSET, FIELD_HEIGHT / 2), math.pi),
}

GOAL_CENTERS: Dict[Team, Tuple[float, float]] = {
    Team.RED: (GOAL_INSET, FIELD_HEIGHT / 2),
    Team.BLUE: (FIELD_WIDTH - GOAL_INSET, FIELD_HEIGHT / 2),
}

# Colors
BACKGROUND_COLOR: Tuple[int, int, int] = (10, 10, 16)
FIELD_BORDER_COLOR: Tuple[int, int, int] = (51, 51, 51)
GRID_COLOR: Tuple[int, int, int] = (34, 34, 34)
GRID_SPACING: int = 100
ROBOT_BODY_COLOR: Tuple[int, int, int] = (34, 34, 34)
HUD_COLOR: Tuple[int, int, int] = (220, 220, 220)
WHITE: Tuple[int, int, int] = (255, 255, 255)

TEAM_COLORS: Dict[Team, Tuple[int, int, int]] = {
    Team.RED: (255, 42, 42),
    Team.BLUE: (42, 138, 255),
}

ARTIFACT_COLORS: Dict[ArtifactType, Tuple[int, int, int]] = {
    ArtifactType.PURPLE: (189, 0, 255),
    ArtifactType.GREEN: (0, 255, 157),
}
