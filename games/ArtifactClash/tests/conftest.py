"""Shared fixtures for Artifact Clash tests."""

import os

# Headless pygame for skin and game mode tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from games.ArtifactClash.game.match import start_match
from games.ArtifactClash.game.state import MatchState


@pytest.fixture
def state():
    """Idle arena with a fixed seed."""
    return MatchState.create(seed=1234)


@pytest.fixture
def started_state(state):
    """Running match with the opening artifacts removed and events cleared."""
    start_match(state)
    state.artifacts = []
    state.events = []
    return state


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()
