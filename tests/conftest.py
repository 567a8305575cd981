import os
import random

# pygame must never open a real window or audio device under test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from wrapsnake.game import GameEngine, GameState


@pytest.fixture
def engine():
    return GameEngine(rng=random.Random(1234))


@pytest.fixture
def make_engine():
    """Build an engine from explicit GameState fields."""
    def _make(**fields):
        return GameEngine(state=GameState(**fields), rng=random.Random(99))
    return _make
