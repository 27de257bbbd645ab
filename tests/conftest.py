import os
import random
import sys
from pathlib import Path

import pytest

# Headless SDL so scene tests run without a display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

import pygame  # noqa: E402

from timestables.app import App  # noqa: E402
from timestables.config import AppConfig  # noqa: E402
from timestables.session import GameSession  # noqa: E402


@pytest.fixture
def rng():
    """Seeded random source so question batches are reproducible."""
    return random.Random(1234)


@pytest.fixture
def session(rng):
    return GameSession(rng=rng)


@pytest.fixture
def app():
    """Headless app with a seeded session."""
    instance = App(AppConfig(seed=42))
    yield instance
    pygame.quit()
