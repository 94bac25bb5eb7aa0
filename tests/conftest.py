import sys, os

# headless pygame for scene / widget tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Ensure the repo root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest
import pygame

from tests.helpers import click, key, motion, board_from


@pytest.fixture
def screen():
    pygame.init()
    surf = pygame.display.set_mode((900, 640))
    yield surf
    pygame.quit()


__all__ = ["click", "key", "motion", "board_from"]
