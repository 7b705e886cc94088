"""
Pytest configuration and fixtures for Classic Snake tests.

pygame runs against SDL's dummy video and audio drivers so windows,
surfaces, fonts and timers work without a display.
"""

import os
import sys
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def headless_pygame():
    """Initialize pygame for each test and shut it down afterwards."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def board():
    """Default 500x500 board with 20-unit cells."""
    from classic_snake.games.snake.config import BoardConfig

    return BoardConfig()


@pytest.fixture
def centered_board():
    """Board whose snake starts stacked at (100, 100)."""
    from classic_snake.games.snake.config import BoardConfig

    return BoardConfig(start_x=100, start_y=100)


@pytest.fixture
def game(centered_board):
    """Seeded game starting at (100, 100) with food parked out of the way."""
    from classic_snake.games.snake.game import SnakeGame

    game = SnakeGame(centered_board, seed=1234)
    game.place_food(0, 400)
    return game


@pytest.fixture
def surface():
    """Off-screen 500x500 drawing surface."""
    return pygame.Surface((500, 500))


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config and return its path."""
    def _write(text: str) -> str:
        path = tmp_path / "config.yaml"
        path.write_text(text)
        return str(path)

    return _write
