"""
Snake game module for Classic Snake.
"""

from .config import BoardConfig
from .game import SnakeGame, Direction, Point
from .renderer import SnakeRenderer
from .panel import GamePanel, TICK_EVENT

__all__ = [
    'BoardConfig',
    'SnakeGame',
    'SnakeRenderer',
    'GamePanel',
    'TICK_EVENT',
    'Direction',
    'Point',
]
