"""
Core abstractions for Classic Snake.

Provides abstract interfaces that the game logic and its renderer implement.
"""

from .game_interface import GameInterface, GameMetadata, GameStatus
from .renderer_interface import RendererInterface

__all__ = [
    'GameInterface',
    'GameMetadata',
    'GameStatus',
    'RendererInterface',
]
