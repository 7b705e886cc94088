"""
Visualization module for Classic Snake.

- window: top-level window that hosts the game panel
"""

from .window import GameWindow

__all__ = [
    'GameWindow',
]
