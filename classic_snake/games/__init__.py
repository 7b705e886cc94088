"""
Games module for Classic Snake.
"""

from . import snake

__all__ = [
    'snake',
]
