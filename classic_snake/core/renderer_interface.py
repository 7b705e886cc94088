"""
Abstract renderer interface for Classic Snake.

Game renderers implement this interface to draw state onto a pygame surface.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Tuple

import pygame


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers draw game state to a pygame surface.
    """

    @abstractmethod
    def render(self, game_state: Dict[str, Any], surface: "pygame.Surface") -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary containing game state from get_state()
            surface: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """
        Get the preferred render size.

        Returns:
            Tuple of (width, height) in pixels
        """
        pass
