"""
Snake Game Renderer - Pygame-based visualization implementing RendererInterface.
"""

import pygame
from typing import Dict, Any, Optional, Tuple

from ...core.renderer_interface import RendererInterface


# Colors
WHITE = (255, 255, 255)
RED = (255, 0, 0)
BACKGROUND_COLOR = (64, 64, 64)
GRID_COLOR = (80, 80, 80)
SNAKE_HEAD_COLOR = WHITE
SNAKE_BODY_COLOR = (40, 200, 150)
FOOD_COLOR = (210, 115, 90)
TEXT_COLOR = WHITE
GAME_OVER_COLOR = RED

SCORE_FONT_SIZE = 25
GAME_OVER_FONT_SIZE = 50


class SnakeRenderer(RendererInterface):
    """
    Renders the Snake game using Pygame, implementing RendererInterface.

    While the game runs it draws the food, the snake and the score. Once the
    game is over the playfield is replaced by a "Game Over" banner and the
    final score.
    """

    def __init__(
        self,
        width: int = 500,
        height: int = 500,
        unit_size: int = 20,
        show_grid: bool = False
    ):
        """
        Initialize the renderer.

        Args:
            width: Board width in pixels
            height: Board height in pixels
            unit_size: Size of each grid cell in pixels
            show_grid: Draw subtle grid lines under the playfield
        """
        self._width = width
        self._height = height
        self._unit_size = unit_size
        self.show_grid = show_grid

        # Fonts are created on first draw so pygame.font can be initialized late
        self._score_font: Optional[pygame.font.Font] = None
        self._title_font: Optional[pygame.font.Font] = None

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the preferred render size."""
        return (self._width, self._height)

    def get_cell_size(self) -> int:
        """Get the current cell size."""
        return self._unit_size

    @property
    def score_font(self) -> pygame.font.Font:
        if self._score_font is None:
            self._score_font = pygame.font.Font(None, SCORE_FONT_SIZE)
        return self._score_font

    @property
    def title_font(self) -> pygame.font.Font:
        if self._title_font is None:
            self._title_font = pygame.font.Font(None, GAME_OVER_FONT_SIZE)
        return self._title_font

    def render(self, game_state: Dict[str, Any], surface: Optional[pygame.Surface] = None) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary from SnakeGame.get_state()
            surface: Pygame surface to draw on

        Raises:
            ValueError: If no surface is given
        """
        if surface is None:
            raise ValueError("No surface to render to")

        surface.fill(BACKGROUND_COLOR)

        if game_state["running"]:
            self._draw_playfield(game_state, surface)
        else:
            self._draw_game_over(game_state, surface)

    def _draw_playfield(self, game_state: Dict[str, Any], surface: pygame.Surface):
        """Draw food, snake and the running score."""
        unit = self._unit_size

        if self.show_grid:
            for x in range(0, self._width + 1, unit):
                pygame.draw.line(surface, GRID_COLOR, (x, 0), (x, self._height))
            for y in range(0, self._height + 1, unit):
                pygame.draw.line(surface, GRID_COLOR, (0, y), (self._width, y))

        # Food
        food = game_state["food"]
        pygame.draw.ellipse(surface, FOOD_COLOR, pygame.Rect(food["x"], food["y"], unit, unit))

        # Snake
        for i, segment in enumerate(game_state["snake"]):
            color = SNAKE_HEAD_COLOR if i == 0 else SNAKE_BODY_COLOR
            pygame.draw.rect(surface, color, pygame.Rect(segment["x"], segment["y"], unit, unit))

        self._draw_score(game_state["score"], surface)

    def _draw_score(self, score: int, surface: pygame.Surface):
        """Draw the score centered along the top edge."""
        text = self.score_font.render(f"Score: {score}", True, TEXT_COLOR)
        surface.blit(text, ((self._width - text.get_width()) // 2, 0))

    def _draw_game_over(self, game_state: Dict[str, Any], surface: pygame.Surface):
        """Draw the game over banner and final score."""
        title = self.title_font.render("Game Over", True, GAME_OVER_COLOR)
        title_rect = title.get_rect(center=(self._width // 2, self._height // 2))
        surface.blit(title, title_rect)

        self._draw_score(game_state["score"], surface)
