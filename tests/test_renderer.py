"""
Tests for SnakeRenderer.

Rendering goes to an off-screen surface; pixels are sampled to check
what was drawn.
"""

import pytest

from classic_snake.games.snake.renderer import (
    SnakeRenderer, BACKGROUND_COLOR, FOOD_COLOR, SNAKE_HEAD_COLOR,
    SNAKE_BODY_COLOR, GAME_OVER_COLOR, GRID_COLOR,
)


def make_state(running=True, score=3):
    return {
        "snake": [{"x": 200, "y": 200}, {"x": 180, "y": 200}, {"x": 160, "y": 200}],
        "food": {"x": 300, "y": 300},
        "direction": 0,
        "score": score,
        "length": 3,
        "running": running,
        "frame": 10,
        "width": 500,
        "height": 500,
        "unit_size": 20,
    }


def rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


class TestRendererBasics:
    """Tests for renderer setup."""

    def test_preferred_size(self):
        """Test preferred size follows the board."""
        renderer = SnakeRenderer(width=400, height=300, unit_size=20)

        assert renderer.get_preferred_size() == (400, 300)
        assert renderer.get_cell_size() == 20

    def test_render_without_surface_raises(self):
        """Test a missing surface is an error."""
        renderer = SnakeRenderer()

        with pytest.raises(ValueError):
            renderer.render(make_state())

    def test_fonts_created_once(self):
        """Test fonts are created lazily and cached."""
        renderer = SnakeRenderer()

        assert renderer.score_font is renderer.score_font
        assert renderer.title_font is renderer.title_font


class TestPlayfield:
    """Tests for drawing a running game."""

    def test_head_body_and_food(self, surface):
        """Test head, body and food land on their cells."""
        SnakeRenderer().render(make_state(), surface)

        assert rgb(surface, 210, 210) == SNAKE_HEAD_COLOR
        assert rgb(surface, 190, 210) == SNAKE_BODY_COLOR
        assert rgb(surface, 170, 210) == SNAKE_BODY_COLOR
        assert rgb(surface, 310, 310) == FOOD_COLOR

    def test_food_is_round(self, surface):
        """Test the food marker leaves its cell corners empty."""
        SnakeRenderer().render(make_state(), surface)

        assert rgb(surface, 300, 300) == BACKGROUND_COLOR

    def test_empty_cells_are_background(self, surface):
        """Test untouched cells keep the background color."""
        SnakeRenderer().render(make_state(), surface)

        assert rgb(surface, 450, 450) == BACKGROUND_COLOR

    def test_score_drawn_at_top(self, surface):
        """Test the score text puts pixels in the top band."""
        SnakeRenderer().render(make_state(), surface)

        top_band = {rgb(surface, x, y) for x in range(150, 350) for y in range(0, 20)}
        assert top_band - {BACKGROUND_COLOR}

    def test_grid_lines_optional(self, surface):
        """Test grid lines are only drawn when enabled."""
        SnakeRenderer(show_grid=False).render(make_state(), surface)
        assert rgb(surface, 40, 450) == BACKGROUND_COLOR

        SnakeRenderer(show_grid=True).render(make_state(), surface)
        assert rgb(surface, 40, 450) == GRID_COLOR


class TestGameOverScreen:
    """Tests for drawing a finished game."""

    def test_playfield_hidden(self, surface):
        """Test snake and food are not drawn after game over."""
        SnakeRenderer().render(make_state(running=False), surface)

        assert rgb(surface, 210, 210) == BACKGROUND_COLOR
        assert rgb(surface, 310, 310) == BACKGROUND_COLOR

    def test_game_over_banner_centered(self, surface):
        """Test the red banner is drawn around the middle of the board."""
        SnakeRenderer().render(make_state(running=False), surface)

        band = {rgb(surface, x, y) for x in range(100, 400) for y in range(235, 265)}
        assert GAME_OVER_COLOR in band

        far_from_center = {rgb(surface, x, y) for x in range(0, 500) for y in range(400, 500)}
        assert far_from_center == {BACKGROUND_COLOR}

    def test_final_score_shown(self, surface):
        """Test the final score is still printed at the top."""
        SnakeRenderer().render(make_state(running=False, score=12), surface)

        top_band = {rgb(surface, x, y) for x in range(150, 350) for y in range(0, 20)}
        assert top_band - {BACKGROUND_COLOR}
