"""
Snake Game Panel - wires the game to a timer, the keyboard and a renderer.
"""
import logging
from typing import Optional, Tuple

import pygame

from .config import BoardConfig
from .game import SnakeGame, Direction
from .renderer import SnakeRenderer

logger = logging.getLogger(__name__)

# Posted by pygame.time.set_timer once per tick period
TICK_EVENT = pygame.USEREVENT + 1

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class GamePanel:
    """
    Owns one Snake game and everything needed to play it on screen.

    The host event loop hands every event to handle_event(). Arrow keys
    queue a heading for the next tick, TICK_EVENT advances the game, and
    after each change the panel asks for a redraw through needs_redraw.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        show_grid: bool = False,
        seed: Optional[int] = None
    ):
        self.config = config or BoardConfig()
        self.game = SnakeGame(self.config, seed=seed)
        self.renderer = SnakeRenderer(
            width=self.config.width,
            height=self.config.height,
            unit_size=self.config.unit_size,
            show_grid=show_grid,
        )
        self.timer_active = False
        self.needs_redraw = True

    @property
    def preferred_size(self) -> Tuple[int, int]:
        """Natural panel size in pixels."""
        return self.renderer.get_preferred_size()

    @property
    def running(self) -> bool:
        return self.game.running

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------

    def start(self):
        """Start the periodic tick timer."""
        if not self.game.running:
            return
        pygame.time.set_timer(TICK_EVENT, self.config.tick_ms)
        self.timer_active = True
        logger.info("Tick timer started (%d ms)", self.config.tick_ms)

    def stop(self):
        """Stop the periodic tick timer."""
        if self.timer_active:
            pygame.time.set_timer(TICK_EVENT, 0)
            self.timer_active = False

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Dispatch a pygame event.

        Args:
            event: Event from the host loop

        Returns:
            True if the panel consumed the event
        """
        if event.type == TICK_EVENT:
            self.tick()
            return True
        if event.type == pygame.KEYDOWN:
            return self.handle_direction_change(event.key)
        return False

    def handle_direction_change(self, key: int) -> bool:
        """
        Queue a new heading from an arrow key; other keys are ignored.

        Returns:
            True if the key changed the pending heading
        """
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return False
        return self.game.change_direction(direction)

    def tick(self):
        """Advance the game one step, stopping the timer on game over."""
        if self.game.running:
            self.game.tick()
            if not self.game.running:
                self.stop()
        self.needs_redraw = True

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self, surface: pygame.Surface):
        """Render the current state and clear the redraw request."""
        self.renderer.render(self.game.get_state(), surface)
        self.needs_redraw = False
