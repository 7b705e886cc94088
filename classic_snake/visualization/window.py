"""
Game Window - top-level pygame window hosting the Snake game panel.
"""
import logging
import os
from typing import Optional

import pygame

from ..games.snake.config import BoardConfig
from ..games.snake.panel import GamePanel

logger = logging.getLogger(__name__)


class GameWindow:
    """
    Fixed-size, non-resizable window that shows exactly one GamePanel.

    The window has no game state of its own. It forwards events to the
    panel, repaints when the panel asks for it, and shuts pygame down when
    closed.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        title: str = "Snake game",
        fps: int = 60,
        show_grid: bool = False,
        seed: Optional[int] = None
    ):
        """
        Create the window and its panel.

        Args:
            config: Board configuration handed to the panel
            title: Window caption
            fps: Frame rate cap for the event loop
            show_grid: Draw grid lines on the playfield
            seed: Seed for food placement
        """
        # Must be set before the display mode is chosen
        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        pygame.init()

        self.panel = GamePanel(config, show_grid=show_grid, seed=seed)
        self.window_width, self.window_height = self.panel.preferred_size
        self.fps = fps
        self.title = title

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()

        self.running = True
        self._closed = False

        self.panel.draw(self.screen)
        pygame.display.flip()

    def process_events(self) -> bool:
        """
        Drain the pygame event queue into the panel.

        Returns:
            False once the window has been asked to close
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.info("Window closed")
                self.running = False
                return False
            self.panel.handle_event(event)
        return True

    def run(self):
        """Run the event loop until the window is closed."""
        self.panel.start()
        try:
            while self.running:
                if not self.process_events():
                    break

                if self.panel.needs_redraw:
                    self.panel.draw(self.screen)
                    pygame.display.flip()

                self.clock.tick(self.fps)
        finally:
            self.close()

    def close(self):
        """Stop the panel timer and shut pygame down."""
        if self._closed:
            return
        self._closed = True
        self.panel.stop()
        pygame.quit()
