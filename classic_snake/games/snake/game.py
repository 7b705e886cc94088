"""
Snake Game Core - Pure game logic without rendering.

The snake lives in a pre-sized buffer of grid coordinates with a separate
length counter, so a tick never allocates or resizes.
"""
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple, Optional, Dict, Any

import numpy as np

from ...core.game_interface import GameInterface, GameMetadata, GameStatus
from .config import BoardConfig

logger = logging.getLogger(__name__)


class Direction(IntEnum):
    """Snake movement directions."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3


# Unit step (dx, dy) for each heading, screen coordinates (y grows down)
DELTAS = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}

OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Point:
    """A cell corner on the board, in logical units."""
    x: int
    y: int

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


class SnakeGame(GameInterface):
    """
    Core Snake game logic.

    The snake moves one cell per tick in its heading. Eating food grows it
    by one segment and scores a point. Hitting itself or leaving the board
    ends the game for good; there is no restart from GAME_OVER short of
    calling reset().
    """

    def __init__(self, config: Optional[BoardConfig] = None, seed: Optional[int] = None):
        """
        Initialize the game.

        Args:
            config: Board sizing and timing (defaults to a 500x500 board of 20-unit cells)
            seed: Seed for food placement, None for OS entropy
        """
        self.config = config or BoardConfig()
        self._rng = np.random.default_rng(seed)

        # Row i holds (x, y) of segment i; row 0 is the head
        self._body = np.zeros((self.config.capacity, 2), dtype=np.int64)
        self._length = 0
        self._food = Point(0, 0)
        self._direction = Direction.RIGHT
        self._pending = Direction.RIGHT
        self._score = 0
        self._frame_count = 0
        self._status = GameStatus.RUNNING

        self.reset()

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        """Return Snake game metadata."""
        return GameMetadata(
            name="Snake",
            id="snake",
            description="Eat food to grow; don't hit the walls or yourself",
        )

    def reset(self) -> Dict[str, Any]:
        """
        Reset game state and return initial state.

        Returns:
            Dictionary containing the initial game state
        """
        self._body[:] = (self.config.start_x, self.config.start_y)
        self._length = self.config.initial_length
        self._direction = Direction.RIGHT
        self._pending = Direction.RIGHT
        self._score = 0
        self._frame_count = 0
        self._status = GameStatus.RUNNING

        self.place_food()
        logger.info(
            "New game on %dx%d grid, food at (%d, %d)",
            self.config.grid_width, self.config.grid_height,
            self._food.x, self._food.y,
        )
        return self.get_state()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def head(self) -> Point:
        return Point(int(self._body[0, 0]), int(self._body[0, 1]))

    @property
    def body(self) -> List[Tuple[int, int]]:
        """Occupied cells, head first."""
        return [(int(x), int(y)) for x, y in self._body[:self._length]]

    @property
    def length(self) -> int:
        return self._length

    @property
    def score(self) -> int:
        return self._score

    @property
    def food(self) -> Point:
        return self._food

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def pending_direction(self) -> Direction:
        return self._pending

    @property
    def frame_count(self) -> int:
        return self._frame_count

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def change_direction(self, direction: Direction) -> bool:
        """
        Request a new heading for the next tick.

        A request for the direct reverse of the current heading is ignored,
        otherwise the snake would turn into its own neck.

        Args:
            direction: Requested heading

        Returns:
            True if the request was accepted
        """
        direction = Direction(direction)
        if direction == OPPOSITES[self._direction]:
            return False
        self._pending = direction
        return True

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def tick(self) -> Dict[str, Any]:
        """
        Execute one game step: move, eat, then check for collisions.

        Returns:
            Game state after the step
        """
        if self._status is not GameStatus.RUNNING:
            return self.get_state()

        self._frame_count += 1
        self._move()
        self._check_food()
        self._check_collision()

        return self.get_state()

    def _move(self):
        """Shift every segment toward the tail and advance the head."""
        self._direction = self._pending

        # Slot `length` receives the old tail so growth can reveal it
        n = min(self._length, self.config.capacity - 1)
        self._body[1:n + 1] = self._body[0:n]

        dx, dy = DELTAS[self._direction]
        self._body[0, 0] += dx * self.config.unit_size
        self._body[0, 1] += dy * self.config.unit_size

    def _check_food(self):
        """
        Grow and score when the head lands on the food.

        A snake that already fills the buffer cannot grow; the food is
        still moved but neither length nor score changes, which keeps
        length == initial_length + score.
        """
        if self.head != self._food:
            return

        if self._length < self.config.capacity:
            self._length += 1
            self._score += 1
        self.place_food()
        logger.debug(
            "Food eaten: score=%d length=%d next food at (%d, %d)",
            self._score, self._length, self._food.x, self._food.y,
        )

    def _check_collision(self):
        """End the game if the head hits the body or leaves the board."""
        head = self._body[0]
        hit_body = bool(np.any(np.all(self._body[1:self._length] == head, axis=1)))

        # Strict comparison: x == width (or y == height) is still alive
        x, y = int(head[0]), int(head[1])
        out_of_bounds = (
            x < 0 or x > self.config.width
            or y < 0 or y > self.config.height
        )

        if hit_body or out_of_bounds:
            self._status = GameStatus.GAME_OVER
            logger.info(
                "Game over (%s) at (%d, %d): score=%d after %d ticks",
                "self" if hit_body else "wall", x, y,
                self._score, self._frame_count,
            )

    def place_food(self, x: Optional[int] = None, y: Optional[int] = None) -> Point:
        """
        Place food on the board.

        With no arguments a uniformly random cell is chosen. Cells under the
        snake are not excluded.

        Args:
            x: Explicit x coordinate (logical units)
            y: Explicit y coordinate (logical units)

        Returns:
            The new food position

        Raises:
            ValueError: If only one coordinate is given or the cell is off the grid
        """
        if x is None and y is None:
            x = int(self._rng.integers(self.config.grid_width)) * self.config.unit_size
            y = int(self._rng.integers(self.config.grid_height)) * self.config.unit_size
        elif x is None or y is None:
            raise ValueError("place_food needs both x and y, or neither")
        elif not self.config.contains_cell(x, y):
            raise ValueError(f"({x}, {y}) is not a cell on the board")

        self._food = Point(x, y)
        return self._food

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state for rendering.

        Returns:
            Dictionary containing full game state
        """
        return {
            "snake": [{"x": x, "y": y} for x, y in self.body],
            "food": self._food.to_dict(),
            "direction": int(self._direction),
            "score": self._score,
            "length": self._length,
            "running": self.running,
            "frame": self._frame_count,
            "width": self.config.width,
            "height": self.config.height,
            "unit_size": self.config.unit_size,
        }
