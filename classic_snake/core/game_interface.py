"""
Abstract game interface for Classic Snake.

Games implement GameInterface and provide GameMetadata.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any


class GameStatus(Enum):
    """Lifecycle states of a single game session."""
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Snake")
    id: str                             # Unique identifier (e.g., "snake")
    description: str                    # Brief description


class GameInterface(ABC):
    """
    Abstract base class for tick-driven games.

    Games handle the core logic, rules, and state management.
    They know nothing about windows, timers, or keyboards; a panel
    feeds them ticks and input and a renderer draws their state.
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Reset the game to initial state.

        Returns:
            Initial game state dictionary
        """
        pass

    @abstractmethod
    def tick(self) -> Dict[str, Any]:
        """
        Advance the game by one fixed time step.

        Calling tick() once the game is over leaves the state untouched.

        Returns:
            Game state dictionary after the step
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing all state needed for rendering
        """
        pass

    @property
    @abstractmethod
    def status(self) -> GameStatus:
        """Current lifecycle state."""
        pass

    @property
    def running(self) -> bool:
        """True while the game is live."""
        return self.status is GameStatus.RUNNING
