"""
Snake board configuration.
"""

from dataclasses import dataclass, asdict, fields
from typing import Dict, Any


@dataclass(frozen=True)
class BoardConfig:
    """Immutable sizing and timing configuration for one Snake board."""

    # Canvas dimensions in logical units
    width: int = 500
    height: int = 500
    unit_size: int = 20

    # Timer period between ticks
    tick_ms: int = 80

    # Starting snake: every segment stacked on the start cell
    initial_length: int = 5
    start_x: int = 0
    start_y: int = 0

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{f.name} must be an integer, got {value!r}")
        if self.unit_size <= 0:
            raise ValueError(f"unit_size must be positive, got {self.unit_size}")
        for name in ("width", "height"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
            if value % self.unit_size:
                raise ValueError(
                    f"{name}={value} is not a multiple of unit_size={self.unit_size}"
                )
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if not 1 <= self.initial_length <= self.capacity:
            raise ValueError(
                f"initial_length must be in [1, {self.capacity}], got {self.initial_length}"
            )
        if not self.contains_cell(self.start_x, self.start_y):
            raise ValueError(
                f"start cell ({self.start_x}, {self.start_y}) is not on the grid"
            )

    @property
    def grid_width(self) -> int:
        """Grid width in cells."""
        return self.width // self.unit_size

    @property
    def grid_height(self) -> int:
        """Grid height in cells."""
        return self.height // self.unit_size

    @property
    def capacity(self) -> int:
        """Total number of grid cells, the most segments a snake can have."""
        return (self.width * self.height) // (self.unit_size * self.unit_size)

    def contains_cell(self, x: int, y: int) -> bool:
        """True if (x, y) is the corner of a cell inside the grid."""
        return (
            0 <= x < self.width
            and 0 <= y < self.height
            and x % self.unit_size == 0
            and y % self.unit_size == 0
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoardConfig":
        """Create config from dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})
