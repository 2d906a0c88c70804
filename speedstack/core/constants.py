"""Shared constants and lookup tables for the Speed Stack puzzle engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

EMPTY = 0
MIN_GRID_SIZE = 1
MAX_GRID_SIZE = 9
GRID_SIZES = range(MIN_GRID_SIZE, MAX_GRID_SIZE + 1)


@dataclass(frozen=True)
class BoxConfig:
    """Sub-region shape for a grid size."""

    rows: int
    cols: int

    @property
    def is_degenerate(self) -> bool:
        # A single-row or single-column box is already covered by the line checks.
        return self.rows == 1 or self.cols == 1


@dataclass(frozen=True)
class DifficultyRange:
    """Inclusive bounds on how many cells are blanked for a grid size."""

    min_empty: int
    max_empty: int

    def contains(self, count: int) -> bool:
        return self.min_empty <= count <= self.max_empty


BOX_CONFIGS: Dict[int, BoxConfig] = {
    1: BoxConfig(1, 1),
    2: BoxConfig(1, 2),
    3: BoxConfig(1, 3),
    4: BoxConfig(2, 2),
    5: BoxConfig(1, 5),
    6: BoxConfig(2, 3),
    7: BoxConfig(1, 7),
    8: BoxConfig(2, 4),
    9: BoxConfig(3, 3),
}

DIFFICULTY_RANGES: Dict[int, DifficultyRange] = {
    1: DifficultyRange(1, 1),
    2: DifficultyRange(2, 3),
    3: DifficultyRange(4, 5),
    4: DifficultyRange(6, 8),
    5: DifficultyRange(10, 12),
    6: DifficultyRange(15, 18),
    7: DifficultyRange(20, 24),
    8: DifficultyRange(28, 32),
    9: DifficultyRange(40, 45),
}


def box_config_for(size: int) -> BoxConfig:
    """Return the box layout for ``size``; unknown sizes get a row-spanning box."""

    return BOX_CONFIGS.get(size, BoxConfig(1, max(size, 1)))


class Direction(str, Enum):
    """Cursor movement directions on the grid."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Timer configuration (seconds)
INITIAL_TIME = 30
TIME_BONUS = 8
TIME_PENALTY = 5
MAX_TIME = 99

# Scoring configuration
POINTS_PER_SIZE = 10
SPEED_MULTIPLIER_MAX = 3.0
SPEED_MULTIPLIER_MIN = 1.0
SPEED_DECAY_SECONDS = 30.0

# Level progression: (completed puzzles below this count, grid size)
LEVEL_THRESHOLDS = (
    (3, 1),
    (6, 2),
    (9, 3),
    (12, 4),
    (14, 5),
    (16, 6),
    (18, 7),
    (20, 8),
)
