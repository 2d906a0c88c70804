"""Data models supporting the puzzle engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .constants import EMPTY, GRID_SIZES
from .exceptions import InvalidGridSizeError

Board = List[List[int]]
Coordinate = Tuple[int, int]


def check_grid_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int) or size not in GRID_SIZES:
        raise InvalidGridSizeError(f"Grid size must be an integer in 1-9, got {size!r}")
    return size


def create_empty_board(size: int) -> Board:
    return [[EMPTY] * size for _ in range(size)]


def copy_board(board: Board) -> Board:
    return [list(row) for row in board]


def count_empty(board: Board) -> int:
    return sum(1 for row in board for value in row if value == EMPTY)


@dataclass
class PuzzlePair:
    """A carved puzzle together with the solved board it came from."""

    puzzle: Board
    solution: Board

    @property
    def size(self) -> int:
        return len(self.solution)

    def empty_cells(self) -> List[Coordinate]:
        return [
            (r, c)
            for r, row in enumerate(self.puzzle)
            for c, value in enumerate(row)
            if value == EMPTY
        ]

    def clue_count(self) -> int:
        return self.size * self.size - count_empty(self.puzzle)
