"""Cursor movement across an N x N grid."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import Direction


@dataclass(frozen=True)
class NavigationResult:
    row: int
    col: int
    moved: bool


_STEPS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def calculate_next_cell(
    row: int,
    col: int,
    grid_size: int,
    direction: Direction | str,
    jump: bool = False,
) -> NavigationResult:
    """Move one cell in ``direction``, or to the grid edge when ``jump`` is set."""

    if not (0 <= row < grid_size and 0 <= col < grid_size):
        return NavigationResult(row, col, False)

    dr, dc = _STEPS[Direction(direction)]
    if jump:
        target_row = row if dr == 0 else (0 if dr < 0 else grid_size - 1)
        target_col = col if dc == 0 else (0 if dc < 0 else grid_size - 1)
    else:
        target_row, target_col = row + dr, col + dc

    if not (0 <= target_row < grid_size and 0 <= target_col < grid_size):
        return NavigationResult(row, col, False)
    if (target_row, target_col) == (row, col):
        return NavigationResult(row, col, False)
    return NavigationResult(target_row, target_col, True)
