"""Constraint checks for N x N boards.

All functions are pure: they never mutate the board they are given and
report invalid input by returning ``False`` rather than raising, so the
game loop can call them on every keystroke without exception handling.
"""

from __future__ import annotations

from typing import Optional, Set, Tuple

from ..core.constants import EMPTY, box_config_for
from ..core.models import Board, copy_board


def is_valid_placement(board: Board, row: int, col: int, num: int) -> bool:
    """Return True when ``num`` does not already appear in the row, column or box.

    The target cell itself is not required to be empty; callers re-validating
    a placed digit must clear it first.
    """

    size = len(board)

    for x in range(size):
        if board[row][x] == num:
            return False

    for x in range(size):
        if board[x][col] == num:
            return False

    box = box_config_for(size)
    if box.is_degenerate:
        return True

    box_row = (row // box.rows) * box.rows
    box_col = (col // box.cols) * box.cols
    for r in range(box_row, box_row + box.rows):
        for c in range(box_col, box_col + box.cols):
            if board[r][c] == num:
                return False
    return True


def _in_range(value, upper: int, lower: int = 0) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return lower <= value < upper


def is_valid_move(board: Board, row: int, col: int, num: int) -> bool:
    """Guarded :func:`is_valid_placement` that rejects out-of-range input."""

    size = len(board)
    if not _in_range(row, size) or not _in_range(col, size):
        return False
    if not _in_range(num, size + 1, lower=1):
        return False
    return is_valid_placement(board, row, col, num)


def is_valid_board(board: Board) -> bool:
    """Check every filled cell against the rest of the board.

    Partially filled boards are accepted as long as no two filled cells
    conflict. Work happens on a private copy, the caller's board is untouched.
    """

    size = len(board)
    scratch = copy_board(board)
    for row in range(size):
        for col in range(size):
            num = scratch[row][col]
            if num == EMPTY:
                continue
            if not _in_range(num, size + 1, lower=1):
                return False
            scratch[row][col] = EMPTY
            valid = is_valid_placement(scratch, row, col, num)
            scratch[row][col] = num
            if not valid:
                return False
    return True


def is_board_complete(board: Board) -> bool:
    """True when no cell is empty. Says nothing about validity."""

    return all(value != EMPTY for row in board for value in row)


def find_empty_cell(board: Board) -> Optional[Tuple[int, int]]:
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if value == EMPTY:
                return r, c
    return None


def find_conflicts(board: Board) -> Set[Tuple[int, int]]:
    """Return every filled cell that clashes with another cell."""

    conflicts: Set[Tuple[int, int]] = set()
    scratch = copy_board(board)
    size = len(board)
    for row in range(size):
        for col in range(size):
            num = scratch[row][col]
            if num == EMPTY:
                continue
            scratch[row][col] = EMPTY
            if not is_valid_placement(scratch, row, col, num):
                conflicts.add((row, col))
            scratch[row][col] = num
    return conflicts
