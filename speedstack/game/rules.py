"""Scoring, level progression and move rules for the Speed Stack game."""

from __future__ import annotations

from ..core.constants import (
    EMPTY,
    LEVEL_THRESHOLDS,
    MAX_GRID_SIZE,
    POINTS_PER_SIZE,
    SPEED_DECAY_SECONDS,
    SPEED_MULTIPLIER_MAX,
    SPEED_MULTIPLIER_MIN,
)
from ..core.models import Board, copy_board
from ..engine.checker import is_board_complete, is_valid_board, is_valid_move


def calculate_speed_multiplier(elapsed_seconds: float) -> float:
    """Linear decay from the maximum multiplier at 0s to the minimum at the decay window."""

    elapsed = min(max(elapsed_seconds, 0.0), SPEED_DECAY_SECONDS)
    fraction = elapsed / SPEED_DECAY_SECONDS
    return SPEED_MULTIPLIER_MAX - (SPEED_MULTIPLIER_MAX - SPEED_MULTIPLIER_MIN) * fraction


def calculate_points(grid_size: int, elapsed_seconds: float) -> int:
    base_points = grid_size * POINTS_PER_SIZE
    return int(round(base_points * calculate_speed_multiplier(elapsed_seconds)))


def get_next_size(completed: int) -> int:
    """Grid size to play after ``completed`` puzzles."""

    for limit, size in LEVEL_THRESHOLDS:
        if completed < limit:
            return size
    return MAX_GRID_SIZE


def should_apply_penalty(board: Board, row: int, col: int, num: int, timer_started: bool) -> bool:
    return timer_started and not is_valid_move(board, row, col, num)


def is_puzzle_correctly_completed(board: Board) -> bool:
    """Any complete, valid board wins, not only the stored solution."""

    return is_board_complete(board) and is_valid_board(board)


def board_with_cell(board: Board, row: int, col: int, num: int) -> Board:
    updated = copy_board(board)
    updated[row][col] = num
    return updated


def board_with_cleared_cell(board: Board, row: int, col: int) -> Board:
    return board_with_cell(board, row, col, EMPTY)


def is_clue_cell(puzzle: Board, row: int, col: int) -> bool:
    return puzzle[row][col] != EMPTY
