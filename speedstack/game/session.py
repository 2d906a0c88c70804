"""Game-loop state manager for Speed Stack.

A session owns the current puzzle, the player's board, the countdown timer
and the score. It calls into the engine on every edit and moves to the next
level when the player's board becomes a complete, valid grid.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from ..core.constants import INITIAL_TIME, MAX_TIME, TIME_BONUS, TIME_PENALTY
from ..core.models import Board, PuzzlePair, check_grid_size, copy_board
from ..engine.carver import PuzzleCarver
from ..engine.checker import find_empty_cell, is_valid_move
from ..engine.solver import solve_board
from ..utils.logger import get_logger
from .rules import (
    board_with_cell,
    board_with_cleared_cell,
    calculate_points,
    get_next_size,
    is_clue_cell,
    is_puzzle_correctly_completed,
    should_apply_penalty,
)


LOGGER = get_logger(__name__)


class MoveOutcome(str, Enum):
    """Result of a player edit."""

    IGNORED = "IGNORED"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    SOLVED = "SOLVED"


@dataclass
class GameConfig:
    initial_time: int = INITIAL_TIME
    time_bonus: int = TIME_BONUS
    time_penalty: int = TIME_PENALTY
    max_time: int = MAX_TIME
    start_size: int = 1
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        check_grid_size(self.start_size)
        if self.initial_time <= 0:
            raise ValueError("initial_time must be positive")
        if self.max_time < self.initial_time:
            raise ValueError("max_time must be at least initial_time")


class GameSession:
    """Tracks score, time and level across consecutive puzzles."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        carver: Optional[PuzzleCarver] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or GameConfig()
        self.carver = carver or PuzzleCarver(seed=self.config.seed)
        self.clock = clock
        self.pair: PuzzlePair
        self.user_board: Board = []
        self._reset_state()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def _reset_state(self) -> None:
        self.has_started = False
        self.is_game_over = False
        self.current_size = self.config.start_size
        self.max_level = self.config.start_size
        self.score = 0
        self.completed_count = 0
        self.bonuses = 0
        self.penalties = 0
        self.time_remaining = self.config.initial_time
        self.selected_cell: Optional[Tuple[int, int]] = None
        self.selected_number: Optional[int] = None
        self.game_started_at: Optional[float] = None
        self.new_puzzle(self.current_size)

    def start(self) -> None:
        if self.has_started:
            return
        self.has_started = True
        now = self.clock()
        self.game_started_at = now
        self.puzzle_started_at = now
        LOGGER.info("Game started at size %sx%s", self.current_size, self.current_size)

    def restart(self) -> None:
        LOGGER.info("Restarting game (final score %s)", self.score)
        self._reset_state()

    def new_puzzle(self, size: int) -> None:
        self.pair = self.carver.generate_puzzle(size)
        self.user_board = copy_board(self.pair.puzzle)
        self.selected_cell = None
        self.selected_number = None
        self.puzzle_started_at = self.clock()

    def tick(self, seconds: int = 1) -> None:
        if not self.has_started or self.is_game_over:
            return
        self.time_remaining = max(0, self.time_remaining - seconds)
        if self.time_remaining == 0:
            self._end_game()

    def _end_game(self) -> None:
        self.is_game_over = True
        LOGGER.info(
            "Game over: score %s after %s puzzles", self.score, self.completed_count
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def puzzle(self) -> Board:
        return self.pair.puzzle

    @property
    def solution(self) -> Board:
        return self.pair.solution

    def puzzle_elapsed(self) -> float:
        return self.clock() - self.puzzle_started_at

    def play_time(self) -> float:
        if self.game_started_at is None:
            return 0.0
        return self.clock() - self.game_started_at

    def summary(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "max_level": self.max_level,
            "completed_count": self.completed_count,
            "bonuses": self.bonuses,
            "penalties": self.penalties,
            "play_time": round(self.play_time(), 1),
        }

    # ------------------------------------------------------------------
    # Player input
    # ------------------------------------------------------------------
    def _accepts_input(self) -> bool:
        return self.has_started and not self.is_game_over

    def _is_editable(self, row: int, col: int) -> bool:
        size = self.current_size
        if not (0 <= row < size and 0 <= col < size):
            return False
        return not is_clue_cell(self.puzzle, row, col)

    def select_cell(self, row: int, col: int) -> Optional[MoveOutcome]:
        """Click on a cell: fill it with the selected number, or select it."""

        if not self._accepts_input() or not self._is_editable(row, col):
            return None
        if self.selected_number is not None:
            return self.fill_cell(row, col, self.selected_number)
        self.selected_cell = (row, col)
        return None

    def select_number(self, num: int) -> Optional[MoveOutcome]:
        """Toggle the selected number, filling the selected cell if there is one."""

        if not self._accepts_input():
            return None
        if self.selected_number == num:
            self.selected_number = None
            return None
        self.selected_number = num
        if self.selected_cell is not None:
            row, col = self.selected_cell
            self.selected_cell = None
            return self.fill_cell(row, col, num)
        return None

    def fill_cell(self, row: int, col: int, num: int) -> MoveOutcome:
        if not self._accepts_input() or not self._is_editable(row, col):
            return MoveOutcome.IGNORED

        # Overwriting a cell is judged against the board without its old value.
        base = board_with_cleared_cell(self.user_board, row, col)
        if should_apply_penalty(base, row, col, num, timer_started=self.has_started):
            self.penalties += 1
            self.time_remaining = max(0, self.time_remaining - self.config.time_penalty)
            LOGGER.debug("Rejected %s at (%s,%s); %ss left", num, row, col, self.time_remaining)
            if self.time_remaining == 0:
                self._end_game()
            return MoveOutcome.REJECTED

        self.user_board = board_with_cell(base, row, col, num)
        if is_puzzle_correctly_completed(self.user_board):
            self._complete_level()
            return MoveOutcome.SOLVED
        return MoveOutcome.ACCEPTED

    def clear_cell(self, row: int, col: int) -> bool:
        if not self._accepts_input() or not self._is_editable(row, col):
            return False
        self.user_board = board_with_cleared_cell(self.user_board, row, col)
        return True

    def hint(self) -> Optional[Tuple[int, int, int]]:
        """Fill the first empty cell with a digit from a completion of the current board."""

        if not self._accepts_input():
            return None
        empty = find_empty_cell(self.user_board)
        if empty is None:
            return None
        row, col = empty

        completion = solve_board(self.user_board)
        if completion is not None:
            num = completion[row][col]
        else:
            num = self.solution[row][col]
            if not is_valid_move(self.user_board, row, col, num):
                LOGGER.info("No completion reachable from the current board")
                return None
        self.fill_cell(row, col, num)
        return row, col, num

    def _complete_level(self) -> None:
        size = self.current_size
        points = calculate_points(size, self.puzzle_elapsed())
        self.score += points
        self.completed_count += 1
        self.bonuses += 1
        self.time_remaining = min(self.time_remaining + self.config.time_bonus, self.config.max_time)
        next_size = max(self.config.start_size, get_next_size(self.completed_count))
        self.current_size = next_size
        self.max_level = max(self.max_level, next_size)
        LOGGER.info(
            "Solved %sx%s for %s points (score %s); next size %sx%s",
            size,
            size,
            points,
            self.score,
            next_size,
            next_size,
        )
        self.new_puzzle(next_size)
