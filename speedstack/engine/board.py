"""Randomized backtracking construction of solved boards."""

from __future__ import annotations

import random
from typing import Optional

from ..core.constants import EMPTY
from ..core.exceptions import BoardGenerationError
from ..core.models import Board, check_grid_size, create_empty_board
from ..utils.logger import get_logger
from .checker import find_empty_cell, is_valid_placement


LOGGER = get_logger(__name__)


class BoardFactory:
    """Builds fully solved N x N boards satisfying row, column and box rules."""

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self.last_backtracks = 0

    def generate_complete_board(self, size: int) -> Board:
        check_grid_size(size)
        board = create_empty_board(size)
        self.last_backtracks = 0
        if not self._fill(board):
            LOGGER.error("Backtracking exhausted on a %sx%s board", size, size)
            raise BoardGenerationError(f"Unable to fill a {size}x{size} board")
        LOGGER.debug(
            "Generated %sx%s board with %s backtracks", size, size, self.last_backtracks
        )
        return board

    def _fill(self, board: Board) -> bool:
        empty = find_empty_cell(board)
        if empty is None:
            return True
        row, col = empty

        candidates = list(range(1, len(board) + 1))
        self.rng.shuffle(candidates)
        for num in candidates:
            if not is_valid_placement(board, row, col, num):
                continue
            board[row][col] = num
            if self._fill(board):
                return True
            board[row][col] = EMPTY
            self.last_backtracks += 1
        return False


def generate_complete_board(size: int, rng: Optional[random.Random] = None) -> Board:
    """Return a freshly generated solved board of ``size`` x ``size``."""

    return BoardFactory(rng=rng).generate_complete_board(size)
