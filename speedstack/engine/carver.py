"""Puzzle carving: blank a size-calibrated number of cells from a solution."""

from __future__ import annotations

import random
from typing import List, Optional

from ..core.constants import DIFFICULTY_RANGES, EMPTY
from ..core.models import Coordinate, PuzzlePair, check_grid_size, copy_board
from ..utils.logger import get_logger
from .board import BoardFactory


LOGGER = get_logger(__name__)


class PuzzleCarver:
    """Produces ``(puzzle, solution)`` pairs for the game loop.

    The carver and its board factory share one random source, so a seed
    reproduces both the solution and the blanked positions.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        board_factory: Optional[BoardFactory] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self.board_factory = board_factory or BoardFactory(rng=self.rng)

    def cells_to_remove(self, size: int) -> int:
        difficulty = DIFFICULTY_RANGES[check_grid_size(size)]
        span = difficulty.max_empty - difficulty.min_empty + 1
        return difficulty.min_empty + int(self.rng.random() * span)

    def generate_puzzle(self, size: int) -> PuzzlePair:
        solution = self.board_factory.generate_complete_board(size)
        puzzle = copy_board(solution)

        to_remove = self.cells_to_remove(size)
        positions: List[Coordinate] = [(r, c) for r in range(size) for c in range(size)]
        self.rng.shuffle(positions)
        for row, col in positions[:to_remove]:
            puzzle[row][col] = EMPTY

        LOGGER.info(
            "Carved %sx%s puzzle with %s empty cells",
            size,
            size,
            min(to_remove, len(positions)),
        )
        return PuzzlePair(puzzle=puzzle, solution=solution)


def generate_puzzle(size: int, rng: Optional[random.Random] = None) -> PuzzlePair:
    """Generate a new puzzle of ``size`` x ``size`` with its solution."""

    return PuzzleCarver(rng=rng).generate_puzzle(size)
