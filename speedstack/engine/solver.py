"""CP-SAT board completion using OR-Tools.

Generated puzzles are not required to have a unique solution; the solver
is used for hints and for reporting how many completions a puzzle admits.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ortools.sat.python import cp_model

from ..core.constants import EMPTY, box_config_for
from ..core.exceptions import SolverError
from ..core.models import Board
from ..utils.logger import get_logger
from .checker import is_valid_board

LOGGER = get_logger(__name__)


def _build_model(board: Board) -> Tuple[cp_model.CpModel, Dict[Tuple[int, int], cp_model.IntVar]]:
    size = len(board)
    model = cp_model.CpModel()
    cell_vars: Dict[Tuple[int, int], cp_model.IntVar] = {}

    for r in range(size):
        for c in range(size):
            value = board[r][c]
            if value == EMPTY:
                cell_vars[(r, c)] = model.new_int_var(1, size, f"x_{r}_{c}")
            else:
                cell_vars[(r, c)] = model.new_int_var(value, value, f"g_{r}_{c}")

    for r in range(size):
        model.add_all_different([cell_vars[(r, c)] for c in range(size)])
    for c in range(size):
        model.add_all_different([cell_vars[(r, c)] for r in range(size)])

    box = box_config_for(size)
    if not box.is_degenerate:
        for top in range(0, size, box.rows):
            for left in range(0, size, box.cols):
                model.add_all_different(
                    [
                        cell_vars[(r, c)]
                        for r in range(top, top + box.rows)
                        for c in range(left, left + box.cols)
                    ]
                )
    return model, cell_vars


def _extract(size: int, value_of, cell_vars) -> Board:
    return [[value_of(cell_vars[(r, c)]) for c in range(size)] for r in range(size)]


def solve_board(board: Board, timeout: float = 10.0) -> Optional[Board]:
    """Return one completion of ``board``, or None if it has none."""

    if not board or not is_valid_board(board):
        return None

    model, cell_vars = _build_model(board)
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    status = solver.solve(model)

    if status == cp_model.MODEL_INVALID:
        raise SolverError(model.validate())
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.debug("CP-SAT: no completion (status=%s)", solver.status_name(status))
        return None

    LOGGER.debug("CP-SAT: completion found in %.3fs", solver.wall_time)
    return _extract(len(board), solver.value, cell_vars)


class _SolutionCounter(cp_model.CpSolverSolutionCallback):
    def __init__(self, size: int, cell_vars, limit: int) -> None:
        super().__init__()
        self.size = size
        self.cell_vars = cell_vars
        self.limit = limit
        self.solutions: List[Board] = []

    def on_solution_callback(self) -> None:
        self.solutions.append(_extract(self.size, self.value, self.cell_vars))
        if len(self.solutions) >= self.limit:
            self.stop_search()


def count_solutions(board: Board, limit: int = 2, timeout: float = 10.0) -> int:
    """Count completions of ``board``, stopping once ``limit`` are found."""

    if limit < 1:
        raise ValueError("limit must be positive")
    if not board or not is_valid_board(board):
        return 0

    model, cell_vars = _build_model(board)
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.enumerate_all_solutions = True
    solver.parameters.num_workers = 1

    counter = _SolutionCounter(len(board), cell_vars, limit)
    status = solver.solve(model, counter)
    if status == cp_model.MODEL_INVALID:
        raise SolverError(model.validate())

    LOGGER.info(
        "CP-SAT: %d completion(s) found (limit=%d, status=%s)",
        len(counter.solutions),
        limit,
        solver.status_name(status),
    )
    return len(counter.solutions)
