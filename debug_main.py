"""Convenience entrypoint with predefined generator settings for debugging.

Usage in a Python console (Jupyter-style)::

    import debug_main
    state = debug_main.prepare_state(size=9, seed=7)
    debug_main.step_fill(state)
    debug_main.step_carve(state)
    debug_main.step_validate(state)
    debug_main.step_count_solutions(state)
    pair = debug_main.build_result(state)

Call :func:`run_debug` for a one-liner, or execute the functions above one by
one to inspect intermediate state.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List

from speedstack.core.constants import DIFFICULTY_RANGES, EMPTY, GRID_SIZES
from speedstack.core.exceptions import BoardGenerationError
from speedstack.core.models import PuzzlePair, copy_board, count_empty
from speedstack.engine.board import BoardFactory
from speedstack.engine.carver import PuzzleCarver
from speedstack.engine.checker import find_conflicts, is_board_complete, is_valid_board
from speedstack.engine.solver import count_solutions
from speedstack.utils.logger import configure_logging
from speedstack.utils.pretty import pretty_print_board, print_puzzle_stats

DEFAULT_DEBUG_ARGS: Dict[str, Any] = {
    "size": 9,
    "seed": None,
    "solution_limit": 2,
    "solver_timeout": 10.0,
}

LOGGER = logging.getLogger(__name__)


def prepare_state(**overrides: Any) -> Dict[str, Any]:
    """Return a mutable state dictionary used by the step helpers."""

    args = {**DEFAULT_DEBUG_ARGS, **overrides}
    configure_logging(logging.DEBUG if args.get("verbose") else logging.INFO)

    seed = int(args["seed"]) if args.get("seed") is not None else random.randint(0, 1_000_000)
    rng = random.Random(seed)
    factory = BoardFactory(rng=rng)
    carver = PuzzleCarver(rng=rng, board_factory=factory)
    return {
        "size": int(args["size"]),
        "seed": seed,
        "factory": factory,
        "carver": carver,
        "solution": None,
        "puzzle": None,
        "validation": None,
        "solution_count": None,
        "solution_limit": int(args["solution_limit"]),
        "solver_timeout": float(args["solver_timeout"]),
    }


def step_fill(state: Dict[str, Any]):
    factory: BoardFactory = state["factory"]
    state["solution"] = factory.generate_complete_board(state["size"])
    LOGGER.info("Backtracks during fill: %s", factory.last_backtracks)
    return state["solution"]


def step_carve(state: Dict[str, Any]):
    """Blank cells from the filled solution the same way ``PuzzleCarver`` does."""

    if state["solution"] is None:
        raise RuntimeError("State missing 'solution'. Call step_fill() first.")
    carver: PuzzleCarver = state["carver"]
    size = state["size"]
    puzzle = copy_board(state["solution"])
    to_remove = carver.cells_to_remove(size)
    positions = [(r, c) for r in range(size) for c in range(size)]
    carver.rng.shuffle(positions)
    for row, col in positions[:to_remove]:
        puzzle[row][col] = EMPTY
    state["puzzle"] = puzzle
    return puzzle


def step_validate(state: Dict[str, Any]) -> List[str]:
    messages: List[str] = []
    solution = state["solution"]
    puzzle = state["puzzle"]
    if solution is not None:
        if not is_board_complete(solution):
            messages.append("solution has empty cells")
        if not is_valid_board(solution):
            messages.append(f"solution conflicts at {sorted(find_conflicts(solution))}")
    if puzzle is not None:
        if not is_valid_board(puzzle):
            messages.append(f"puzzle conflicts at {sorted(find_conflicts(puzzle))}")
        difficulty = DIFFICULTY_RANGES[state["size"]]
        empty = count_empty(puzzle)
        if not difficulty.contains(empty):
            messages.append(
                f"{empty} empty cells outside {difficulty.min_empty}-{difficulty.max_empty}"
            )
    state["validation"] = messages
    return messages


def step_count_solutions(state: Dict[str, Any]) -> int:
    if state["puzzle"] is None:
        raise RuntimeError("State missing 'puzzle'. Call step_carve() first.")
    state["solution_count"] = count_solutions(
        state["puzzle"],
        limit=state["solution_limit"],
        timeout=state["solver_timeout"],
    )
    return state["solution_count"]


def build_result(state: Dict[str, Any]) -> PuzzlePair:
    return PuzzlePair(puzzle=state["puzzle"], solution=state["solution"])


def run_debug(**overrides: Any) -> PuzzlePair:
    """Execute the pipeline step by step and print the result."""

    state = prepare_state(**overrides)
    step_fill(state)
    pretty_print_board(state["solution"], label="--- Filled ---")
    step_carve(state)
    messages = step_validate(state)
    if messages:
        raise BoardGenerationError(f"Validation failed: {messages}")
    step_count_solutions(state)
    pair = build_result(state)
    print_puzzle_stats(pair, seed=state["seed"])
    return pair


def run_all_sizes(seed: int | None = None) -> Dict[int, PuzzlePair]:
    """Generate one puzzle per supported grid size."""

    return {size: run_debug(size=size, seed=seed) for size in GRID_SIZES}


def main() -> None:  # pragma: no cover - manual helper
    state = prepare_state()
    step_fill(state)
    step_carve(state)
    print(f"Seed: {state['seed']}")
    print(f"Validation: {step_validate(state) or 'ok'}")
    print(f"Completions (limit {state['solution_limit']}): {step_count_solutions(state)}")
    print_puzzle_stats(build_result(state), seed=state["seed"])


if __name__ == "__main__":
    main()
