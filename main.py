"""CLI entrypoint for the Speed Stack Sudoku puzzle generator."""

from __future__ import annotations

import argparse
import json
import logging
import random
from pathlib import Path
from typing import Any, Dict

from speedstack.core.constants import DIFFICULTY_RANGES, GRID_SIZES, box_config_for
from speedstack.engine.carver import PuzzleCarver
from speedstack.engine.checker import is_valid_board
from speedstack.engine.solver import count_solutions
from speedstack.utils.logger import configure_logging
from speedstack.utils.pretty import print_puzzle_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate variable-size Sudoku puzzles for Speed Stack",
    )
    parser.add_argument(
        "--size",
        type=int,
        required=True,
        choices=list(GRID_SIZES),
        help="Grid size N for an N x N board (1-9)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print the puzzle, solution and stats instead of JSON",
    )
    parser.add_argument(
        "--count-solutions",
        type=int,
        default=0,
        metavar="LIMIT",
        help="Count puzzle completions with CP-SAT, stopping at LIMIT (0 disables)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.count_solutions < 0:
        parser.error("--count-solutions must be zero or positive")

    seed = args.seed if args.seed is not None else random.randint(0, 1_000_000)
    carver = PuzzleCarver(seed=seed)
    pair = carver.generate_puzzle(args.size)

    if args.pretty:
        print_puzzle_stats(pair, seed=seed)
        return

    box = box_config_for(args.size)
    difficulty = DIFFICULTY_RANGES[args.size]
    payload: Dict[str, Any] = {
        "size": args.size,
        "seed": seed,
        "box": {"rows": box.rows, "cols": box.cols},
        "difficulty": {"min_empty": difficulty.min_empty, "max_empty": difficulty.max_empty},
        "puzzle": pair.puzzle,
        "solution": pair.solution,
        "empty_cells": len(pair.empty_cells()),
        "valid": is_valid_board(pair.solution),
    }
    if args.count_solutions:
        payload["solutions"] = count_solutions(pair.puzzle, limit=args.count_solutions)

    output_text = json.dumps(payload, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
