"""Pretty-print helpers for boards and puzzles."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, Optional, Set, Tuple

from ..core.constants import DIFFICULTY_RANGES, EMPTY, box_config_for

if TYPE_CHECKING:
    from ..core.models import Board, PuzzlePair


def cell_symbol(value: int) -> str:
    return "." if value == EMPTY else str(value)


def format_board(board: Board, *, marked: Optional[Iterable[Tuple[int, int]]] = None) -> str:
    """Render a board with separators on the sub-box boundaries.

    Cells listed in ``marked`` are rendered with a trailing ``!``.
    """

    size = len(board)
    if size == 0:
        return ""
    box = box_config_for(size)
    flagged: Set[Tuple[int, int]] = set(marked or ())

    lines = []
    separator = None
    if not box.is_degenerate:
        segment = "-" * (3 * box.cols - 1)
        separator = "-+-".join([segment] * (size // box.cols))

    for r in range(size):
        if separator and r and r % box.rows == 0:
            lines.append(separator)
        parts = []
        for c in range(size):
            if not box.is_degenerate and c and c % box.cols == 0:
                parts.append("|")
            symbol = cell_symbol(board[r][c])
            parts.append(f"{symbol}!" if (r, c) in flagged else symbol.rjust(2))
        lines.append(" ".join(parts))
    return "\n".join(lines)


def pretty_print_board(board: Board, *, label: str | None = None, stream=None) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(board), file=stream)


def print_puzzle_stats(pair: PuzzlePair, *, seed: Optional[int] = None, stream=None) -> None:
    """Print puzzle + solution with a short summary."""

    stream = stream or sys.stdout
    size = pair.size
    total = size * size
    empty = total - pair.clue_count()
    difficulty = DIFFICULTY_RANGES.get(size)
    box = box_config_for(size)

    pretty_print_board(pair.puzzle, label="--- Puzzle ---", stream=stream)
    print(file=stream)
    pretty_print_board(pair.solution, label="--- Solution ---", stream=stream)

    print(file=stream)
    print("--- Stats ---", file=stream)
    print(f"  Size:          {size} x {size} ({total} cells)", file=stream)
    box_label = "none" if box.is_degenerate else f"{box.rows} x {box.cols}"
    print(f"  Boxes:         {box_label}", file=stream)
    print(f"  Clues:         {pair.clue_count()}", file=stream)
    if difficulty:
        print(
            f"  Empty:         {empty} (range {difficulty.min_empty}-{difficulty.max_empty})",
            file=stream,
        )
    if seed is not None:
        print(f"  Seed:          {seed}", file=stream)
