"""Speed Stack: variable-size Sudoku generation for a speed-pressure game.

This package exposes the public API surface via:

- ``speedstack.engine.board.BoardFactory``: randomized backtracking fill of solved boards.
- ``speedstack.engine.carver.PuzzleCarver``: difficulty-calibrated clue removal.
- ``speedstack.engine.checker`` helpers: placement, move, board and completeness checks.
- ``speedstack.game.session.GameSession``: the timer/score/level game loop.
"""

from .core.models import Board, PuzzlePair
from .engine.board import BoardFactory, generate_complete_board
from .engine.carver import PuzzleCarver, generate_puzzle
from .engine.checker import (
    is_board_complete,
    is_valid_board,
    is_valid_move,
    is_valid_placement,
)
from .game.session import GameConfig, GameSession

__all__ = [
    "Board",
    "PuzzlePair",
    "BoardFactory",
    "PuzzleCarver",
    "GameConfig",
    "GameSession",
    "generate_complete_board",
    "generate_puzzle",
    "is_board_complete",
    "is_valid_board",
    "is_valid_move",
    "is_valid_placement",
]

__version__ = "0.1.0"
