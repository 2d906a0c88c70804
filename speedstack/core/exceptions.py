"""Custom exception hierarchy for puzzle generation and play."""


class SpeedStackError(Exception):
    """Base exception for engine failures."""


class InvalidGridSizeError(SpeedStackError, ValueError):
    """Raised when a grid size falls outside the supported 1-9 range."""


class BoardGenerationError(SpeedStackError):
    """Raised when backtracking cannot fill a board that must be fillable."""


class SolverError(SpeedStackError):
    """Raised when the CP-SAT model is rejected by the solver."""


class LeaderboardError(SpeedStackError):
    """Raised when the leaderboard document cannot be persisted."""
