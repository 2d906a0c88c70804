"""Persistent top-score leaderboard.

Scores are kept in a single JSON document (``local_db/leaderboard.json`` by
default). Persistence is best effort: a missing or corrupt file reads as an
empty leaderboard and a failed write is logged rather than raised, unless the
store was created with ``strict=True``.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.exceptions import LeaderboardError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

DEFAULT_LEADERBOARD_PATH = Path("local_db/leaderboard.json")
MAX_ENTRIES = 5


@dataclass
class LeaderboardEntry:
    score: int
    max_level: int
    completed_count: int
    bonuses: int
    penalties: int
    play_time: float
    date: str = ""
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "LeaderboardEntry":
        return cls(
            score=int(payload["score"]),
            max_level=int(payload.get("max_level", 0)),
            completed_count=int(payload.get("completed_count", 0)),
            bonuses=int(payload.get("bonuses", 0)),
            penalties=int(payload.get("penalties", 0)),
            play_time=float(payload.get("play_time", 0.0)),
            date=str(payload.get("date", "")),
            id=payload.get("id"),
        )


@dataclass
class Leaderboard:
    """Top ``max_entries`` scores, highest first."""

    path: Path = DEFAULT_LEADERBOARD_PATH
    max_entries: int = MAX_ENTRIES
    strict: bool = False
    entries: List[LeaderboardEntry] = field(default_factory=list)
    last_saved_id: Optional[str] = None

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.entries = self.load()

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def load(self) -> List[LeaderboardEntry]:
        if not self.path.exists():
            return []
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(payload, list):
                LOGGER.warning("Ignoring leaderboard with unexpected shape: %s", self.path)
                return []
            entries = [LeaderboardEntry.from_dict(item) for item in payload]
        except (OSError, ValueError, KeyError, TypeError) as exc:
            LOGGER.error("Failed to load leaderboard %s: %s", self.path, exc)
            return []
        entries.sort(key=lambda entry: entry.score, reverse=True)
        return entries[: self.max_entries]

    def is_high_score(self, score: int) -> bool:
        if len(self.entries) < self.max_entries:
            return True
        return score > self.entries[self.max_entries - 1].score

    def save_score(
        self,
        score: int,
        max_level: int,
        completed_count: int,
        bonuses: int = 0,
        penalties: int = 0,
        play_time: float = 0.0,
    ) -> Optional[str]:
        """Insert a score if it qualifies and return its id, otherwise None."""

        if not self.is_high_score(score):
            LOGGER.debug("Score %s does not qualify for the leaderboard", score)
            return None

        entry = LeaderboardEntry(
            score=score,
            max_level=max_level,
            completed_count=completed_count,
            bonuses=bonuses,
            penalties=penalties,
            play_time=play_time,
            date=datetime.now(timezone.utc).isoformat(),
            id=self._new_id(),
        )
        updated = sorted(self.entries + [entry], key=lambda e: e.score, reverse=True)
        self.entries = updated[: self.max_entries]
        self.last_saved_id = entry.id

        try:
            self._write()
        except OSError as exc:
            if self.strict:
                raise LeaderboardError(f"Failed to save leaderboard: {exc}") from exc
            LOGGER.error("Failed to save leaderboard %s: %s", self.path, exc)
            return None
        LOGGER.info("Leaderboard entry saved: %s (score %s)", entry.id, score)
        return entry.id

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [asdict(entry) for entry in self.entries]
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        return f"{ts}_{uuid.uuid4().hex[:8]}"
