"""
history.py - Score history store.

Completed-game scores are kept in a small JSON document under two fixed
keys, so the file stays readable and survives restarts of the program:

    {"snakeScoreHistory": [5, 8], "snakeHighestScore": 8}

The store never raises on I/O problems. A game must keep running when the
disk is full or the file is unreadable, so failures are logged and the
scores live on in memory for the rest of the session.
"""

import contextlib
import json
import logging
import os

from .config import HISTORY_KEY, HIGHEST_KEY, HISTORY_PATH

logger = logging.getLogger(__name__)


class ScoreHistoryStore:

    def __init__(self, path: str | None = HISTORY_PATH):
        self.path = path
        self._scores: list[int] = []
        self._highest: int = 0
        self._write_failed: bool = False
        if path is not None:
            self._load()

    # ── Public API ───────────────────────────────────────────────
    def append(self, score: int) -> bool:
        """Record a finished game. Scores of 0 are not kept. Returns True if recorded."""
        if score <= 0:
            return False
        self._scores.append(score)
        self._highest = max(self._highest, score)
        self._save()
        return True

    def get_highest(self) -> int:
        return self._highest

    def get_all(self) -> list[int]:
        return list(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    # ── Persistence ──────────────────────────────────────────────
    def _load(self) -> None:
        if not os.path.isfile(self.path):
            logger.debug("No score history at %s, starting empty", self.path)
            return
        try:
            with open(self.path, encoding="utf-8") as fh:
                data = json.load(fh)
            scores = [int(s) for s in data.get(HISTORY_KEY, [])]
            highest = int(data.get(HIGHEST_KEY, 0))
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            logger.warning("Could not read score history %s: %s", self.path, exc)
            return

        self._scores = [s for s in scores if s > 0]
        self._highest = max([highest, *self._scores])
        logger.info("Loaded %d past scores (best %d)", len(self._scores), self._highest)

    def _save(self) -> None:
        if self.path is None:
            return
        payload = {HISTORY_KEY: self._scores, HIGHEST_KEY: self._highest}
        tmp_path = f"{self.path}.tmp"
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as fh:
                json.dump(payload, fh)
            os.replace(tmp_path, self.path)
        except (OSError, ValueError) as exc:
            with contextlib.suppress(OSError, ValueError):
                os.remove(tmp_path)
            if not self._write_failed:
                logger.warning("Score history not saved to %s: %s", self.path, exc)
                self._write_failed = True
            else:
                logger.debug("Score history still not writable: %s", exc)
