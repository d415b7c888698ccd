"""
high_score.py: Best score shared across the sessions of one process.
Kept in memory only; it is gone when the process exits.
"""

import logging
import threading

logger = logging.getLogger(__name__)


class HighScore:
    """A lock-guarded best score that never decreases."""

    def __init__(self, score: int = 0):
        self._score = score
        self._lock = threading.Lock()

    @property
    def score(self) -> int:
        with self._lock:
            return self._score

    def submit(self, score: int) -> bool:
        """Keeps MAX(best, score). Returns True if the best score went up."""
        with self._lock:
            if score <= self._score:
                return False
            self._score = score
        logger.info("New best score: %d", score)
        return True
