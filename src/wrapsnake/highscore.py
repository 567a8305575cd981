# highscore.py
from __future__ import annotations
import logging
import os

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Keeps the best score as a single decimal integer in a text file."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read().strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0
        try:
            value = int(raw)
        except ValueError:
            value = -1
        if value < 0:
            logger.warning("Ignoring malformed high score %r in %s", raw, self.path)
            return 0
        return value

    def save(self, score: int) -> None:
        if score < 0:
            raise ValueError(f"High score must be non-negative, got {score}")
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(f"{score}\n")
        logger.debug("Saved high score %d to %s", score, self.path)

    def record(self, score: int) -> bool:
        """Save score if it beats the stored one. Returns True when saved."""
        if score <= self.load():
            return False
        self.save(score)
        return True
