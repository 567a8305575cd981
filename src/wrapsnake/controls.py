# controls.py
from __future__ import annotations
from typing import Optional
import logging

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT, DIRECTIONS
from .game import Direction, GameEngine, GameSnapshot, same_axis

logger = logging.getLogger(__name__)

# ---------- Key bindings ----------
DIRECTION_KEYS = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}
PAUSE_KEY = pygame.K_SPACE
RESET_KEY = pygame.K_r


def direction_for_key(key: int) -> Optional[Direction]:
    return DIRECTION_KEYS.get(key)


class InputRouter:
    """Turns player intents into engine mutations, refusing same-axis turns."""

    def __init__(self, engine: GameEngine):
        self.engine = engine

    def submit_direction(self, candidate: Direction) -> GameSnapshot:
        """
        Queue a turn for the next tick (last one wins).
        Compared against the direction the snake is moving now, not the queued
        one, so a reversal or a no-op on the current axis is ignored.
        """
        candidate = tuple(candidate)
        if candidate not in DIRECTIONS:
            raise ValueError(f"Invalid direction {candidate}")
        if same_axis(self.engine.direction, candidate):
            logger.debug("Rejected turn %s while moving %s", candidate, self.engine.direction)
            return self.engine.snapshot()
        return self.engine.set_next_direction(candidate)

    def submit_pause_toggle(self) -> GameSnapshot:
        return self.engine.toggle_pause()

    def submit_reset(self) -> GameSnapshot:
        return self.engine.reset()

    def handle_key(self, key: int) -> Optional[GameSnapshot]:
        """Dispatch a pygame key code. Returns None for keys with no binding."""
        cand = direction_for_key(key)
        if cand is not None:
            return self.submit_direction(cand)
        if key == PAUSE_KEY:
            return self.submit_pause_toggle()
        if key == RESET_KEY:
            return self.submit_reset()
        return None
