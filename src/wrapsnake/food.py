# food.py
from __future__ import annotations
from typing import Sequence, Tuple
import random

from .config import GRID_SIZE


class BoardFullError(Exception):
    """Raised when the snake covers every cell and no food cell exists."""


def spawn_food(snake: Sequence[Tuple[int, int]], rng=random) -> Tuple[int, int]:
    """Pick a uniformly random cell that is not part of the snake (rejection sampling)."""
    occupied = set(snake)
    if len(occupied) >= GRID_SIZE * GRID_SIZE:
        raise BoardFullError(f"snake of length {len(snake)} fills the {GRID_SIZE}x{GRID_SIZE} grid")
    while True:
        fx = rng.randrange(GRID_SIZE)
        fy = rng.randrange(GRID_SIZE)
        if (fx, fy) not in occupied:
            return (fx, fy)
