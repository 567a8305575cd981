# config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import os

# ----- Grid -----
GRID_SIZE = 20
CELL_SIZE = 25
BOARD_PX = GRID_SIZE * CELL_SIZE
PANEL_H = 60
WIDTH, HEIGHT = BOARD_PX, BOARD_PX + PANEL_H

# ----- Colors -----
BG         = (15, 23, 42)
GRID_LINE  = (30, 41, 59)
PANEL_BG   = (30, 41, 59)
HEAD       = (34, 197, 94)
BODY       = (22, 163, 74)
FOOD       = (239, 68, 68)
TEXT       = (255, 255, 255)
MUTED      = (148, 163, 184)
SCORE_TEXT = (74, 222, 128)
HIGH_TEXT  = (251, 191, 36)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Rules -----
TICK_MS = 100
FOOD_REWARD = 10
INITIAL_SNAKE = ((10, 10),)
INITIAL_FOOD = (15, 15)
INITIAL_DIRECTION = RIGHT

DEFAULT_HIGH_SCORE_PATH = os.path.join(os.path.expanduser("~"), ".wrapsnake", "highscore")


# ----- Tunables (what the command line can override) -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = TICK_MS
    high_score_path: str = DEFAULT_HIGH_SCORE_PATH
    log_level: str = "INFO"

    @classmethod
    def from_args(cls, args) -> "Config":
        """Build a Config from an argparse namespace, keeping defaults for unset options."""
        cfg = cls()
        if getattr(args, "seed", None) is not None:
            cfg.seed = args.seed
        if getattr(args, "tick_ms", None) is not None:
            if args.tick_ms <= 0:
                raise ValueError(f"tick interval must be positive, got {args.tick_ms}")
            cfg.tick_ms = args.tick_ms
        if getattr(args, "high_score_file", None):
            cfg.high_score_path = args.high_score_file
        if getattr(args, "log_level", None):
            cfg.log_level = args.log_level.upper()
        return cfg
