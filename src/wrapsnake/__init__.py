"""Snake on a wrap-around grid: game engine, input routing, food placement."""

from .config import GRID_SIZE, UP, DOWN, LEFT, RIGHT
from .food import BoardFullError, spawn_food
from .game import GameEngine, GameSnapshot, GameState, Status, TickResult
from .controls import InputRouter

__all__ = [
    "GRID_SIZE", "UP", "DOWN", "LEFT", "RIGHT",
    "BoardFullError", "spawn_food",
    "GameEngine", "GameSnapshot", "GameState", "Status", "TickResult",
    "InputRouter",
]
