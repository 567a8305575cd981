# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
import logging
import random

from .config import (
    GRID_SIZE, FOOD_REWARD,
    INITIAL_SNAKE, INITIAL_FOOD, INITIAL_DIRECTION,
)
from .food import BoardFullError, spawn_food

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
Direction = Tuple[int, int]


class Status(str, Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


# ---------- Helpers ----------
def wrap(cell: Cell, direction: Direction) -> Cell:
    """Move one cell in direction; leaving an edge re-enters at the opposite one."""
    return ((cell[0] + direction[0]) % GRID_SIZE, (cell[1] + direction[1]) % GRID_SIZE)

def same_axis(a: Direction, b: Direction) -> bool:
    """True when b moves along the axis a already moves along."""
    return (a[0] != 0 and b[0] != 0) or (a[1] != 0 and b[1] != 0)

# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell] = field(default_factory=lambda: list(INITIAL_SNAKE))   # head at index 0
    food: Cell = INITIAL_FOOD
    direction: Direction = INITIAL_DIRECTION
    next_direction: Direction = INITIAL_DIRECTION
    score: int = 0
    game_over: bool = False
    paused: bool = False
    won: bool = False


def new_game_state() -> GameState:
    return GameState()


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view of a GameState, safe to hand to the renderer."""
    snake: Tuple[Cell, ...]
    food: Cell
    direction: Direction
    next_direction: Direction
    score: int
    game_over: bool
    paused: bool
    won: bool

    @classmethod
    def of(cls, state: GameState) -> "GameSnapshot":
        return cls(
            snake=tuple(state.snake),
            food=state.food,
            direction=state.direction,
            next_direction=state.next_direction,
            score=state.score,
            game_over=state.game_over,
            paused=state.paused,
            won=state.won,
        )

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def status(self) -> Status:
        if self.game_over:
            return Status.GAME_OVER
        if self.paused:
            return Status.PAUSED
        return Status.RUNNING

    @property
    def can_pause(self) -> bool:
        return not self.game_over


@dataclass(frozen=True)
class TickResult:
    snapshot: GameSnapshot
    new_high_score: Optional[int] = None   # set only on the tick that ends the game with a record


# ---------- Engine ----------
class GameEngine:
    """
    Owns the single mutable GameState. Every mutation goes through one of
    tick(), set_next_direction(), toggle_pause() or reset(), and each returns
    a fresh GameSnapshot.
    """

    def __init__(self, state: Optional[GameState] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self._state = state if state is not None else new_game_state()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot.of(self._state)

    @property
    def direction(self) -> Direction:
        return self._state.direction

    def tick(self, high_score: int = 0) -> TickResult:
        """
        Advance the game by one cell. No-op while paused or over.
        high_score is the caller's persisted record; when the game ends above it
        the final score comes back as TickResult.new_high_score.
        """
        state = self._state
        if state.game_over or state.paused:
            return TickResult(self.snapshot())

        # Commit direction once per tick
        state.direction = state.next_direction
        new_head = wrap(state.snake[0], state.direction)

        # Self collision (tail included); snake keeps its pre-move shape
        if new_head in state.snake:
            state.game_over = True
            logger.info("Game over at %s with score %d", new_head, state.score)
            return self._finish(high_score)

        state.snake.insert(0, new_head)
        if new_head == state.food:
            state.score += FOOD_REWARD
            try:
                state.food = spawn_food(state.snake, self.rng)
            except BoardFullError:
                state.won = True
                state.game_over = True
                logger.info("Board filled, game won with score %d", state.score)
                return self._finish(high_score)
        else:
            state.snake.pop()

        return TickResult(self.snapshot())

    def _finish(self, high_score: int) -> TickResult:
        record = self._state.score if self._state.score > high_score else None
        if record is not None:
            logger.info("New high score %d (previous %d)", record, high_score)
        return TickResult(self.snapshot(), new_high_score=record)

    def set_next_direction(self, direction: Direction) -> GameSnapshot:
        self._state.next_direction = direction
        return self.snapshot()

    def toggle_pause(self) -> GameSnapshot:
        if not self._state.game_over:
            self._state.paused = not self._state.paused
            logger.debug("Paused" if self._state.paused else "Resumed")
        return self.snapshot()

    def reset(self) -> GameSnapshot:
        self._state = new_game_state()
        logger.info("Game reset")
        return self.snapshot()
