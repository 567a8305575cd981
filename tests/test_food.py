import random

import pytest

from wrapsnake.config import GRID_SIZE
from wrapsnake.food import BoardFullError, spawn_food


def test_food_never_on_snake():
    rng = random.Random(3)
    snake = [(x, y) for x in range(GRID_SIZE) for y in range(GRID_SIZE // 2)]
    for _ in range(200):
        fx, fy = spawn_food(snake, rng)
        assert (fx, fy) not in snake
        assert 0 <= fx < GRID_SIZE and 0 <= fy < GRID_SIZE


def test_single_free_cell_is_found():
    free = (7, 13)
    snake = [(x, y) for x in range(GRID_SIZE) for y in range(GRID_SIZE) if (x, y) != free]
    assert spawn_food(snake, random.Random(0)) == free


def test_full_board_raises():
    snake = [(x, y) for x in range(GRID_SIZE) for y in range(GRID_SIZE)]
    with pytest.raises(BoardFullError):
        spawn_food(snake, random.Random(0))


def test_seeded_rng_is_reproducible():
    snake = [(10, 10)]
    assert spawn_food(snake, random.Random(42)) == spawn_food(snake, random.Random(42))
