"""
Tests for food placement.
"""

import random
import sys
import os
from unittest.mock import Mock

import pytest

# Add source root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import RANGE, UNIT, BOUND
from domain.food import Food, BoardFullError, place_food
from domain.snake import Snake
from domain.unit import Unit


def all_cells():
    return [Unit(col * UNIT, row * UNIT) for row in range(-RANGE, RANGE) for col in range(-RANGE, RANGE)]


def test_place_food_avoids_snake():
    snake = Snake()
    rng = random.Random(42)
    for _ in range(200):
        cell = place_food(snake, rng)
        assert not snake.occupied(cell)


def test_place_food_is_grid_aligned_and_in_range():
    snake = Snake()
    rng = random.Random(7)
    for _ in range(200):
        cell = place_food(snake, rng)
        assert cell.x % UNIT == 0 and cell.y % UNIT == 0
        assert -BOUND <= cell.x < BOUND
        assert -BOUND <= cell.y < BOUND


def test_place_food_is_reproducible_with_seed():
    snake = Snake()
    first = [place_food(snake, random.Random(3)) for _ in range(3)]
    second = [place_food(snake, random.Random(3)) for _ in range(3)]
    assert first == second


def test_place_food_scans_after_failed_attempts():
    """When random samples keep hitting the body, the first free cell is used."""
    snake = Snake()
    rng = Mock()
    rng.randrange.return_value = 0  # always (0, 0), the snake's tail

    cell = place_food(snake, rng, max_attempts=25)

    assert rng.randrange.call_count == 50
    assert cell == Unit(-BOUND, -BOUND)


def test_place_food_scan_skips_occupied_cells():
    cells = all_cells()
    snake = Snake(cells[:10])
    rng = Mock()
    rng.randrange.return_value = -RANGE  # always the bottom-left corner

    cell = place_food(snake, rng, max_attempts=5)

    assert cell == cells[10]


def test_place_food_full_board():
    snake = Snake(all_cells())
    with pytest.raises(BoardFullError):
        place_food(snake, random.Random(0), max_attempts=5)


def test_place_food_last_free_cell():
    cells = all_cells()
    snake = Snake(cells[:-1])
    assert place_food(snake, random.Random(0), max_attempts=5) == cells[-1]


class TestFood:
    """Tests for the Food holder."""

    def test_spawn_avoids_snake(self):
        snake = Snake()
        food = Food.spawn(snake, random.Random(1))
        assert not snake.occupied(food.position)

    def test_relocate_moves_same_object(self):
        snake = Snake()
        rng = Mock()
        rng.randrange.return_value = 4
        food = Food(Unit(0.0, 20.0), rng=rng)
        same = food

        food.relocate(snake)

        assert food is same
        assert food.position == Unit(20.0, 20.0)

    def test_repr(self):
        assert repr(Food(Unit(5.0, -5.0))) == "<Food at (5.0, -5.0)>"
