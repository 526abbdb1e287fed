"""
Domain entities for the terminal snake game engine.

This module contains the core game entities that are independent of
presentation concerns (terminal, rendering, keyboard).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, STOPPED, VALID_MOVES,
    UNIT, RANGE, BOUND, POINTS_PER_FOOD,
)
from .unit import Unit
from .game_state import GameState
from .snake import Snake, CollisionError
from .food import Food, BoardFullError, place_food

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'STOPPED', 'VALID_MOVES',
    'UNIT', 'RANGE', 'BOUND', 'POINTS_PER_FOOD',
    'Unit',
    'GameState',
    'Snake',
    'CollisionError',
    'Food',
    'BoardFullError',
    'place_food',
]
