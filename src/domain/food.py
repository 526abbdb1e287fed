"""
Food entity and placement for the game engine.
"""

import logging
import random
from typing import Optional, TYPE_CHECKING

from .constants import RANGE, UNIT, MAX_PLACEMENT_ATTEMPTS
from .unit import Unit

if TYPE_CHECKING:
    from .snake import Snake


logger = logging.getLogger(__name__)


class BoardFullError(Exception):
    """No free cell is left for the food."""


def _cell(col: int, row: int) -> Unit:
    return Unit(col * UNIT, row * UNIT)


def place_food(
    snake: "Snake",
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS
) -> Unit:
    """
    Return a random cell not occupied by the snake.

    Random sampling is tried `max_attempts` times. When the board is crowded
    enough for that to fail, the cells are scanned row by row from the bottom
    left and the first free one is used.

    Args:
        snake: the snake whose body must be avoided
        rng: random source, defaults to the module-level generator
        max_attempts: random samples to try before scanning

    Raises:
        BoardFullError: every cell is occupied.
    """
    rng = rng or random
    for _ in range(max_attempts):
        cell = _cell(rng.randrange(-RANGE, RANGE), rng.randrange(-RANGE, RANGE))
        if not snake.occupied(cell):
            return cell

    logger.info(
        f"No free cell after {max_attempts} random attempts "
        f"(snake length {len(snake.body)}), scanning the board"
    )
    taken = set(snake.body)
    for row in range(-RANGE, RANGE):
        for col in range(-RANGE, RANGE):
            cell = _cell(col, row)
            if cell not in taken:
                return cell

    raise BoardFullError(f"No free cell left for food (snake length {len(snake.body)})")


class Food:
    """
    The single food item on the board.

    The object lives for the whole session; eating it moves it instead of
    creating a new one.
    """

    def __init__(self, position: Unit, rng: Optional[random.Random] = None):
        self.position = position
        self.rng = rng

    @classmethod
    def spawn(cls, snake: "Snake", rng: Optional[random.Random] = None) -> "Food":
        return cls(place_food(snake, rng), rng)

    def relocate(self, snake: "Snake"):
        self.position = place_food(snake, self.rng)

    def __repr__(self):
        return f"<Food at ({self.position.x}, {self.position.y})>"
