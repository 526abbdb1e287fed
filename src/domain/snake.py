"""
Snake entity for the game engine.
"""

import logging
from collections import deque
from typing import Iterable, Optional, TYPE_CHECKING

from .constants import (
    UP, STOPPED, VALID_MOVES, OPPOSITES, UNIT, POINTS_PER_FOOD, INITIAL_LENGTH,
)
from .unit import Unit, next_unit
from .game_state import GameState

if TYPE_CHECKING:
    from .food import Food


logger = logging.getLogger(__name__)


class CollisionError(Exception):
    """The next head position lies inside the snake's own body."""

    def __str__(self):
        return "There was a collision detected"


def initial_body(length: int = INITIAL_LENGTH) -> list:
    """Vertical body at x=0, head on top, tail at the origin."""
    return [Unit(0.0, i * UNIT) for i in range(length - 1, -1, -1)]


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        body: deque of Unit from head at index 0 to tail at the end
        direction: current heading, one of VALID_MOVES or STOPPED
        growth_queue: deque of eaten food cells, newest first, that the tail
            has not reached yet
        score: points collected so far
    """

    def __init__(self, body: Optional[Iterable[Unit]] = None, direction: str = UP):
        self.body = deque(initial_body() if body is None else body)
        if not self.body:
            raise ValueError("Snake needs at least one segment.")
        self.direction = direction
        self.growth_queue: deque = deque()
        self.score = 0

    @property
    def head(self) -> Unit:
        """Return the head position (first element)."""
        return self.body[0]

    @property
    def stopped(self) -> bool:
        return self.direction == STOPPED

    def __len__(self):
        return len(self.body)

    def occupied(self, unit: Unit) -> bool:
        return unit in self.body

    def turn(self, direction: str) -> bool:
        """
        Change heading, refusing a direct reversal and any turn once stopped.

        Returns:
            True if the heading changed.
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}")
        if self.stopped or direction == self.direction:
            return False
        if len(self.body) > 1 and OPPOSITES[direction] == self.direction:
            return False
        self.direction = direction
        return True

    def stop(self):
        self.direction = STOPPED

    def update(self, food: "Food"):
        """
        Advance the snake one cell along its heading.

        Eating is checked against the current head before the move. The eaten
        cell is queued, and the snake grows on the tick its tail would leave
        that cell: the tail is kept instead of dropped.

        Raises:
            CollisionError: the new head lands on the body. The body keeps the
                tail removal of this tick and nothing else changes.
            BoardFullError: food was eaten and no free cell is left for it.
        """
        if self.stopped:
            return

        current = self.head
        new_head = next_unit(current, self.direction)

        if current == food.position:
            self.growth_queue.appendleft(food.position)
            self.score += POINTS_PER_FOOD
            food.relocate(self)
            logger.debug(
                f"Ate food at {current.as_tuple()}, score={self.score}, "
                f"food moved to {food.position.as_tuple()}"
            )

        tail = self.body.pop()
        if self.growth_queue and tail == self.growth_queue[-1]:
            self.body.append(tail)
            self.growth_queue.pop()

        if self.occupied(new_head):
            raise CollisionError()

        self.body.appendleft(new_head)

    def snapshot(self, food: "Food") -> GameState:
        """Return a read-only view of the current frame."""
        return GameState(
            segments=tuple(unit.as_tuple() for unit in self.body),
            food=food.position.as_tuple(),
            score=self.score,
            direction=self.direction,
        )
