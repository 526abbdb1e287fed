"""
GameState entity - a read-only snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Tuple

from .constants import RANGE, UNIT, STOPPED

Point = Tuple[float, float]


def to_cell(point: Point) -> Tuple[int, int]:
    """Map board coordinates to (column, row) indices starting at 0."""
    x, y = point
    return int(round(x / UNIT)) + RANGE, int(round(y / UNIT)) + RANGE


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game handed to the renderer.

    Attributes:
        segments: (x, y) of every body segment, head first
        food: (x, y) of the food
        score: current score
        direction: heading at the time of the snapshot
    """

    segments: Tuple[Point, ...]
    food: Point
    score: int
    direction: str

    @property
    def head(self) -> Point:
        return self.segments[0]

    @property
    def stopped(self) -> bool:
        return self.direction == STOPPED

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head (X once the snake has stopped)
        Rows are printed top to bottom, so the highest y comes first.
        """
        size = 2 * RANGE
        board = [['.' for _ in range(size)] for _ in range(size)]

        fx, fy = to_cell(self.food)
        board[fy][fx] = 'F'

        for idx, segment in enumerate(self.segments):
            col, row = to_cell(segment)
            if idx == 0:
                board[row][col] = 'X' if self.stopped else 'H'
            else:
                board[row][col] = 'S'

        return "\n".join(''.join(board[row]) for row in range(size - 1, -1, -1))

    def __repr__(self):
        return (
            f"<GameState head={self.head}, length={len(self.segments)}, "
            f"food={self.food}, score={self.score}, direction={self.direction}>"
        )
