"""
Grid geometry: the Unit cell value and stepping with wraparound.
"""

from dataclasses import dataclass

from .constants import UP, DOWN, LEFT, RIGHT, UNIT, BOUND


@dataclass(frozen=True)
class Unit:
    """One grid cell, addressed by its lower-left corner."""

    x: float
    y: float

    def as_tuple(self):
        return (self.x, self.y)


def wrap(value: float) -> float:
    """Fold a coordinate that stepped off the board back onto the other edge."""
    if value > BOUND - UNIT:
        return -BOUND
    if value < -BOUND:
        return BOUND - UNIT
    return value


def next_unit(unit: Unit, direction: str) -> Unit:
    """Return the cell one step away from `unit` along `direction`."""
    if direction == UP:
        return Unit(unit.x, wrap(unit.y + UNIT))
    if direction == DOWN:
        return Unit(unit.x, wrap(unit.y - UNIT))
    if direction == RIGHT:
        return Unit(wrap(unit.x + UNIT), unit.y)
    if direction == LEFT:
        return Unit(wrap(unit.x - UNIT), unit.y)
    raise ValueError(f"Cannot step in direction {direction!r}")
