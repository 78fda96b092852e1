"""Board coordinates and movement directions."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``x`` grows to the right and ``y`` grows downwards, matching terminal
    column/row addressing.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Position:
    """Immutable (x, y) cell coordinate."""

    x: int
    y: int

    def move(self, direction: Direction) -> Position:
        """Return the neighbouring position one cell towards *direction*."""
        dx, dy = direction.value
        return Position(self.x + dx, self.y + dy)

    def equals(self, other: object) -> bool:
        return self == other

    def to_list(self) -> list[int]:
        return [self.x, self.y]
