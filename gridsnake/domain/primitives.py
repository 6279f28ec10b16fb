"""
Value types shared by the grid, the snake and the engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .constants import DIRECTION_DELTAS, OPPOSITES, EMPTY_CHAR, WALL_CHAR


@dataclass(frozen=True)
class Position:
    """
    A cell coordinate on the grid.

    Positions read from a level are never negative. A head move past the
    x=0 or y=0 edge yields a negative coordinate; the grid treats it as
    out of bounds.
    """

    x: int
    y: int

    def step(self, direction: "Direction") -> "Position":
        """Return the neighbouring position one unit towards *direction*."""
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def is_adjacent(self, other: "Position") -> bool:
        return abs(self.x - other.x) + abs(self.y - other.y) == 1

    def __repr__(self) -> str:
        return f"Position({self.x}, {self.y})"


class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @classmethod
    def from_str(cls, raw: str) -> "Direction":
        """
        Parse a direction name or its first letter, case insensitive.

        Raises:
            ValueError: If *raw* names no direction.
        """
        value = str(raw).strip().upper()
        for direction in cls:
            if value in (direction.value, direction.value[0]):
                return direction
        raise ValueError(f"invalid direction: {raw!r}")

    @property
    def delta(self) -> Tuple[int, int]:
        return DIRECTION_DELTAS[self.value]

    @property
    def opposite(self) -> "Direction":
        return Direction(OPPOSITES[self.value])

    def allows(self, other: "Direction") -> bool:
        """Return False only when *other* would reverse this direction."""
        return other != self.opposite


class CellField(Enum):
    EMPTY = EMPTY_CHAR
    WALL = WALL_CHAR

    @classmethod
    def from_char(cls, char: str) -> "CellField":
        return cls(char)
