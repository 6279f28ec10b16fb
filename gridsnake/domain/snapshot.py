"""
Snapshot entity - a read-only view of the game at a tick boundary.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .primitives import Position


@dataclass(frozen=True)
class Snapshot:
    """
    The state of the game after a tick.

    Attributes:
        snake: positions ordered head first, then body from neck to tail
        food: position of the food on the board
        food_ate: whether the head landed on food during the tick just computed
    """

    snake: Tuple[Position, ...]
    food: Position
    food_ate: bool = False

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def body(self) -> Tuple[Position, ...]:
        return self.snake[1:]

    @property
    def length(self) -> int:
        return len(self.snake)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-serializable dict. Positions become [x, y] lists.
        """
        return {
            "snake": [[p.x, p.y] for p in self.snake],
            "food": [self.food.x, self.food.y],
            "food_ate": self.food_ate,
        }

    def __repr__(self):
        return (
            f"<Snapshot head={self.head}, length={self.length}, "
            f"food={self.food}, food_ate={self.food_ate}>"
        )
