"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Tuple

from .primitives import Direction, Position


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        head: current head position
        body: deque of positions from neck at index 0 to tail at the end
        growth: pending segment additions; while positive the tail is kept
    """

    def __init__(self, head: Position, body: Iterable[Position] = ()):
        self.head = head
        self.body = deque(body)
        self.growth = 0

    @property
    def positions(self) -> Tuple[Position, ...]:
        """Every segment ordered head first."""
        return (self.head, *self.body)

    def __len__(self) -> int:
        return 1 + len(self.body)

    def on_body(self, position: Position) -> bool:
        return position in self.body

    def move_body(self) -> None:
        """
        Shift the body one step behind the head's current position.

        Growing snakes gain a segment where the head stands and keep their
        tail. Otherwise the tail is dropped and reinserted at the neck.
        """
        if self.growth > 0:
            self.body.appendleft(self.head)
            self.growth -= 1
            return

        if not self.body:
            # Just a head, nothing follows it
            return

        self.body.pop()
        self.body.appendleft(self.head)

    def move_head(self, direction: Direction) -> Position:
        self.head = self.head.step(direction)
        return self.head

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self)} growth={self.growth}>"
