"""
Scripted player - replays a fixed list of moves.
"""

from typing import Iterable, Optional

from ..domain.primitives import Direction
from ..engine import SnakeGame
from .base import Player


class ScriptedPlayer(Player):
    """
    Plays the given moves in order, one per tick. Once the script runs out it
    keeps requesting the last move, like a key that was pressed once and not
    changed since.
    """

    def __init__(self, moves: Iterable[Direction]):
        self.moves = list(moves)
        self.index = 0
        self.last: Optional[Direction] = None

    def get_move(self, game: SnakeGame) -> Direction:
        if self.index < len(self.moves):
            self.last = self.moves[self.index]
            self.index += 1
        return self.last if self.last is not None else game.direction

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.moves)
