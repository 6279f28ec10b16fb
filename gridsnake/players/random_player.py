"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from ..domain.primitives import Direction
from ..engine import SnakeGame
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game: SnakeGame) -> Direction:
        snapshot = game.snapshot()
        head = snapshot.head
        # The tail moves out of the way unless the snake is growing
        blocked = set(snapshot.body if game.growth > 0 else snapshot.body[:-1])

        # Filter out moves that:
        # 1. Reverse the snake (the engine would ignore them anyway)
        # 2. Hit walls
        # 3. Hit own body
        valid_moves: List[Direction] = []
        for move in Direction:
            if not game.direction.allows(move):
                continue

            target = head.step(move)
            if game.on_walls(target):
                continue

            if target in blocked:
                continue

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return game.direction

        return self.rng.choice(valid_moves)
