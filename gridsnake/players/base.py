"""
Base player interface for the session driver.
"""

from ..domain.primitives import Direction
from ..engine import SnakeGame


class Player:
    """
    Base class/interface for player logic.

    A player stands in for keyboard input: each tick it looks at the game
    and returns the direction to request.
    """

    def get_move(self, game: SnakeGame) -> Direction:
        """
        Return a move direction given the current game.

        Args:
            game: the engine, read through snapshot(), direction and on_walls()

        Returns:
            The direction to request for the next tick.
        """
        raise NotImplementedError
