"""
Food placement: pick a random free cell for the next piece of food.
"""

import logging
import random
from typing import Container, Optional

from .domain.grid import Grid
from .domain.primitives import Position
from .errors import BoardFull

logger = logging.getLogger(__name__)


class FoodPlacer:
    """
    Draws food positions from a random source.

    Given the same seeded ``random.Random`` the sequence of placements is
    identical, which is what makes whole games reproducible.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def place(self, grid: Grid, occupied: Container[Position], eaten_at: Position) -> Position:
        """
        Return a random cell that is neither a wall nor occupied by the snake.

        Cells are drawn uniformly (x first, then y) and redrawn until a free
        one comes up.

        Args:
            grid: the board to place food on
            occupied: every snake segment, head included
            eaten_at: where the previous food was eaten, reported on failure

        Raises:
            BoardFull: If the snake covers every non-wall cell.
        """
        if not any(p not in occupied for p in grid.free_cells()):
            raise BoardFull(eaten_at)

        width, height = grid.dimension()
        while True:
            x = self.rng.randrange(width)
            y = self.rng.randrange(height)
            position = Position(x, y)

            logger.debug("position generated %s", position)

            if grid.on_walls(position):
                continue

            if position in occupied:
                continue

            return position
