"""
Single-snake game engine.

The engine owns the grid, the snake and the food. One call to play() is one
tick: resolve the direction, shift the body, move the head, check collisions,
handle food. No I/O happens here; tick pacing and input belong to the driver
(see gridsnake.session).
"""

import logging
import random
from typing import Iterable, Optional, Tuple

from .domain.grid import Grid
from .domain.primitives import Direction, Position
from .domain.snake import Snake
from .domain.snapshot import Snapshot
from .errors import BoardFull, GameOver, OnSnake, OnWall, SnakeError
from .food import FoodPlacer

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Grid (walls and dimensions)
      - Snake (head, body, growth counter)
      - Food position and its placement
      - Current direction

    Terminal errors (OnWall, OnSnake, BoardFull) are raised from play(). By
    default nothing is latched and the caller is expected to stop ticking;
    with latch_game_over=True every later play() raises GameOver instead.
    """

    def __init__(
        self,
        grid: Grid,
        head: Position,
        body: Iterable[Position],
        food: Position,
        direction: Direction = Direction.UP,
        rng: Optional[random.Random] = None,
        latch_game_over: bool = False,
    ):
        self.grid = grid
        self.snake = Snake(head, body)
        self.food = food
        self.direction = direction
        self.food_placer = FoodPlacer(rng)
        self.latch_game_over = latch_game_over
        self.terminal_error: Optional[SnakeError] = None

    @property
    def head(self) -> Position:
        return self.snake.head

    @property
    def body(self) -> Tuple[Position, ...]:
        return tuple(self.snake.body)

    @property
    def growth(self) -> int:
        return self.snake.growth

    def play(self, direction: Direction) -> Snapshot:
        """
        Advance the game by one tick.

        Args:
            direction: the requested direction; a reversal of the current
                direction is ignored and the snake keeps going.

        Returns:
            Snapshot of the snake and food after the move.

        Raises:
            OnWall: The head left the grid or hit a wall.
            OnSnake: The head hit the body.
            BoardFull: Food was eaten and no free cell is left.
            GameOver: A terminal error was already latched.
        """
        if self.terminal_error is not None:
            raise GameOver(self.terminal_error)

        logger.info("play with %s", direction.value)

        # if the given direction is not allowed we ignore it
        if not self.direction.allows(direction):
            logger.debug("reversal %s ignored, keeping %s", direction.value, self.direction.value)
            direction = self.direction

        self.snake.move_body()
        head = self.snake.move_head(direction)

        if self.grid.on_walls(head):
            self._fail(OnWall(head))

        if self.snake.on_body(head):
            self._fail(OnSnake(head))

        food_ate = head == self.food
        if food_ate:
            self.snake.growth = 1
            try:
                self.food = self.food_placer.place(self.grid, self.snake.positions, head)
            except BoardFull as e:
                self._fail(e)
            logger.debug("food eaten at %s, new food at %s", head, self.food)

        self.direction = direction

        return self._snapshot_with_food_ate(food_ate)

    def snapshot(self) -> Snapshot:
        return self._snapshot_with_food_ate(False)

    def dimension(self) -> Tuple[int, int]:
        return self.grid.dimension()

    def on_walls(self, position: Position) -> bool:
        return self.grid.on_walls(position)

    def _fail(self, error: SnakeError) -> None:
        logger.info("%s", error)
        if self.latch_game_over:
            self.terminal_error = error
        raise error

    def _snapshot_with_food_ate(self, food_ate: bool) -> Snapshot:
        return Snapshot(
            snake=self.snake.positions,
            food=self.food,
            food_ate=food_ate,
        )

    def __repr__(self):
        width, height = self.dimension()
        return (
            f"<SnakeGame {width}x{height} head={self.head} length={len(self.snake)} "
            f"direction={self.direction.value} food={self.food}>"
        )
