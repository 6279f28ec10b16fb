"""
Session driver: feeds ticks and directions to a SnakeGame.

The engine itself only knows play(direction). This module supplies the two
inbound streams it needs:

  DirectionInput – the latest requested direction, last write wins. An input
                   producer may push from another thread.
  GameSession    – one tick() per simulation step; reads the current
                   direction, calls play(), counts food and stops at the first
                   terminal error.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from .domain.primitives import Direction
from .domain.snapshot import Snapshot
from .engine import SnakeGame
from .errors import SnakeError
from .players.base import Player

logger = logging.getLogger(__name__)


class DirectionInput:
    """
    Polled direction state. Every push() overwrites the previous value and
    current() keeps returning it until the next push.
    """

    def __init__(self, initial: Direction = Direction.UP):
        self._lock = threading.Lock()
        self._direction = initial

    def push(self, direction: Direction) -> None:
        with self._lock:
            self._direction = direction

    def current(self) -> Direction:
        with self._lock:
            return self._direction


@dataclass
class SessionResult:
    ticks: int
    score: int
    length: int
    error: Optional[SnakeError]

    @property
    def outcome(self) -> str:
        if self.error is None:
            return "alive"
        return self.error.reason

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "ticks": self.ticks,
            "score": self.score,
            "length": self.length,
            "outcome": self.outcome,
        }
        if self.error is not None:
            data["error"] = str(self.error)
            data["position"] = [self.error.position.x, self.error.position.y]
        return data


class GameSession:
    """
    Drives one game tick by tick.

    Attributes:
        game: the engine being driven
        direction_input: where the direction for each tick is read from
        score: number of ticks on which food was eaten
        ticks: number of successful ticks
        error: the terminal error, once one happened
        history: snapshots, starting with the initial one, one per tick
    """

    def __init__(
        self,
        game: SnakeGame,
        direction_input: Optional[DirectionInput] = None,
        tick_seconds: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.game = game
        self.direction_input = direction_input or DirectionInput(game.direction)
        self.tick_seconds = tick_seconds
        self.sleep = sleep
        self.score = 0
        self.ticks = 0
        self.error: Optional[SnakeError] = None
        self.history: List[Snapshot] = [game.snapshot()]

    @property
    def is_over(self) -> bool:
        return self.error is not None

    def tick(self) -> Optional[Snapshot]:
        """
        Run one step of the game with the latest direction.

        Returns:
            The new snapshot, or None once the game is over. The terminal
            error is kept in self.error; no further play() call is made.
        """
        if self.is_over:
            return None

        direction = self.direction_input.current()
        try:
            snapshot = self.game.play(direction)
        except SnakeError as e:
            self.error = e
            logger.warning("Game over after %d ticks: %s", self.ticks, e)
            return None

        self.ticks += 1
        if snapshot.food_ate:
            self.score += 1
            logger.info("Food eaten, score %d", self.score)
        self.history.append(snapshot)
        return snapshot

    def run(
        self,
        max_ticks: int,
        player: Optional[Player] = None,
        on_tick: Optional[Callable[[Snapshot], None]] = None,
    ) -> SessionResult:
        """
        Tick until the game ends or max_ticks steps have run.

        Args:
            max_ticks: upper limit on ticks for this call
            player: asked for a direction before every tick; without one the
                direction input is left as the caller set it
            on_tick: invoked with every new snapshot
        """
        for _ in range(max_ticks):
            if player is not None:
                self.direction_input.push(player.get_move(self.game))

            snapshot = self.tick()
            if snapshot is None:
                break

            if on_tick:
                on_tick(snapshot)

            if self.tick_seconds > 0:
                self.sleep(self.tick_seconds)

        return self.result()

    def result(self) -> SessionResult:
        return SessionResult(
            ticks=self.ticks,
            score=self.score,
            length=self.game.snapshot().length,
            error=self.error,
        )
