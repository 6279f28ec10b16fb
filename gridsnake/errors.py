"""
Exceptions raised by the level parser and the game engine.
"""

from typing import Optional

from .domain.primitives import Position


class ParseError(ValueError):
    """Level text could not be turned into a game."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class SnakeError(Exception):
    """
    Base class for terminal play errors.

    Attributes:
        position: the head position that ended the game
    """

    reason = "error"

    def __init__(self, position: Position):
        self.position = position
        super().__init__(self.describe())

    def describe(self) -> str:
        return f"Snake stopped at {self.position}"

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.position == other.position

    def __hash__(self):
        return hash((type(self).__name__, self.position))

    def __repr__(self):
        return f"{type(self).__name__}({self.position!r})"


class OnWall(SnakeError):
    reason = "wall"

    def describe(self) -> str:
        return f"Snake is on the wall at {self.position}"


class OnSnake(SnakeError):
    reason = "self"

    def describe(self) -> str:
        return f"Snake is eating itself at {self.position}"


class BoardFull(SnakeError):
    """Food was eaten and no free cell is left to place the next one."""

    reason = "board_full"

    def describe(self) -> str:
        return f"No free cell left for food after eating at {self.position}"


class GameOver(SnakeError):
    """play() was called again on an engine that latched a terminal error."""

    reason = "game_over"

    def __init__(self, cause: SnakeError):
        self.cause = cause
        super().__init__(cause.position)

    def describe(self) -> str:
        return f"Game is already over: {self.cause.describe()}"
