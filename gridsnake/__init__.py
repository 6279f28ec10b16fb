"""
gridsnake - a deterministic, turn-based single-snake grid game.

The package exposes the core needed to run a game or to build a driver
on top of it:

  domain        – Position, Direction, CellField, Grid, Snake, Snapshot.
  level_parser  – parse() / load_level() from level text, format_level().
  engine        – SnakeGame.play() / snapshot().
  food          – FoodPlacer, random free-cell selection.
  errors        – ParseError, OnWall, OnSnake, BoardFull, GameOver.
  session       – DirectionInput and GameSession (tick driver).
  players       – RandomPlayer and ScriptedPlayer.
  levels        – Built-in level texts.
"""

from .domain import CellField, Direction, Grid, Position, Snake, Snapshot
from .engine import SnakeGame
from .errors import BoardFull, GameOver, OnSnake, OnWall, ParseError, SnakeError
from .food import FoodPlacer
from .level_parser import format_level, load_level, parse
from .session import DirectionInput, GameSession, SessionResult

__version__ = "0.1.0"

__all__ = [
    'CellField', 'Direction', 'Grid', 'Position', 'Snake', 'Snapshot',
    'SnakeGame',
    'BoardFull', 'GameOver', 'OnSnake', 'OnWall', 'ParseError', 'SnakeError',
    'FoodPlacer',
    'format_level', 'load_level', 'parse',
    'DirectionInput', 'GameSession', 'SessionResult',
]
