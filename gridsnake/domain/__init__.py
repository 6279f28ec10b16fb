"""
Domain entities for the gridsnake engine.

This module contains the core game entities that are independent of
driver concerns (tick pacing, input, the command line).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES
from .primitives import Position, Direction, CellField
from .grid import Grid
from .snake import Snake
from .snapshot import Snapshot

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'Position', 'Direction', 'CellField',
    'Grid',
    'Snake',
    'Snapshot',
]
