"""
Player implementations for gridsnake.

Players pick the direction the session feeds to the engine each tick.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
]
