"""
Player implementations for the simulation driver.

This module contains the player abstractions and implementations
that decide which way the snake turns each tick.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer, parse_moves

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'parse_moves',
]
