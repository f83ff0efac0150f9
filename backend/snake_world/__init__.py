"""
Core entities for the snake world engine.

This package holds the board arithmetic, the snake and the tick-driven
world. It has no I/O; drivers (see ``cli.simulate``) sit on top of it.
"""

from .constants import (
    Direction, GameStatus,
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, INITIAL_LENGTH,
)
from .grid import next_cell, opposite, cell_to_xy, xy_to_cell
from .snake import Snake
from .random_source import RandomSource, PythonRandomSource, SequenceRandomSource
from .game_state import WorldSnapshot
from .world import World, coerce_direction

__all__ = [
    'Direction', 'GameStatus',
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'INITIAL_LENGTH',
    'next_cell', 'opposite', 'cell_to_xy', 'xy_to_cell',
    'Snake',
    'RandomSource', 'PythonRandomSource', 'SequenceRandomSource',
    'WorldSnapshot',
    'World', 'coerce_direction',
]
