"""
Game constants for the snake world engine.
"""

from enum import Enum


class Direction(str, Enum):
    """Facing of the snake head. Values double as the move names players send."""
    UP = "UP"
    RIGHT = "RIGHT"
    DOWN = "DOWN"
    LEFT = "LEFT"


class GameStatus(Enum):
    PLAYING = "Playing"
    WON = "Won"
    LOST = "Lost"


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Game settings
INITIAL_LENGTH = 3
DEFAULT_DIRECTION = DOWN
WAITING_TEXT = "Waiting..."
