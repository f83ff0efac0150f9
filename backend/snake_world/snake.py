"""
Snake entity for the game engine.
"""

from typing import List

from .constants import Direction, DEFAULT_DIRECTION


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        body: list of flat cell indices from head at index 0 to tail at the end
        direction: the way the head is currently facing
    """

    def __init__(self, body: List[int], direction: Direction = DEFAULT_DIRECTION):
        if not body:
            raise ValueError("A snake needs at least one body cell.")
        self.body = list(body)
        self.direction = direction

    @classmethod
    def spawn(cls, spawn_index: int, length: int) -> "Snake":
        """Build a snake laid out backwards from ``spawn_index``."""
        return cls([spawn_index - i for i in range(length)])

    @property
    def head(self) -> int:
        """Return the head cell (first element)."""
        return self.body[0]

    @property
    def neck(self) -> int:
        """Return the cell directly behind the head."""
        return self.body[1]

    def __len__(self) -> int:
        return len(self.body)

    def __contains__(self, cell: int) -> bool:
        return cell in self.body

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self.body)}, direction={self.direction.value}>"
