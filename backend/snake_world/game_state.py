"""
WorldSnapshot - a frozen copy of the world at a point in time.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .constants import Direction, GameStatus, WAITING_TEXT
from .grid import cell_to_xy


def status_text(game_state: Optional[GameStatus]) -> str:
    """Display text for a game state; ``None`` means the game has not started."""
    if game_state is None:
        return WAITING_TEXT
    return game_state.value


@dataclass(frozen=True)
class WorldSnapshot:
    """
    A snapshot of the world at a specific tick.

    Attributes:
        tick: number of advancing steps taken so far
        width, size: board side and total cell count
        snake_cells: body cells, head first
        direction: facing of the snake head
        reward_cell: cell holding the reward, None once the game is won
        game_state: None before the first step, then a GameStatus
        score: cells grown since spawn
    """

    tick: int
    width: int
    size: int
    snake_cells: Tuple[int, ...]
    direction: Direction
    reward_cell: Optional[int]
    game_state: Optional[GameStatus]
    score: int

    @property
    def snake_head(self) -> int:
        return self.snake_cells[0]

    @property
    def game_state_text(self) -> str:
        return status_text(self.game_state)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty cell
        A = reward
        H = snake head
        o = snake body
        Row 0 (cells 0..width-1) is printed first, column labels at the bottom.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.width)]

        if self.reward_cell is not None:
            x, y = cell_to_xy(self.reward_cell, self.width)
            board[y][x] = 'A'

        # Draw tail first so the head wins if a cell is shared
        for cell in reversed(self.snake_cells[1:]):
            x, y = cell_to_xy(cell, self.width)
            board[y][x] = 'o'
        x, y = cell_to_xy(self.snake_head, self.width)
        board[y][x] = 'H'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-serialisable view of the snapshot."""
        return {
            "tick": self.tick,
            "width": self.width,
            "size": self.size,
            "snake_cells": list(self.snake_cells),
            "direction": self.direction.value,
            "reward_cell": self.reward_cell,
            "game_state": self.game_state_text,
            "score": self.score,
        }

    def __repr__(self):
        return (
            f"<WorldSnapshot tick={self.tick}, head={self.snake_head}, "
            f"length={len(self.snake_cells)}, reward={self.reward_cell}, "
            f"state={self.game_state_text}>"
        )
