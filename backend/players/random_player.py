"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from snake_world.constants import Direction
from snake_world.game_state import WorldSnapshot
from snake_world.grid import next_cell
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that does not run into the body.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, snapshot: WorldSnapshot) -> Direction:
        cells = snapshot.snake_cells
        head = cells[0]
        neck = cells[1] if len(cells) > 1 else None

        # The tail cell is vacated on the next tick, so it is not a danger
        body = set(cells[1:-1])

        valid_moves: List[Direction] = []
        for move in Direction:
            target = next_cell(move, head, snapshot.width, snapshot.size)
            if target == neck or target in body:
                continue
            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(list(Direction))

        return self.rng.choice(valid_moves)
