"""
Base player interface for the simulation driver.
"""

from typing import Optional

from snake_world.constants import Direction
from snake_world.game_state import WorldSnapshot


class Player:
    """
    Base class/interface for player logic.

    A player looks at the current snapshot and decides which way the snake
    should turn before the next tick.
    """

    def get_move(self, snapshot: WorldSnapshot) -> Optional[Direction]:
        """
        Return a move direction given the current world snapshot.

        Args:
            snapshot: Current state of the world

        Returns:
            A Direction, or None to keep the current facing
        """
        raise NotImplementedError
