"""
Scripted player - replays a fixed list of moves.

Handy for reproducing a game tick by tick from the command line, e.g.
``--moves "RRDD-L"`` or ``--moves "RIGHT,RIGHT,DOWN"``.
"""

from typing import Iterable, List, Optional, Union

from snake_world.constants import Direction
from snake_world.game_state import WorldSnapshot
from snake_world.world import coerce_direction
from .base import Player

# Single-letter shorthands accepted by parse_moves
SHORTHANDS = {
    "U": Direction.UP,
    "R": Direction.RIGHT,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
}
KEEP_MARKERS = {"-", "."}


def parse_moves(text: str) -> List[Optional[Direction]]:
    """
    Parse a move script.

    Comma-separated scripts use full direction names; anything else is read
    one character at a time using U/R/D/L. ``-`` or ``.`` keeps the current
    facing for that tick.
    """
    text = text.strip()
    if not text:
        return []

    if "," in text or text.upper() in Direction.__members__:
        tokens = [t.strip() for t in text.split(",")]
    else:
        tokens = list(text.replace(" ", ""))
    moves: List[Optional[Direction]] = []
    for token in tokens:
        if token in KEEP_MARKERS or token == "":
            moves.append(None)
        elif token.upper() in SHORTHANDS:
            moves.append(SHORTHANDS[token.upper()])
        else:
            moves.append(coerce_direction(token))
    return moves


class ScriptedPlayer(Player):
    """Returns the scripted moves in order, then keeps the current facing forever."""

    def __init__(self, moves: Iterable[Union[Direction, str, None]]):
        self.moves: List[Optional[Direction]] = [
            None if m is None or m in KEEP_MARKERS else coerce_direction(m) for m in moves
        ]
        self.position = 0

    @classmethod
    def from_script(cls, text: str) -> "ScriptedPlayer":
        return cls(parse_moves(text))

    def get_move(self, snapshot: WorldSnapshot) -> Optional[Direction]:
        if self.position >= len(self.moves):
            return None
        move = self.moves[self.position]
        self.position += 1
        return move
