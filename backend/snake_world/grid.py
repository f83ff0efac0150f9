"""
Grid index model.

Cells are flat indices into a ``width x width`` board, row-major, so cell
``c`` sits at column ``c % width`` of row ``c // width``.

Vertical moves wrap over the whole grid (top row <-> bottom row) while
horizontal moves wrap inside the current row only, so a snake leaving the
right edge re-enters on the left edge of the same row instead of bleeding
into the next one.
"""

from typing import Tuple

from .constants import Direction

OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def next_cell(direction: Direction, head: int, width: int, size: int) -> int:
    """
    Return the cell reached by moving one step from ``head``.

    Args:
        direction: Direction to move in
        head: Current flat cell index
        width: Cells per row
        size: Total cells on the board (``width * width``)

    Returns:
        The flat index of the neighbouring cell, wrapped onto the board.
    """
    row = head // width

    if direction == Direction.UP:
        return (head - width) % size
    if direction == Direction.DOWN:
        return (head + width) % size
    if direction == Direction.RIGHT:
        return row * width + (head + 1) % width
    if direction == Direction.LEFT:
        return row * width + (head - 1) % width

    raise ValueError(f"Unknown direction: {direction!r}")


def opposite(direction: Direction) -> Direction:
    return OPPOSITES[direction]


def cell_to_xy(cell: int, width: int) -> Tuple[int, int]:
    """Return ``(column, row)`` for a flat cell index."""
    return cell % width, cell // width


def xy_to_cell(x: int, y: int, width: int) -> int:
    if not (0 <= x < width and 0 <= y < width):
        raise ValueError(f"Position out of bounds at {(x, y)} for width {width}.")
    return y * width + x
