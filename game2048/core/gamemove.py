"""
Legal move detection for the 2048 game, computed from adjacent cells without performing the moves.
"""

from collections.abc import Sequence

from numpy import any as np_any
from numpy import ndarray

from game2048.core.direction import Direction
from game2048.core.engine import line_view
from game2048.core.grid import EMPTY, adjacent_pairs, as_grid


def _lines_can_slide(lines: ndarray) -> bool:
    """Check if any line changes when slid towards its index 0."""
    cells, followers = adjacent_pairs(lines)

    # ##: A tile behind a gap moves into it; two equal tiles merge.
    gap = (cells == EMPTY) & (followers != EMPTY)
    merge = (cells != EMPTY) & (cells == followers)
    return bool(np_any(gap | merge))


def legal_directions_mask(grid: ndarray | Sequence[Sequence[int]]) -> tuple[bool, ...]:
    """
    Get a boolean mask for all four directions.

    Parameters
    ----------
    grid : ndarray | Sequence[Sequence[int]]
        The current grid.

    Returns
    -------
    tuple[bool, ...]
        Mask for (left, up, right, down) where True means the move changes the grid.

    Notes
    -----
    Each direction is checked on the same line views the move engine slides, so the mask agrees with
    ``move(grid, direction).moved`` by construction.
    """
    grid = as_grid(grid)
    return tuple(_lines_can_slide(line_view(grid, direction)) for direction in Direction)


def legal_directions(grid: ndarray | Sequence[Sequence[int]]) -> list[Direction]:
    """
    Determine the directions that change the grid.

    Parameters
    ----------
    grid : ndarray | Sequence[Sequence[int]]
        The current grid.

    Returns
    -------
    list[Direction]
        Legal directions, in action order.
    """
    mask = legal_directions_mask(grid)
    return [direction for direction, legal in zip(Direction, mask) if legal]


def illegal_directions(grid: ndarray | Sequence[Sequence[int]]) -> list[Direction]:
    """Determine the directions that leave the grid unchanged."""
    mask = legal_directions_mask(grid)
    return [direction for direction, legal in zip(Direction, mask) if not legal]


def can_move(grid: ndarray | Sequence[Sequence[int]], direction: Direction | str | int) -> bool:
    """
    Check if a move in the given direction changes the grid.

    Raises
    ------
    InvalidDirection
        If the direction is not recognized.
    """
    direction = Direction.parse(direction)
    return _lines_can_slide(line_view(as_grid(grid), direction))
