"""
Move engine for the 2048 game.

A move is reduced to a one-dimensional slide-and-merge towards the start of each line. Rows are the lines
for horizontal moves and columns for vertical ones; lines are reversed for right and down moves.
"""

from collections.abc import Callable, Sequence
from itertools import groupby
from typing import NamedTuple

from numpy import array_equal, asarray, ndarray, zeros_like

from game2048.core.direction import Direction
from game2048.core.grid import EMPTY, as_grid, freeze


class LineOutcome(NamedTuple):
    """Result of sliding a single line towards its start."""

    line: ndarray
    moved: bool
    score_delta: int


class MoveOutcome(NamedTuple):
    """
    Result of a move.

    Attributes
    ----------
    grid : ndarray
        The grid after the move, read-only and never sharing storage with the input grid.
    moved : bool
        True if any cell changed position or value.
    score_delta : int
        Sum of the tiles produced by merges during the move.
    """

    grid: ndarray
    moved: bool
    score_delta: int


# ##>: Views exposing the lines of a grid so that each line slides towards index 0.
_LINES: dict[Direction, Callable[[ndarray], ndarray]] = {
    Direction.LEFT: lambda grid: grid,
    Direction.UP: lambda grid: grid.T,
    Direction.RIGHT: lambda grid: grid[:, ::-1],
    Direction.DOWN: lambda grid: grid.T[:, ::-1],
}


def line_view(grid: ndarray, direction: Direction) -> ndarray:
    """
    View a grid as the lines of a move, each line sliding towards its index 0.

    Parameters
    ----------
    grid : ndarray
        The grid to view. Writing through the view writes into ``grid``.
    direction : Direction
        The direction of the move.

    Returns
    -------
    ndarray
        Rows for left, reversed rows for right, columns for up, reversed columns for down.
    """
    return _LINES[direction](grid)


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Merge adjacent equal values in a line and compute the total score.

    Parameters
    ----------
    line : ndarray
        A 1D array representing one row or column of the grid.

    Returns
    -------
    score : int
        The total score obtained from merging.
    merged_line : ndarray
        The non-empty values after merging, without padding.

    Notes
    -----
    Once empty cells are dropped, a run of ``k`` equal tiles ``v`` becomes ``k // 2`` tiles ``2v`` followed
    by one ``v`` when ``k`` is odd. Runs are taken on the values before merging, so a merged tile never
    merges again.
    """
    result: list[int] = []
    score = 0
    for value, run in groupby(line[line != EMPTY].tolist()):
        pairs, single = divmod(len(list(run)), 2)
        result.extend([value * 2] * pairs + [value] * single)
        score += value * 2 * pairs

    return score, asarray(result, dtype=line.dtype)


def slide_and_merge(line: ndarray | Sequence[int]) -> LineOutcome:
    """
    Slide a line towards its start, merging equal neighbours.

    Parameters
    ----------
    line : ndarray | Sequence[int]
        The line to slide.

    Returns
    -------
    LineOutcome
        The padded line, whether any position changed, and the score gained.

    Examples
    --------
    >>> slide_and_merge([2, 2, 2, 2])
    LineOutcome(line=array([4, 4, 0, 0]), moved=True, score_delta=8)
    """
    line = as_grid([line])[0]
    score, merged = merge_line(line)

    result = zeros_like(line)
    result[: len(merged)] = merged
    return LineOutcome(result, not array_equal(result, line), score)


def move(grid: ndarray | Sequence[Sequence[int]], direction: Direction | str | int) -> MoveOutcome:
    """
    Slide the grid in a direction.

    Parameters
    ----------
    grid : ndarray | Sequence[Sequence[int]]
        The current grid. It is never modified.
    direction : Direction | str | int
        The direction to slide, see ``Direction.parse``.

    Returns
    -------
    MoveOutcome
        The new grid, the moved flag and the score gained.

    Raises
    ------
    InvalidDirection
        If the direction is not recognized.
    InvalidShape
        If the grid rows have differing lengths.
    InvalidCell
        If a cell is not an integer.

    Notes
    -----
    - The same line view is taken on the input and on the output buffer, so writing a processed line through
      the output view puts it back in place and undoes any reversal.
    - No tile is added; spawning is the caller's responsibility.
    """
    direction = Direction.parse(direction)
    grid = as_grid(grid)

    result = zeros_like(grid)
    target = line_view(result, direction)

    moved = False
    score = 0
    for index, line in enumerate(line_view(grid, direction)):
        outcome = slide_and_merge(line)
        target[index] = outcome.line
        moved = moved or outcome.moved
        score += outcome.score_delta

    return MoveOutcome(freeze(result), moved, score)
