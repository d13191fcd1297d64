"""
Grid model for the 2048 game: construction, validation and structural queries.

A grid is a two-dimensional ``int64`` NumPy array where ``0`` marks an empty cell and every other cell
holds a power of two. Grids returned by this package are read-only, so they can be shared as value snapshots.
"""

from collections.abc import Sequence

from numpy import any as np_any
from numpy import argwhere, array, int64, integer, issubdtype, ndarray, zeros

from game2048.core.errors import InvalidCell, InvalidShape

# ##>: Value of an empty cell.
EMPTY = 0


def freeze(grid: ndarray) -> ndarray:
    """
    Mark an array as read-only and return it.

    Parameters
    ----------
    grid : ndarray
        Array owned by the caller. **Modified in-place** (only its flags).

    Returns
    -------
    ndarray
        The same array reference, now read-only.
    """
    grid.flags.writeable = False
    return grid


def _integral(values: ndarray) -> ndarray:
    """Copy integer cells into a read-only ``int64`` array, rejecting any other cell type."""
    if values.size == 0:
        return freeze(zeros(values.shape, dtype=int64))
    if not issubdtype(values.dtype, integer):
        raise InvalidCell(f'Grid cells must be integers, got dtype {values.dtype}.')
    return freeze(values.astype(int64, copy=True))


def as_grid(cells: ndarray | Sequence[Sequence[int]]) -> ndarray:
    """
    Validate a grid and copy it into a read-only ``int64`` array.

    Parameters
    ----------
    cells : ndarray | Sequence[Sequence[int]]
        A 2D array or a sequence of rows.

    Returns
    -------
    ndarray
        A new read-only array; never shares storage with ``cells``.

    Raises
    ------
    InvalidShape
        If the rows do not all have the same length, or the input is not two-dimensional.
    InvalidCell
        If a cell is not an integer (floats, booleans, None, strings). Values are never truncated.
    """
    if isinstance(cells, ndarray):
        if cells.ndim != 2:
            raise InvalidShape(f'Grid must be two-dimensional, got {cells.ndim} dimension(s).')
        return _integral(cells)

    try:
        rows = [list(row) for row in cells]
    except TypeError as error:
        raise InvalidShape('Grid must be a sequence of rows.') from error
    if not rows:
        return freeze(zeros((0, 0), dtype=int64))

    # ##: Every row must have the same number of cells.
    widths = {len(row) for row in rows}
    if len(widths) != 1:
        raise InvalidShape(f'Grid rows must have equal lengths, got lengths {sorted(widths)}.')

    try:
        values = array(rows)
    except ValueError as error:
        raise InvalidShape('Grid cells must be scalars.') from error
    if values.ndim != 2:
        raise InvalidShape(f'Grid must be two-dimensional, got {values.ndim} dimension(s).')
    return _integral(values)


def empty_grid(size: int, width: int | None = None) -> ndarray:
    """
    Create a grid where every cell is empty.

    Parameters
    ----------
    size : int
        Number of rows, and of columns when ``width`` is not given.
    width : int, optional
        Number of columns for a rectangular grid.

    Returns
    -------
    ndarray
        A read-only grid filled with ``EMPTY``.
    """
    columns = size if width is None else width
    return freeze(zeros((size, columns), dtype=int64))


def empty_cells(grid: ndarray | Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """
    List the coordinates of the empty cells.

    Parameters
    ----------
    grid : ndarray | Sequence[Sequence[int]]
        The grid to inspect.

    Returns
    -------
    list[tuple[int, int]]
        ``(row, column)`` pairs in row-major order; empty if the grid is full.
    """
    grid = as_grid(grid)
    return [(int(row), int(column)) for row, column in argwhere(grid == EMPTY)]


def max_value(grid: ndarray | Sequence[Sequence[int]]) -> int:
    """Return the largest tile on the grid, 0 when it holds no tile."""
    grid = as_grid(grid)
    return int(grid.max(initial=EMPTY))


def adjacent_pairs(grid: ndarray) -> tuple[ndarray, ndarray]:
    """
    Pair every cell with the next cell of its row.

    Parameters
    ----------
    grid : ndarray
        A grid, or a view whose rows are the lines of interest (e.g. ``grid.T`` for columns).

    Returns
    -------
    cells : ndarray
        Every cell except the last of each row.
    followers : ndarray
        The cell following each of ``cells`` in its row, same shape.
    """
    return grid[:, :-1], grid[:, 1:]


def has_any_move(grid: ndarray | Sequence[Sequence[int]]) -> bool:
    """
    Check whether at least one move can still change the grid.

    Parameters
    ----------
    grid : ndarray | Sequence[Sequence[int]]
        The grid to inspect.

    Returns
    -------
    bool
        True if an empty cell exists or two adjacent cells hold the same tile, False otherwise.

    Notes
    -----
    - Only neighbouring cells are compared, no move is performed.
    - A grid holding no tile at all counts as movable since it has empty cells, although no move changes
      it. Sessions never reach such a grid: a reset spawns tiles (unless
      ``start_tiles`` is 0) and moves never remove all of them.
    """
    grid = as_grid(grid)
    if np_any(grid == EMPTY):
        return True

    # ##: Full grid, every equal pair is a pair of tiles.
    pairs = (adjacent_pairs(grid), adjacent_pairs(grid.T))
    return any(np_any(cells == followers) for cells, followers in pairs)
