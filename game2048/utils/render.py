"""Plain text rendering of a grid."""

from collections.abc import Sequence

from numpy import ndarray

from game2048.core.grid import EMPTY, as_grid


def render_grid(grid: ndarray | Sequence[Sequence[int]], empty: str = '.') -> str:
    """
    Render a grid as tab separated rows.

    Parameters
    ----------
    grid : ndarray | Sequence[Sequence[int]]
        The grid to render.
    empty : str, optional
        Text shown for an empty cell (default is ".").

    Returns
    -------
    str
        One line per row.
    """
    grid = as_grid(grid)
    return '\n'.join(' \t'.join(empty if cell == EMPTY else str(cell) for cell in row) for row in grid.tolist())
