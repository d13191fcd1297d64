"""
Random tile placement after a successful move.

The engine is deterministic; randomness lives here, behind the ``TileSpawner`` interface, so that sessions
can be driven by a seeded or scripted spawner in tests.
"""

import logging
from abc import ABC, abstractmethod

from numpy import ndarray
from numpy.random import PCG64DXSM, default_rng

from game2048.core.grid import as_grid, empty_cells, freeze

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

_logger = logging.getLogger(__name__)


class TileSpawner(ABC):
    """Places one new tile on a grid."""

    @abstractmethod
    def spawn(self, grid: ndarray) -> ndarray:
        """
        Place one tile on an empty cell.

        Parameters
        ----------
        grid : ndarray
            The grid after a move. It is never modified.

        Returns
        -------
        ndarray
            A new read-only grid with one more tile, or an unchanged copy if the grid is full.
        """


class RandomTileSpawner(TileSpawner):
    """
    Spawner picking a uniformly random empty cell and a random tile value.

    Parameters
    ----------
    seed : int, optional
        Random number generator seed for reproducibility.
    probs : dict[int, float], optional
        Probability of each tile value (default is ``TILE_SPAWN_PROBS``).
    """

    def __init__(self, seed: int | None = None, probs: dict[int, float] | None = None):
        probs = TILE_SPAWN_PROBS if probs is None else probs
        if abs(sum(probs.values()) - 1.0) > 1e-9:
            raise ValueError(f'Tile probabilities must sum to 1, got {probs}')

        self._values = list(probs)
        self._probs = list(probs.values())
        self._rng = default_rng(PCG64DXSM(seed))

    def spawn(self, grid: ndarray) -> ndarray:
        cells = empty_cells(grid)
        if not cells:
            _logger.debug('No empty cell, nothing spawned')
            return as_grid(grid)

        row, column = cells[int(self._rng.integers(len(cells)))]
        value = int(self._rng.choice(self._values, p=self._probs))

        new_grid = as_grid(grid).copy()
        new_grid[row, column] = value
        _logger.debug('Spawned %d at (%d, %d)', value, row, column)
        return freeze(new_grid)
