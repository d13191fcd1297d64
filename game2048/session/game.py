"""
Game session for the 2048 game.

The session owns the authoritative grid, score, status and undo history. It calls the pure move engine,
asks its spawner for a new tile after every successful move, then derives the status from the grid.
"""

import logging
from collections import deque
from enum import Enum
from typing import NamedTuple

from numpy import ndarray

from game2048.config import GameConfig, default_config
from game2048.core.direction import Direction
from game2048.core.engine import MoveOutcome, move
from game2048.core.grid import as_grid, empty_grid, has_any_move, max_value
from game2048.session.spawner import RandomTileSpawner, TileSpawner
from game2048.session.storage import SessionStore
from game2048.utils.render import render_grid

_logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """
    Status of a session.

    PLAYING: moves are accepted.
    WON: a tile reached the win threshold.
    OVER: no move can change the grid.
    """

    PLAYING = 'playing'
    WON = 'won'
    OVER = 'over'


class Snapshot(NamedTuple):
    """State of a session at one point in time, kept by the history and the store."""

    grid: ndarray
    score: int
    status: GameStatus


def evaluate_status(grid: ndarray, win_threshold: int) -> GameStatus:
    """
    Derive the status of a game from its grid.

    Parameters
    ----------
    grid : ndarray
        The grid after a move and its spawned tile.
    win_threshold : int
        Smallest tile value that wins the game.

    Returns
    -------
    GameStatus
        WON if a tile reached the threshold, even when no move is left; OVER if no move is left;
        PLAYING otherwise.
    """
    if max_value(grid) >= win_threshold:
        return GameStatus.WON
    if not has_any_move(grid):
        return GameStatus.OVER
    return GameStatus.PLAYING


class GameSession:
    """
    A single game of 2048.

    Parameters
    ----------
    config : GameConfig, optional
        Session configuration (default is ``default_config()``).
    spawner : TileSpawner, optional
        Places new tiles (default is a ``RandomTileSpawner`` seeded with ``config.seed``).
    store : SessionStore, optional
        Receives a snapshot after every change. A snapshot already in the store is restored at construction.

    Notes
    -----
    The session is not thread-safe: callers serialize moves against one session.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        spawner: TileSpawner | None = None,
        store: SessionStore | None = None,
    ):
        self.config = config if config is not None else default_config()
        self._spawner = spawner if spawner is not None else RandomTileSpawner(seed=self.config.seed)
        self._store = store
        self._history: deque[Snapshot] = deque(maxlen=self.config.history_limit)

        self._grid: ndarray = empty_grid(self.config.size)
        self._score = 0
        self._status = GameStatus.PLAYING

        saved = store.load() if store is not None else None
        if saved is not None:
            self.restore(saved)
        else:
            self.reset()

    @property
    def grid(self) -> ndarray:
        """The current grid (read-only)."""
        return self._grid

    @property
    def score(self) -> int:
        """The cumulative score."""
        return self._score

    @property
    def status(self) -> GameStatus:
        """The current status."""
        return self._status

    @property
    def is_finished(self) -> bool:
        """True once the game is won or over."""
        return self._status is not GameStatus.PLAYING

    @property
    def can_undo(self) -> bool:
        """True if at least one move can be undone."""
        return bool(self._history)

    def snapshot(self) -> Snapshot:
        """Capture the current state."""
        return Snapshot(self._grid, self._score, self._status)

    def restore(self, snapshot: Snapshot) -> None:
        """
        Replace the current state by a snapshot. The undo history is cleared.

        Raises
        ------
        InvalidShape
            If the snapshot grid is malformed.
        """
        self._grid = as_grid(snapshot.grid)
        self._score = int(snapshot.score)
        self._status = GameStatus(snapshot.status)
        self._history.clear()
        self._save()

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game: an empty grid with ``config.start_tiles`` random tiles.

        The status is derived from the starting grid, so a grid that is already stuck or already holds a
        winning tile starts finished.

        Parameters
        ----------
        seed : int, optional
            If given, replace the spawner by a ``RandomTileSpawner`` with this seed.

        Returns
        -------
        ndarray
            The new grid.
        """
        if seed is not None:
            self._spawner = RandomTileSpawner(seed=seed)

        grid = empty_grid(self.config.size)
        for _ in range(self.config.start_tiles):
            grid = self._spawner.spawn(grid)

        self._grid = grid
        self._score = 0
        self._status = evaluate_status(grid, self.config.win_threshold)
        self._history.clear()
        _logger.info('New %dx%d game', self.config.size, self.config.size)
        self._save()
        return self._grid

    def move(self, direction: Direction | str | int) -> MoveOutcome | None:
        """
        Apply a move to the session.

        Parameters
        ----------
        direction : Direction | str | int
            The direction to slide, see ``Direction.parse``.

        Returns
        -------
        MoveOutcome | None
            The engine outcome, before the new tile is spawned. None if the game is already won or over.

        Raises
        ------
        InvalidDirection
            If the direction is not recognized.

        Notes
        -----
        - A move that does not change the grid leaves the session untouched: no tile, no history entry.
        - The win check runs before the lose check, so a winning move that also fills the grid wins.
        """
        if self.is_finished:
            _logger.debug('Ignoring move %r, game is %s', direction, self._status.value)
            return None

        outcome = move(self._grid, direction)
        if not outcome.moved:
            _logger.debug('Move %r changed nothing', direction)
            return outcome

        self._history.append(self.snapshot())
        self._grid = self._spawner.spawn(outcome.grid)
        self._score += outcome.score_delta
        self._status = evaluate_status(self._grid, self.config.win_threshold)
        _logger.debug('Move %r scored %d, total %d', direction, outcome.score_delta, self._score)

        if self.is_finished:
            _logger.info('Game %s with score %d and max tile %d', self._status.value, self._score, max_value(self._grid))
        self._save()
        return outcome

    def undo(self) -> bool:
        """
        Restore the state preceding the last successful move.

        Returns
        -------
        bool
            False if there was nothing to undo.
        """
        if not self._history:
            return False

        self._grid, self._score, self._status = self._history.pop()
        _logger.debug('Undo, score back to %d', self._score)
        self._save()
        return True

    def render(self) -> None:
        """
        Render the game board. This method prints the current grid and score to the console.
        """
        print(render_grid(self._grid))
        print(f'score: {self._score}')

    def _save(self) -> None:
        if self._store is not None:
            self._store.save(self.snapshot())
