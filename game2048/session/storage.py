"""
Storage port for game sessions.

A session saves a snapshot after every change and restores the last one when it starts. Only the in-memory
store ships with the package; durable stores implement ``SessionStore``.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from game2048.session.game import Snapshot

_logger = logging.getLogger(__name__)


class SessionStore(ABC):
    """Saves and loads the snapshot of a single session."""

    @abstractmethod
    def save(self, snapshot: 'Snapshot') -> None:
        """Replace the stored snapshot."""

    @abstractmethod
    def load(self) -> 'Snapshot | None':
        """Return the stored snapshot, None if nothing was saved."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored snapshot."""


class MemoryStore(SessionStore):
    """Store keeping the last snapshot in memory."""

    def __init__(self):
        self._snapshot: 'Snapshot | None' = None

    def save(self, snapshot: 'Snapshot') -> None:
        _logger.debug('Saving snapshot with score %d (%s)', snapshot.score, snapshot.status.value)
        self._snapshot = snapshot

    def load(self) -> 'Snapshot | None':
        return self._snapshot

    def clear(self) -> None:
        self._snapshot = None
