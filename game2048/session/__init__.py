# -*- coding: utf-8 -*-
"""
Stateful collaborators of the 2048 engine.

It includes the game session (status, score and undo history), the random tile spawner and the storage port.
"""

from .game import GameSession, GameStatus, Snapshot, evaluate_status
from .spawner import TILE_SPAWN_PROBS, RandomTileSpawner, TileSpawner
from .storage import MemoryStore, SessionStore

__all__ = [
    "GameSession",
    "GameStatus",
    "MemoryStore",
    "RandomTileSpawner",
    "SessionStore",
    "Snapshot",
    "TILE_SPAWN_PROBS",
    "TileSpawner",
    "evaluate_status",
]
