# -*- coding: utf-8 -*-
"""
Deterministic 2048 engine.

The ``core`` package holds the pure grid model and move engine; the ``session`` package holds the game
session built on top of it, with injectable tile spawning and storage.
"""

from .config import GameConfig, classic_config, default_config
from .core import (
    EMPTY,
    Direction,
    InvalidCell,
    InvalidDirection,
    InvalidShape,
    MoveOutcome,
    as_grid,
    empty_cells,
    empty_grid,
    has_any_move,
    legal_directions,
    max_value,
    move,
    slide_and_merge,
)
from .session import GameSession, GameStatus, MemoryStore, RandomTileSpawner

__all__ = [
    "EMPTY",
    "Direction",
    "GameConfig",
    "GameSession",
    "GameStatus",
    "InvalidCell",
    "InvalidDirection",
    "InvalidShape",
    "MemoryStore",
    "MoveOutcome",
    "RandomTileSpawner",
    "as_grid",
    "classic_config",
    "default_config",
    "empty_cells",
    "empty_grid",
    "has_any_move",
    "legal_directions",
    "max_value",
    "move",
    "slide_and_merge",
]
