"""
Pure functions and types of the 2048 engine.

It includes the grid model (construction, validation, empty cells, maximum tile, move availability), the move
engine (line slide-and-merge and grid moves) and legal move detection.
"""

from .direction import Direction
from .engine import LineOutcome, MoveOutcome, line_view, merge_line, move, slide_and_merge
from .errors import GridError, InvalidCell, InvalidDirection, InvalidShape
from .gamemove import can_move, illegal_directions, legal_directions, legal_directions_mask
from .grid import EMPTY, adjacent_pairs, as_grid, empty_cells, empty_grid, freeze, has_any_move, max_value

__all__ = [
    "EMPTY",
    "Direction",
    "GridError",
    "InvalidCell",
    "InvalidDirection",
    "InvalidShape",
    "LineOutcome",
    "MoveOutcome",
    "adjacent_pairs",
    "as_grid",
    "can_move",
    "empty_cells",
    "empty_grid",
    "freeze",
    "has_any_move",
    "illegal_directions",
    "legal_directions",
    "legal_directions_mask",
    "line_view",
    "max_value",
    "merge_line",
    "move",
    "slide_and_merge",
]
