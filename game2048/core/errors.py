"""Exceptions raised by the grid model and the move engine."""


class GridError(ValueError):
    """Base class for invalid input given to the engine."""


class InvalidShape(GridError):
    """Raised when a grid is not a rectangular two-dimensional matrix."""


class InvalidDirection(GridError):
    """Raised when a move direction is not one of left, up, right or down."""


class InvalidCell(GridError):
    """Raised when a grid cell is not an integer."""
