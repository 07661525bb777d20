"""
Errors raised by the grid engine.

The taxonomy is closed: a spawn on a full grid, and configuration mistakes caught at construction time.
"""


class GridError(Exception):
    """Base class for every error raised by the grid engine."""


class GridFull(GridError):
    """
    Raised when a tile is requested but no empty cell remains.

    A full grid is not necessarily finished: adjacent equal tiles may still merge.
    """

    def __init__(self, message: str = 'The grid is full'):
        super().__init__(message)


class InvalidConfiguration(GridError, ValueError):
    """Raised for a malformed grid size, tile matrix or spawn distribution."""
