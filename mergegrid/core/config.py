"""
Constants and configuration of the grid engine.
"""

from dataclasses import dataclass
from math import isfinite
from operator import index

from mergegrid.core.errors import InvalidConfiguration

# ##>: Value of an empty cell. Spawned tiles start at 2, so no real tile collides with it.
EMPTY = 0

# ##>: Values a spawned tile can take.
TILE_VALUES: tuple[int, int] = (2, 4)

DEFAULT_SIZE = 4
MIN_SIZE = 2


@dataclass(frozen=True)
class SpawnConfig:
    """
    Distribution of newly spawned tiles.

    Attributes
    ----------
    two_probability : float
        Probability that a spawned tile is a 2; otherwise it is a 4 (default is 0.75).
    """

    two_probability: float = 0.75

    def __post_init__(self):
        probability = self.two_probability
        if isinstance(probability, bool) or not isinstance(probability, (int, float)):
            raise InvalidConfiguration(f'two_probability must be a number, got {probability!r}')
        if not isfinite(probability) or not 0.0 <= probability <= 1.0:
            raise InvalidConfiguration(f'two_probability must be in [0, 1], got {probability}')


def as_integer(value, name: str) -> int:
    """
    Convert an integer-like value (a Python or numpy integer) to ``int``.

    Raises
    ------
    InvalidConfiguration
        If ``value`` is a bool, or not an integer at all.
    """
    if isinstance(value, bool):
        raise InvalidConfiguration(f'{name} must be an integer, got {value!r}')
    try:
        return index(value)
    except TypeError as error:
        raise InvalidConfiguration(f'{name} must be an integer, got {value!r}') from error


def validate_size(size: int) -> int:
    """
    Check the side length of a grid.

    Parameters
    ----------
    size : int
        Number of rows (and columns) of the grid.

    Returns
    -------
    int
        The validated size.

    Raises
    ------
    InvalidConfiguration
        If the size is not an integer greater or equal to ``MIN_SIZE``.
    """
    size = as_integer(size, 'size')
    if size < MIN_SIZE:
        raise InvalidConfiguration(f'size must be >= {MIN_SIZE}, got {size}')
    return size
