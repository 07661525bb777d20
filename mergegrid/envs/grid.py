"""Square grid of numeric tiles with its accumulated score."""

import logging
from typing import NamedTuple

from numpy import asarray, count_nonzero, int64, issubdtype, integer, ndarray, zeros
from numpy.random import Generator, default_rng

from mergegrid.core.config import DEFAULT_SIZE, EMPTY, SpawnConfig, validate_size
from mergegrid.core.errors import InvalidConfiguration
from mergegrid.core.gameboard import empty_cells, is_full, latent_state, spawn_tile
from mergegrid.core.gamemove import can_move, is_done, legal_actions
from mergegrid.core.orientation import MoveDirection, as_direction
from mergegrid.utils.text import render_text

logger = logging.getLogger(__name__)


class Tile(NamedTuple):
    """A tile value and its position on the grid."""

    row: int
    col: int
    value: int


class Grid:
    """
    N×N board of tiles plus the score earned by merges.

    The grid starts empty with a score of zero. It only changes through ``move`` and ``spawn``; both either
    complete or leave the grid as it was.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        *,
        spawn_config: SpawnConfig | None = None,
        rng: Generator | None = None,
        seed: int | None = None,
    ):
        """
        Create an empty grid.

        Parameters
        ----------
        size : int, optional
            The number of rows and columns (default is 4, minimum 2).
        spawn_config : SpawnConfig, optional
            Distribution of spawned tiles (default: 2 with probability 0.75, else 4).
        rng : Generator, optional
            Source of randomness for spawns. Takes precedence over ``seed``.
        seed : int, optional
            Seed used to build a generator when ``rng`` is not given.

        Raises
        ------
        InvalidConfiguration
            If ``size`` is not an integer of at least 2.
        """
        self._size = validate_size(size)
        self._tiles: ndarray = zeros((self._size, self._size), dtype=int64)
        self._score = 0
        self._spawn_config = spawn_config if spawn_config is not None else SpawnConfig()
        self._rng = rng if rng is not None else default_rng(seed)

    @classmethod
    def from_tiles(cls, tiles, score: int = 0, **kwargs) -> 'Grid':
        """
        Build a grid holding the given tiles.

        Parameters
        ----------
        tiles : array_like
            Square matrix of tile values, 0 for empty cells.
        score : int, optional
            Initial score (default is 0).
        **kwargs
            Forwarded to the constructor (``spawn_config``, ``rng``, ``seed``).

        Raises
        ------
        InvalidConfiguration
            If the matrix is not square, is smaller than 2×2, or holds a value that is neither 0 nor a power of two
            of at least 2, or if ``score`` is negative.
        """
        matrix = asarray(tiles)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise InvalidConfiguration(f'tiles must be a square matrix, got shape {matrix.shape}')
        if matrix.size and not issubdtype(matrix.dtype, integer):
            raise InvalidConfiguration(f'tiles must hold integers, got {matrix.dtype}')

        occupied = matrix[matrix != EMPTY]
        if ((occupied < 2) | ((occupied & (occupied - 1)) != 0)).any():
            raise InvalidConfiguration('every tile must be a power of two >= 2')
        if score < 0:
            raise InvalidConfiguration(f'score must be >= 0, got {score}')

        grid = cls(matrix.shape[0], **kwargs)
        grid._tiles[...] = matrix
        grid._score = int(score)
        return grid

    @property
    def size(self) -> int:
        """Get the number of rows (and columns) of the grid."""
        return self._size

    @property
    def tiles(self) -> ndarray:
        """Get a read-only view of the tiles, 0 marking an empty cell."""
        view = self._tiles.view()
        view.flags.writeable = False
        return view

    @property
    def score(self) -> int:
        """Get the sum of all tiles created by merges so far."""
        return self._score

    @property
    def is_full(self) -> bool:
        """Check if every cell holds a tile."""
        return is_full(self._tiles)

    @property
    def is_finished(self) -> bool:
        """Check if the game is over: no direction would change the grid."""
        return is_done(self._tiles)

    @property
    def max_tile(self) -> int:
        """Get the largest tile on the grid, 0 when empty."""
        return int(self._tiles.max())

    def empty_cells(self) -> list[tuple[int, int]]:
        """List the ``(row, col)`` coordinates of empty cells."""
        return empty_cells(self._tiles)

    def occupied(self) -> list[Tile]:
        """List every tile on the grid in row-major order."""
        return [
            Tile(row, col, int(self._tiles[row, col]))
            for row in range(self._size)
            for col in range(self._size)
            if self._tiles[row, col] != EMPTY
        ]

    def can_move(self, direction: MoveDirection | str) -> bool:
        """Check if a move in ``direction`` would change the grid."""
        return can_move(self._tiles, direction)

    def legal_moves(self) -> list[MoveDirection]:
        """List the directions that would change the grid."""
        return legal_actions(self._tiles)

    def move(self, direction: MoveDirection | str) -> bool:
        """
        Slide and merge every tile in ``direction``.

        Parameters
        ----------
        direction : MoveDirection or str
            Direction of the move, or its name (``"up"``, ``"down"``, ``"left"``, ``"right"``).

        Returns
        -------
        bool
            True if the grid changed. The score grows by the value of every merged tile.

        Raises
        ------
        ValueError
            If ``direction`` is not one of the four directions.
        """
        direction = as_direction(direction)
        updated, points, changed = latent_state(self._tiles, direction)
        if changed:
            self._tiles = updated
            self._score += points
        logger.debug('Move %s: changed=%s, points=%d, score=%d', direction.value, changed, points, self._score)
        return changed

    def spawn(self) -> Tile:
        """
        Add one tile to a random empty cell.

        Returns
        -------
        Tile
            The new tile.

        Raises
        ------
        GridFull
            If no cell is empty. The grid is left unchanged.
        """
        tile = Tile(*spawn_tile(self._tiles, self._rng, self._spawn_config))
        logger.debug('Spawned %d at (%d, %d)', tile.value, tile.row, tile.col)
        return tile

    def copy(self) -> 'Grid':
        """
        Copy the tiles and score into an independent grid.

        The copy shares the spawn configuration and the random generator.
        """
        clone = Grid(self._size, spawn_config=self._spawn_config, rng=self._rng)
        clone._tiles[...] = self._tiles
        clone._score = self._score
        return clone

    def count(self) -> int:
        """Count the occupied cells."""
        return int(count_nonzero(self._tiles))

    def render(self) -> None:
        """Print the grid and its score to the console."""
        print(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._size == other._size and self._score == other._score and bool((self._tiles == other._tiles).all())

    __hash__ = None

    def __str__(self) -> str:
        return render_text(self._tiles, self._score)

    def __repr__(self) -> str:
        return f'Grid(size={self._size}, score={self._score}, tiles={self._tiles.tolist()})'
