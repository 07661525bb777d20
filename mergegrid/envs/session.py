"""Turn loop of a merge-grid game."""

import logging

from numpy import ndarray
from numpy.random import SeedSequence, default_rng

from mergegrid.core.config import DEFAULT_SIZE, SpawnConfig, as_integer, validate_size
from mergegrid.core.errors import InvalidConfiguration
from mergegrid.core.orientation import MoveDirection
from mergegrid.envs.grid import Grid

logger = logging.getLogger(__name__)


class GameSession:
    """
    One game on a merge grid.

    This class drives the turns of the game: it resets the grid with its starting tiles, applies moves, spawns a
    tile after each move that changed the grid, and tracks whether the game is over.
    """

    # ##: Direction for each key name understood by the keyboard front ends.
    ACTIONS = {direction.value: direction for direction in MoveDirection}

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        *,
        spawn_config: SpawnConfig | None = None,
        seed: int | SeedSequence | None = None,
        start_tiles: int = 2,
    ):
        """
        Initialize the game and its grid.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4).
        spawn_config : SpawnConfig, optional
            Distribution of spawned tiles.
        seed : int or SeedSequence, optional
            Random seed for reproducibility.
        start_tiles : int, optional
            Number of tiles spawned on reset (default is 2).

        Raises
        ------
        InvalidConfiguration
            If ``size`` is invalid, or if ``start_tiles`` is not an integer between 0 and the number of cells.
        """
        self.size = validate_size(size)
        start_tiles = as_integer(start_tiles, 'start_tiles')
        if start_tiles < 0 or start_tiles > self.size * self.size:
            raise InvalidConfiguration(f'start_tiles must be in [0, {self.size * self.size}], got {start_tiles}')

        self._spawn_config = spawn_config
        self._start_tiles = start_tiles
        self._grid: Grid | None = None
        self._reward = 0
        self._moves = 0

        self.reset(seed=seed)

    @property
    def grid(self) -> Grid:
        """Get the grid of the current game."""
        return self._grid

    @property
    def observation(self) -> ndarray:
        """Get a read-only view of the current tiles."""
        return self._grid.tiles

    @property
    def reward(self) -> int:
        """Get the points earned by the last move."""
        return self._reward

    @property
    def score(self) -> int:
        """Get the score of the current game."""
        return self._grid.score

    @property
    def moves(self) -> int:
        """Get the number of moves that changed the grid."""
        return self._moves

    @property
    def is_finished(self) -> bool:
        """Check if the game is finished."""
        return self._grid.is_finished

    def reset(self, seed: int | SeedSequence | None = None) -> ndarray:
        """
        Start a new game on an empty grid with the starting tiles.

        Parameters
        ----------
        seed : int, optional
            Random seed for reproducibility.

        Returns
        -------
        ndarray
            The new tiles.
        """
        self._grid = Grid(self.size, spawn_config=self._spawn_config, rng=default_rng(seed))
        for _ in range(self._start_tiles):
            self._grid.spawn()
        self._reward = 0
        self._moves = 0
        logger.debug('New game of size %d with %d tiles', self.size, self._start_tiles)
        return self.observation

    def step(self, direction: MoveDirection | str) -> tuple[ndarray, int, bool]:
        """
        Play one turn.

        Parameters
        ----------
        direction : MoveDirection or str
            Direction of the move.

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The tiles after the turn (ndarray)
            - The points earned by this move (int)
            - Whether the game is over after this turn (bool)

        Notes
        -----
        - A move that does not change the grid earns nothing and spawns no tile.
        - A move that changes the grid always leaves an empty cell, so the spawn cannot fail.
        """
        score_before = self._grid.score
        if self._grid.move(direction):
            self._moves += 1
            self._reward = self._grid.score - score_before
            self._grid.spawn()
        else:
            self._reward = 0

        done = self.is_finished
        if done:
            logger.info('Game over after %d moves, score %d', self._moves, self._grid.score)
        return self.observation, self._reward, done

    def render(self) -> None:
        """Print the grid and the score to the console."""
        self._grid.render()
