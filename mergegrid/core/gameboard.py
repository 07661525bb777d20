"""
Core functionality of the grid engine: the canonical slide and merge, directional moves and tile spawning.
"""

from numpy import argwhere, ndarray
from numpy import all as np_all
from numpy.random import Generator

from mergegrid.core.config import EMPTY, TILE_VALUES, SpawnConfig
from mergegrid.core.errors import GridFull
from mergegrid.core.orientation import MoveDirection, denormalize, normalize

# ##>: Shared default distribution, immutable.
DEFAULT_SPAWN = SpawnConfig()


def slide_line(line: ndarray) -> tuple[int, bool]:
    """
    Slide and merge one line toward its last index, in place.

    Parameters
    ----------
    line : ndarray
        A 1D array holding one row of the board. **Modified in-place.**

    Returns
    -------
    score : int
        Sum of the values of the tiles created by merges.
    changed : bool
        True if any tile moved or merged.

    Notes
    -----
    - Sources are scanned from the last index toward the first, while a border cursor marks the next
      destination, starting at the last index.
    - The border walks back over occupied cells holding a different value, stopping on an empty cell or on an
      equal tile.
    - After a merge the border steps past the merged tile, so a tile merges at most once per move:
      ``[2, 2, 2, 0]`` becomes ``[0, 0, 2, 4]``.
    """
    score = 0
    changed = False
    border = len(line) - 1

    for source in range(len(line) - 1, -1, -1):
        value = line[source]
        if value == EMPTY:
            continue

        # ##: Find the destination of the tile.
        while line[border] != EMPTY and line[border] != value:
            border -= 1

        if border == source:
            continue

        line[source] = EMPTY
        changed = True
        if line[border] == EMPTY:
            line[border] = value
        else:
            line[border] = value * 2
            score += int(value) * 2
            # ##>: The merged tile is locked for the rest of this move.
            border -= 1

    return score, changed


def slide_and_merge(board: ndarray) -> tuple[int, ndarray, bool]:
    """
    Slide every row of the board toward the right, merge equal tiles, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        A new board after sliding and merging.
    changed : bool
        True if at least one row changed.

    Notes
    -----
    - Rows never interact with each other.
    - For other directions, rotate the board before calling this function.
    """
    result = board.copy()
    score = 0
    changed = False

    for row in result:
        score_row, changed_row = slide_line(row)
        score += score_row
        changed = changed or changed_row

    return score, result, changed


def latent_state(state: ndarray, direction: MoveDirection | str) -> tuple[ndarray, int, bool]:
    """
    Compute the board after a move, without adding a new tile.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. Not modified.
    direction : MoveDirection or str
        The direction of the move.

    Returns
    -------
    new_state : ndarray
        The board after the move.
    score : int
        Points earned by the merges of this move.
    changed : bool
        True if the move altered the board.
    """
    score, updated_board, changed = slide_and_merge(normalize(state, direction))
    return denormalize(updated_board, direction), score, changed


def empty_cells(state: ndarray) -> list[tuple[int, int]]:
    """
    List the empty cells of a board in row-major order.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list of tuple
        ``(row, col)`` coordinates of every empty cell.
    """
    return [(int(row), int(col)) for row, col in argwhere(state == EMPTY)]


def is_full(state: ndarray) -> bool:
    """Check whether every cell of the board holds a tile."""
    return bool(np_all(state != EMPTY))


def spawn_tile(state: ndarray, rng: Generator, config: SpawnConfig = DEFAULT_SPAWN) -> tuple[int, int, int]:
    """
    Add one tile (2 or 4) to a uniformly chosen empty cell.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. **Modified in-place.**
    rng : Generator
        Source of randomness; only ``integers`` and ``random`` are used.
    config : SpawnConfig, optional
        Distribution of the new tile's value (default: 2 with probability 0.75).

    Returns
    -------
    tuple
        ``(row, col, value)`` of the new tile.

    Raises
    ------
    GridFull
        If the board has no empty cell. The board is left untouched.

    Notes
    -----
    The value is drawn by a Bernoulli trial independent of the cell choice.
    """
    cells = empty_cells(state)
    if not cells:
        raise GridFull()

    row, col = cells[int(rng.integers(len(cells)))]
    value = TILE_VALUES[0] if rng.random() < config.two_probability else TILE_VALUES[1]

    state[row, col] = value
    return row, col, value


def next_state(
    state: ndarray, direction: MoveDirection | str, rng: Generator, config: SpawnConfig = DEFAULT_SPAWN
) -> tuple[ndarray, int, bool]:
    """
    Compute the next state after a move, spawning one tile if the move changed the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. Not modified.
    direction : MoveDirection or str
        The direction of the move.
    rng : Generator
        Source of randomness for the spawn.
    config : SpawnConfig, optional
        Distribution of the new tile's value.

    Returns
    -------
    new_state : ndarray
        The board after the move and the spawn.
    score : int
        Points earned by the move (0 if nothing changed).
    changed : bool
        True if the move altered the board.
    """
    new_state, score, changed = latent_state(state, direction)
    if not changed:
        return state, 0, False

    # ##>: A changing move always leaves at least one empty cell.
    spawn_tile(new_state, rng, config)
    return new_state, score, True
