"""
Map the four move directions onto a single canonical slide.

The canonical slide pushes every row toward its last column. Any other direction is handled by rotating the
board so that its downstream edge becomes the right edge, sliding, then rotating back.
"""

from enum import Enum

from numpy import ndarray, rot90


class MoveDirection(str, Enum):
    """The four directions a move can take."""

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


# ##>: Counter-clockwise quarter turns bringing each direction's downstream edge to the right.
ROTATIONS: dict[MoveDirection, int] = {
    MoveDirection.RIGHT: 0,
    MoveDirection.DOWN: 1,
    MoveDirection.LEFT: 2,
    MoveDirection.UP: 3,
}


def as_direction(direction: MoveDirection | str) -> MoveDirection:
    """
    Convert a direction name into a ``MoveDirection``.

    Parameters
    ----------
    direction : MoveDirection or str
        A direction, or its name such as ``"up"`` (case-insensitive).

    Returns
    -------
    MoveDirection
        The matching direction.

    Raises
    ------
    ValueError
        If the name is not one of the four directions.
    """
    if isinstance(direction, MoveDirection):
        return direction
    if isinstance(direction, str):
        return MoveDirection(direction.lower())
    raise ValueError(f'{direction!r} is not a valid MoveDirection')


def rotate(board: ndarray, k: int) -> ndarray:
    """
    Rotate a board by ``k`` counter-clockwise quarter turns.

    Parameters
    ----------
    board : ndarray
        A square 2D board.
    k : int
        Number of quarter turns; negative values turn clockwise. Taken modulo 4.

    Returns
    -------
    ndarray
        A new board; the input is left untouched.

    Notes
    -----
    ``result[i, j] == board[j, n - 1 - i]`` for one quarter turn, hence ``rotate(rotate(b, k), -k)`` equals ``b``.
    """
    return rot90(board, k=k % 4).copy()


def normalize(board: ndarray, direction: MoveDirection | str) -> ndarray:
    """Rotate a board so that ``direction`` points toward the last column."""
    return rotate(board, ROTATIONS[as_direction(direction)])


def denormalize(board: ndarray, direction: MoveDirection | str) -> ndarray:
    """Undo ``normalize`` for the same direction."""
    return rotate(board, -ROTATIONS[as_direction(direction)])
