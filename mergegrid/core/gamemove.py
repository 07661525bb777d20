"""
Move availability for the grid engine: which directions are playable, and whether the game is over.
"""

from numpy import array_equal, ndarray

from mergegrid.core.config import EMPTY
from mergegrid.core.gameboard import is_full, latent_state
from mergegrid.core.orientation import MoveDirection, as_direction


def _adjacent_pairs(board: ndarray, direction: MoveDirection) -> tuple[ndarray, ndarray]:
    """
    Split a board into every (tile, next-in-direction) pair.

    Parameters
    ----------
    board : ndarray
        The game board.
    direction : MoveDirection
        The direction of the move.

    Returns
    -------
    tiles : ndarray
        Cells that could move.
    nexts : ndarray
        For each of them, the neighbouring cell in ``direction``.
    """
    if direction is MoveDirection.RIGHT:
        return board[:, :-1], board[:, 1:]
    if direction is MoveDirection.LEFT:
        return board[:, 1:], board[:, :-1]
    if direction is MoveDirection.DOWN:
        return board[:-1, :], board[1:, :]
    return board[1:, :], board[:-1, :]


def can_move(board: ndarray, direction: MoveDirection | str) -> bool:
    """
    Check if a move in ``direction`` would change the board.

    Parameters
    ----------
    board : ndarray
        The game board to check. Not modified.
    direction : MoveDirection or str
        Direction to check.

    Returns
    -------
    bool
        True if the move is possible, False otherwise.

    Notes
    -----
    A move is possible when some tile has an empty neighbour in ``direction`` (it can slide), or a neighbour
    holding the same value (they can merge).
    """
    tiles, nexts = _adjacent_pairs(board, as_direction(direction))
    occupied = tiles != EMPTY

    # ##>: Condition 1: a tile followed by an empty cell.
    if (occupied & (nexts == EMPTY)).any():
        return True

    # ##>: Condition 2: two adjacent equal tiles.
    return bool((occupied & (tiles == nexts)).any())


def changes_board(board: ndarray, direction: MoveDirection | str) -> bool:
    """
    Check if a move changes the board by actually applying it to a copy.

    Parameters
    ----------
    board : ndarray
        The game board to check. Not modified.
    direction : MoveDirection or str
        Direction to check.

    Returns
    -------
    bool
        True if the moved board differs from ``board``.
    """
    moved, _, _ = latent_state(board, direction)
    return not array_equal(moved, board)


def legal_actions_mask(board: ndarray) -> dict[MoveDirection, bool]:
    """
    Get the playability of all four directions.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    dict
        Maps each ``MoveDirection`` to True when a move in that direction is legal.
    """
    return {direction: can_move(board, direction) for direction in MoveDirection}


def legal_actions(board: ndarray) -> list[MoveDirection]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[MoveDirection]
        Legal directions, in ``MoveDirection`` order.
    """
    return [direction for direction, legal in legal_actions_mask(board).items() if legal]


def illegal_actions(board: ndarray) -> list[MoveDirection]:
    """Determine the directions that would leave the board unchanged."""
    return [direction for direction, legal in legal_actions_mask(board).items() if not legal]


def is_done(board: ndarray) -> bool:
    """
    Check if the game has ended by determining if any moves are possible.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the game is over (no direction playable), False otherwise.

    Notes
    -----
    On a connected grid, a board holding both a tile and an empty cell has a tile next to an empty cell, so
    only a full board can be over. An empty board is not over either: it is waiting for its first tiles.
    """
    if not is_full(board):
        return False
    return not any(can_move(board, direction) for direction in MoveDirection)
