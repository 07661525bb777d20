"""Plain-text rendering of a board, one fixed-width field per cell."""

from numpy import ndarray


def render_text(tiles: ndarray, score: int, width: int = 5) -> str:
    """
    Render a board and its score as text.

    Parameters
    ----------
    tiles : ndarray
        The game board.
    score : int
        The accumulated score.
    width : int, optional
        Width of each centred cell field (default is 5).

    Returns
    -------
    str
        A ``grid:`` header, one ``|``-separated line per row, then a ``score:`` line.

    Example
    -------
    >>> import numpy as np
    >>> print(render_text(np.array([[2, 0], [0, 4]]), 0))
    grid:
    |  2  |  0  |
    |  0  |  4  |
    score: 0
    """
    lines = ['grid:']
    for row in tiles.tolist():
        lines.append('|' + '|'.join(f'{value:^{width}}' for value in row) + '|')
    lines.append(f'score: {score}')
    return '\n'.join(lines)
