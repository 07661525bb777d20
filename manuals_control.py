# -*- coding: utf-8 -*-
"""
Play a merge grid with the arrow keys in a Matplotlib window.
"""
from typing import Any

from mergegrid.envs import GameSession
from mergegrid.utils.windows import WindowBoard


def redraw(window: WindowBoard, session: GameSession):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    session: GameSession
        The game to draw
    """
    window.show_image(session.observation, score=session.score)


def reset(session: GameSession, window: WindowBoard):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    session: GameSession
        The game

    window: WindowBoard
        Class to draw the game board
    """
    session.reset()
    redraw(window, session)


def step(session: GameSession, window: WindowBoard, direction: str):
    """
    Apply a move to the game.

    Parameters
    ----------
    session: GameSession
        The game

    window: WindowBoard
        Class to draw the game board

    direction: str
        Name of the direction to play
    """
    _, reward, terminated = session.step(direction)
    print(f"reward={reward}, score={session.score}")

    redraw(window, session)
    if terminated:
        print("game over!")


def key_handler(session: GameSession, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    session: GameSession
        The game

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(session, window)
        return None

    if event.key in session.ACTIONS and not session.is_finished:
        step(session, window, event.key)
    return None


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    game = GameSession(size=args.size, seed=args.seed)
    window_board = WindowBoard(title="Merge grid", size=game.size)
    window_board.register_key_handler(lambda event: key_handler(game, window_board, event))

    redraw(window_board, game)

    # Blocking event loop
    window_board.show(block=True)
