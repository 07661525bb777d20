# -*- coding: utf-8 -*-
"""
Play a game in the terminal with random directions until no move is left.
"""
import logging

from numpy.random import SeedSequence, default_rng

from mergegrid.core import MoveDirection
from mergegrid.envs import GameSession

logger = logging.getLogger("runs")


def run(size: int = 4, seed: int | None = None, max_moves: int | None = None, verbose: bool = True) -> GameSession:
    """
    Play random directions until the game is over.

    Parameters
    ----------
    size : int, optional
        The size of the grid (default is 4).
    seed : int, optional
        Seed for both the spawns and the choice of directions.
    max_moves : int, optional
        Stop after this many turns, even if the game is not over.
    verbose : bool, optional
        Print the grid after every turn (default is True).

    Returns
    -------
    GameSession
        The game, in its final state.
    """
    # ##>: Independent streams for the spawns and the directions.
    spawn_seed, choice_seed = SeedSequence(seed).spawn(2)
    session = GameSession(size=size, seed=spawn_seed)
    chooser = default_rng(choice_seed)
    directions = list(MoveDirection)

    if verbose:
        print("New game:")
        session.render()

    turns = 0
    done = session.is_finished
    while not done and (max_moves is None or turns < max_moves):
        direction = directions[int(chooser.integers(len(directions)))]
        _, reward, done = session.step(direction)
        turns += 1

        if verbose:
            print(f'\nNext move: "{direction.value}", reward: {reward}')
            session.render()

    logger.info("Stopped after %d turns (%d moves), score %d", turns, session.moves, session.score)
    return session


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-moves", type=int, default=None)
    parser.add_argument("--quiet", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    game = run(size=args.size, seed=args.seed, max_moves=args.max_moves, verbose=not args.quiet)
    print(f"\nTotal moves: {game.moves}, max tile: {game.grid.max_tile}")
