# -*- coding: utf-8 -*-
"""
Rule engine of a sliding-tile merge puzzle (2048-style).

`Grid` holds an N×N board of tiles and its score; `GameSession` plays the turns of a game on it. The pure functions
of `mergegrid.core` implement the moves, the spawns and the game-over check on bare numpy boards.
"""

from .core import GridError, GridFull, InvalidConfiguration, MoveDirection, SpawnConfig
from .envs import GameSession, Grid, Tile

__all__ = [
    "Grid",
    "Tile",
    "GameSession",
    "MoveDirection",
    "SpawnConfig",
    "GridError",
    "GridFull",
    "InvalidConfiguration",
]
