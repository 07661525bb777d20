# -*- coding: utf-8 -*-
"""
Stateful objects built on the grid engine.

This module provides the `Grid` class, holding the tiles and the score, and the `GameSession` class, which runs the
turn loop of a game: move, spawn a tile when the move changed something, check for game over.
"""

from .grid import Grid, Tile
from .session import GameSession

__all__ = ["Grid", "Tile", "GameSession"]
