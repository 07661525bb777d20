# -*- coding: utf-8 -*-
"""
This module provides the rule engine of the sliding-tile merge puzzle.

It includes the canonical slide-and-merge primitive, the rotations mapping every direction onto it, random tile
spawning, and the predicates telling which directions are playable and whether the game is over.
"""

from .config import SpawnConfig
from .errors import GridError, GridFull, InvalidConfiguration
from .gameboard import empty_cells, is_full, latent_state, next_state, slide_and_merge, slide_line, spawn_tile
from .gamemove import can_move, changes_board, illegal_actions, is_done, legal_actions, legal_actions_mask
from .orientation import ROTATIONS, MoveDirection, rotate

__all__ = [
    "MoveDirection",
    "ROTATIONS",
    "rotate",
    "slide_line",
    "slide_and_merge",
    "latent_state",
    "empty_cells",
    "is_full",
    "spawn_tile",
    "next_state",
    "can_move",
    "changes_board",
    "legal_actions_mask",
    "legal_actions",
    "illegal_actions",
    "is_done",
    "SpawnConfig",
    "GridError",
    "GridFull",
    "InvalidConfiguration",
]
