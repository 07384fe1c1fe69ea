# -*- coding: utf-8 -*-
"""
Core of the game: a generic grid container, the board of tile ranks with its merge logic, and the
helpers telling which moves are legal.
"""

from .board import EMPTY, Board, Direction, merge_tiles
from .errors import (
    BoardError,
    GameError,
    GridError,
    IndexNotFound,
    InvalidDimensions,
    InvalidTile,
    LengthMismatch,
    NoEmptyCell,
    UnsupportedEvent,
)
from .gamemove import illegal_moves, is_done, legal_moves, legal_moves_mask
from .grid import Grid

__all__ = [
    "EMPTY",
    "Board",
    "Direction",
    "Grid",
    "merge_tiles",
    "legal_moves",
    "legal_moves_mask",
    "illegal_moves",
    "is_done",
    "GridError",
    "InvalidDimensions",
    "IndexNotFound",
    "LengthMismatch",
    "BoardError",
    "NoEmptyCell",
    "InvalidTile",
    "GameError",
    "UnsupportedEvent",
]
