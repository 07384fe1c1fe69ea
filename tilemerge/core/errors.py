# -*- coding: utf-8 -*-
"""
Exceptions raised by the grid, the board and the game state.
"""


class GridError(Exception):
    """Base class for grid errors."""


class InvalidDimensions(GridError, ValueError):
    """The rows given to build a grid are empty or jagged."""


class IndexNotFound(GridError, IndexError):
    """A row, column or cell index is out of bounds."""


class LengthMismatch(GridError, ValueError):
    """A replacement row or column does not match the grid dimensions."""


class BoardError(Exception):
    """Base class for board errors."""


class NoEmptyCell(BoardError):
    """The board is full, no tile can be inserted."""


class InvalidTile(BoardError, ValueError):
    """A cell holds a value that is not a valid tile rank."""


class GameError(Exception):
    """Base class for game errors."""


class UnsupportedEvent(GameError):
    """The event is known but not handled by the game."""
