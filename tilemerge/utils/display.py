# -*- coding: utf-8 -*-
"""Conversion from stored tile ranks to the values shown to the player."""

from numpy import empty, ndarray

from tilemerge.core.board import EMPTY, Board


def tile_value(rank: int) -> int:
    """
    Get the value shown for a tile.

    Parameters
    ----------
    rank : int
        The stored rank.

    Returns
    -------
    int
        0 for an empty cell, 2**rank otherwise.
    """
    if rank == EMPTY:
        return 0
    return 2**rank


def display_values(board: Board) -> ndarray:
    """
    Get the values shown for every cell of a board.

    Parameters
    ----------
    board : Board
        The board to read.

    Returns
    -------
    ndarray
        2D array of shown values, 0 for empty cells.

    Notes
    -----
    Ranks go up to MAX_RANK, far beyond what fits in a fixed-size integer, so the array holds exact
    Python integers (``object`` dtype).

    Example
    -------
    >>> display_values(Board.from_rows([[0, 1], [2, 11]]))
    array([[0, 2],
           [4, 2048]], dtype=object)
    """
    values = empty((board.size, board.size), dtype=object)
    for i, row in enumerate(board.rows()):
        for j, rank in enumerate(row):
            values[i, j] = tile_value(rank)
    return values
