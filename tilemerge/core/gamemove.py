# -*- coding: utf-8 -*-
"""
Move utilities for the board, telling which swipes would change it without performing them.
"""

from numpy import ndarray

from tilemerge.addons.config import MAX_RANK

from .board import EMPTY, Direction


def _collapses(front: ndarray, back: ndarray) -> tuple[bool, bool]:
    """
    Check pairs of neighbours for a move toward ``front``.

    Parameters
    ----------
    front : ndarray
        Cells nearest the wall the tiles move to.
    back : ndarray
        The neighbour of each of those cells, one step away from the wall.

    Returns
    -------
    tuple[bool, bool]
        Whether a tile can slide into an empty cell, and whether two neighbours can merge.
    """
    slides = (front == EMPTY) & (back != EMPTY)
    merges = (front != EMPTY) & (front == back) & (front < MAX_RANK)
    return bool(slides.any()), bool(merges.any())


def legal_moves_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Tell for each direction whether a swipe would change the board.

    Parameters
    ----------
    state : ndarray
        Ranks of the board, as given by ``Board.to_array()``.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask indexed by ``Direction`` (left, up, right, down).

    Notes
    -----
    A row only changes when a tile has an empty cell in front of it or when two neighbours share a
    rank below MAX_RANK. Gaps between equal tiles always come with a slide, so neighbours are enough.
    Merging is symmetric, sliding is not.
    """
    left_slides, row_merges = _collapses(state[:, :-1], state[:, 1:])
    right_slides, _ = _collapses(state[:, 1:], state[:, :-1])
    up_slides, column_merges = _collapses(state[:-1, :], state[1:, :])
    down_slides, _ = _collapses(state[1:, :], state[:-1, :])

    return (
        left_slides or row_merges,
        up_slides or column_merges,
        right_slides or row_merges,
        down_slides or column_merges,
    )


def legal_moves(state: ndarray) -> list[Direction]:
    """
    Determine the moves that change the board.

    Parameters
    ----------
    state : ndarray
        Ranks of the board.

    Returns
    -------
    list[Direction]
        The legal directions.
    """
    mask = legal_moves_mask(state)
    return [direction for direction in Direction if mask[direction]]


def illegal_moves(state: ndarray) -> list[Direction]:
    """Determine the moves that leave the board unchanged."""
    mask = legal_moves_mask(state)
    return [direction for direction in Direction if not mask[direction]]


def is_done(state: ndarray) -> bool:
    """Check that no swipe can change the board anymore."""
    return not any(legal_moves_mask(state))
