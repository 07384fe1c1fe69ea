# -*- coding: utf-8 -*-
"""
Board of tile ranks and the directional merge logic of the game.

A tile is stored as its power of two: rank 3 in the grid means that 8 is shown in game. Rank 0 is
an empty cell.
"""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import Dict, Iterator, Optional, Sequence

from numpy import argwhere, array, ndarray, uint8
from numpy.random import Generator, default_rng

from tilemerge.addons.config import BOARD_SIZE, MAX_RANK, TILE_SPAWN_WEIGHTS

from .errors import InvalidDimensions, InvalidTile, NoEmptyCell
from .grid import Grid

logger = logging.getLogger(__name__)

# ##: Rank of an empty cell.
EMPTY = 0


class Direction(IntEnum):
    """Directions of a swipe."""

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


def merge_tiles(tiles: Sequence[int]) -> list[int]:
    """
    Merge a single row or column as if motion is from the back of the sequence to the front.

    Parameters
    ----------
    tiles : Sequence[int]
        Ranks of one row or column, front first.

    Returns
    -------
    list[int]
        The merged ranks, padded with empty cells to the input length.

    Notes
    -----
    - Empty cells are ignored, they never block a merge.
    - Two equal ranks merge into one tile of the next rank.
    - A merged tile can not merge again in the same call: [2, 2, 2, 2] gives [3, 3, 0, 0].
    - Two tiles at MAX_RANK stay two tiles, so a merge never leaves the rank range.

    Examples
    --------
    >>> merge_tiles([2, 0, 2, 0])
    [3, 0, 0, 0]

    >>> merge_tiles([1, 1, 2, 0])
    [2, 2, 0, 0]
    """
    result: list[int] = []
    carry = EMPTY

    for tile in tiles:
        if tile == EMPTY:
            continue
        if tile == carry and tile < MAX_RANK:
            result.append(tile + 1)
            carry = EMPTY
        else:
            if carry != EMPTY:
                result.append(carry)
            carry = tile

    if carry != EMPTY:
        result.append(carry)

    result.extend([EMPTY] * (len(tiles) - len(result)))
    return result


class Board:
    """
    Square board of tile ranks.

    Parameters
    ----------
    size : int, optional
        Number of rows and columns (default is 4).
    rng : Generator, optional
        Random generator used to insert tiles. A fresh one is created if not given.
    spawn_weights : Dict[int, int], optional
        Relative weight of each rank a new tile can take (default is 3:1 for ranks 1 and 2).
    """

    def __init__(
        self,
        size: int = BOARD_SIZE,
        rng: Optional[Generator] = None,
        spawn_weights: Optional[Dict[int, int]] = None,
    ):
        if size < 1:
            raise InvalidDimensions(f"Board size must be at least 1, got {size}")
        self._grid: Grid[int] = Grid(size, size, EMPTY)
        self._rng = rng if rng is not None else default_rng()
        self._spawn_weights = dict(spawn_weights or TILE_SPAWN_WEIGHTS)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[int]],
        rng: Optional[Generator] = None,
        spawn_weights: Optional[Dict[int, int]] = None,
    ) -> Board:
        """
        Build a board from existing ranks.

        Raises
        ------
        InvalidDimensions
            If the rows are empty, jagged or not square.
        InvalidTile
            If a value is not between 0 and MAX_RANK.
        """
        grid = Grid.from_rows(rows)
        if grid.width != grid.height:
            raise InvalidDimensions(f"Board must be square, got {grid.width}x{grid.height}")

        for row in grid.rows():
            for value in row:
                if not 0 <= value <= MAX_RANK:
                    raise InvalidTile(f"Tile rank must be between 0 and {MAX_RANK}, got {value}")

        board = cls(grid.width, rng=rng, spawn_weights=spawn_weights)
        board._grid = grid
        return board

    @property
    def size(self) -> int:
        """Number of rows and columns."""
        return self._grid.width

    @property
    def values(self) -> tuple[tuple[int, ...], ...]:
        """Read-only snapshot of the ranks."""
        return self._grid.values

    def rows(self) -> Iterator[tuple[int, ...]]:
        """Iterate over the rows, top to bottom."""
        return self._grid.rows()

    def to_array(self) -> ndarray:
        """Get a copy of the ranks as a 2D array."""
        return array(self._grid.values, dtype=uint8).reshape(self.size, self.size)

    def copy(self) -> Board:
        """Return a snapshot of the board, sharing its random generator."""
        board = Board(self.size, rng=self._rng, spawn_weights=self._spawn_weights)
        board._grid = self._grid.copy()
        return board

    def merge_up(self) -> None:
        """Merge the board as if the player had swiped up."""
        for i in range(self._grid.width):
            column = self._grid.get_column(i)
            self._grid.set_column(i, merge_tiles(column))

    def merge_down(self) -> None:
        """Merge the board as if the player had swiped down."""
        for i in range(self._grid.width):
            column = self._grid.get_column(i)
            self._grid.set_column(i, merge_tiles(column[::-1])[::-1])

    def merge_left(self) -> None:
        """Merge the board as if the player had swiped left."""
        for i in range(self._grid.height):
            row = self._grid.get_row(i)
            self._grid.set_row(i, merge_tiles(row))

    def merge_right(self) -> None:
        """Merge the board as if the player had swiped right."""
        for i in range(self._grid.height):
            row = self._grid.get_row(i)
            self._grid.set_row(i, merge_tiles(row[::-1])[::-1])

    def merge(self, direction: Direction) -> None:
        """
        Merge the board in the given direction.

        Parameters
        ----------
        direction : Direction
            Direction of the swipe.

        Notes
        -----
        Nothing is returned: compare a copy taken before the merge to know whether the board changed.
        """
        moves = {
            Direction.LEFT: self.merge_left,
            Direction.UP: self.merge_up,
            Direction.RIGHT: self.merge_right,
            Direction.DOWN: self.merge_down,
        }
        moves[Direction(direction)]()

    def empty_cells(self) -> list[tuple[int, int]]:
        """Get the (row, column) position of every empty cell."""
        return [(int(row), int(column)) for row, column in argwhere(self.to_array() == EMPTY)]

    def add_random_tile(self, rng: Optional[Generator] = None) -> tuple[int, int]:
        """
        Add a new tile to a random empty cell.

        The cell is chosen uniformly among the empty ones and the rank with the spawn weights,
        so rank 1 (shown as 2) is three times as likely as rank 2 (shown as 4) by default.

        Parameters
        ----------
        rng : Generator, optional
            Random generator to use instead of the board's own.

        Returns
        -------
        tuple[int, int]
            Position (row, column) of the new tile.

        Raises
        ------
        NoEmptyCell
            If there is nowhere to insert a tile.
        """
        rng = rng if rng is not None else self._rng

        empty_cells = self.empty_cells()
        if not empty_cells:
            raise NoEmptyCell("No empty cell left on the board")

        row, column = empty_cells[int(rng.choice(len(empty_cells)))]

        ranks = list(self._spawn_weights)
        weights = array([self._spawn_weights[rank] for rank in ranks], dtype=float)
        rank = int(rng.choice(ranks, p=weights / weights.sum()))

        self._grid.set_cell(row, column, rank)
        logger.debug("Inserted tile of rank %d at (%d, %d)", rank, row, column)
        return row, column

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board({[list(row) for row in self.rows()]!r})"
