# -*- coding: utf-8 -*-
"""
Generic rectangular container used to store the game board.
"""
from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, Sequence, TypeVar

from .errors import IndexNotFound, InvalidDimensions, LengthMismatch

T = TypeVar("T")


class Grid(Generic[T]):
    """
    Rectangular matrix of values stored as a list of rows.

    The grid knows nothing about the game: it only guarantees that every row has the same length and
    that reads and writes stay inside its dimensions. It is never resized after creation.

    Parameters
    ----------
    width : int
        Number of columns.
    height : int
        Number of rows.
    initial_value : T
        Value given to every cell.

    Raises
    ------
    InvalidDimensions
        If a dimension is negative.
    """

    __slots__ = ("_values", "_width")

    def __init__(self, width: int, height: int, initial_value: T):
        if width < 0 or height < 0:
            raise InvalidDimensions(f"Grid dimensions must not be negative, got {width}x{height}")
        self._width = width
        self._values: list[list[T]] = [[initial_value] * width for _ in range(height)]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[T]]) -> Grid[T]:
        """
        Build a grid from externally supplied rows.

        Parameters
        ----------
        rows : Iterable[Sequence[T]]
            The rows of the grid, top to bottom.

        Returns
        -------
        Grid[T]
            A new grid holding a copy of the rows.

        Raises
        ------
        InvalidDimensions
            If there is no row, if the first row is empty, or if row lengths differ.
        """
        values = [list(row) for row in rows]
        if not values:
            raise InvalidDimensions("Grid must be at least 1 tall")
        if not values[0]:
            raise InvalidDimensions("Grid must be at least 1 wide")

        width = len(values[0])
        if any(len(row) != width for row in values):
            raise InvalidDimensions("Grid rows must have consistent lengths")

        grid = cls.__new__(cls)
        grid._width = width
        grid._values = values
        return grid

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self._values)

    @property
    def values(self) -> tuple[tuple[T, ...], ...]:
        """Read-only snapshot of every row."""
        return tuple(tuple(row) for row in self._values)

    def _has_row(self, index: int) -> bool:
        return 0 <= index < self.height

    def _has_column(self, index: int) -> bool:
        return 0 <= index < self._width

    def get_row(self, index: int) -> Optional[list[T]]:
        """
        Get a copy of a row.

        Returns
        -------
        list[T], optional
            The row, or None if the index is out of bounds.
        """
        if not self._has_row(index):
            return None
        return list(self._values[index])

    def get_column(self, index: int) -> Optional[list[T]]:
        """
        Get a copy of a column, top to bottom.

        Returns
        -------
        list[T], optional
            The column, or None if the index is out of bounds.
        """
        if not self._has_column(index):
            return None
        return [row[index] for row in self._values]

    def get_cell(self, row: int, column: int) -> Optional[T]:
        """Get a single value, or None if either index is out of bounds."""
        if not (self._has_row(row) and self._has_column(column)):
            return None
        return self._values[row][column]

    def set_row(self, index: int, data: Sequence[T]) -> None:
        """
        Replace a row in place.

        Parameters
        ----------
        index : int
            Index of the row to replace.
        data : Sequence[T]
            New values, as many as the grid width.

        Raises
        ------
        LengthMismatch
            If the data length is not equal to the grid width.
        IndexNotFound
            If the index is out of bounds.
        """
        if len(data) != self._width:
            raise LengthMismatch(f"Input data length {len(data)} is not equal to grid width {self._width}")
        if not self._has_row(index):
            raise IndexNotFound(f"Row {index} not found in grid of height {self.height}")
        self._values[index] = list(data)

    def set_column(self, index: int, data: Sequence[T]) -> None:
        """
        Replace a column in place.

        Parameters
        ----------
        index : int
            Index of the column to replace.
        data : Sequence[T]
            New values, as many as the grid height.

        Raises
        ------
        LengthMismatch
            If the data length is not equal to the grid height.
        IndexNotFound
            If the index is out of bounds.

        Notes
        -----
        The length is checked before any cell is written. Cells are then written top to bottom and are not
        rolled back if a write fails.
        """
        if len(data) != self.height:
            raise LengthMismatch(f"Input data length {len(data)} is not equal to grid height {self.height}")
        if not self._has_column(index):
            raise IndexNotFound(f"Column {index} not found in grid of width {self._width}")
        for row, value in zip(self._values, data):
            row[index] = value

    def set_cell(self, row: int, column: int, value: T) -> None:
        """
        Overwrite a single cell.

        Raises
        ------
        IndexNotFound
            If either index is out of bounds.
        """
        if not (self._has_row(row) and self._has_column(column)):
            raise IndexNotFound(f"Cell ({row}, {column}) not found in grid of size {self._width}x{self.height}")
        self._values[row][column] = value

    def transpose(self) -> Grid[T]:
        """Return a new grid whose rows are the columns of this one."""
        grid = type(self).__new__(type(self))
        grid._width = self.height
        grid._values = [list(column) for column in zip(*self._values)]
        # ##: zip loses the shape of a grid without row.
        if not grid._values:
            grid._values = [[] for _ in range(self._width)]
        return grid

    def rows(self) -> Iterator[tuple[T, ...]]:
        """Iterate over read-only snapshots of the rows, top to bottom."""
        return (tuple(row) for row in self._values)

    def copy(self) -> Grid[T]:
        """Return an independent copy of the grid."""
        grid = type(self).__new__(type(self))
        grid._width = self._width
        grid._values = [list(row) for row in self._values]
        return grid

    def __iter__(self) -> Iterator[tuple[T, ...]]:
        return self.rows()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._width == other._width and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self._values!r})"
