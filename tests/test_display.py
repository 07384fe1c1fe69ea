# -*-  coding: utf-8 -*-
"""
Set of test for the display helpers.
"""
from unittest import TestCase, main

import numpy as np

from tilemerge.core.board import Board
from tilemerge.utils.display import display_values, tile_value


class TestDisplay(TestCase):
    """Test the conversion from ranks to shown values."""

    def test_tile_value(self):
        """Rank 0 is empty, not 1."""
        self.assertEqual(tile_value(0), 0)
        self.assertEqual(tile_value(1), 2)
        self.assertEqual(tile_value(2), 4)
        self.assertEqual(tile_value(11), 2048)

    def test_display_values(self):
        board = Board.from_rows([[0, 1, 2], [3, 0, 11], [0, 0, 17]])
        expected = np.array([[0, 2, 4], [8, 0, 2048], [0, 0, 131072]])
        np.testing.assert_array_equal(display_values(board), expected)

    def test_display_values_leaves_board_untouched(self):
        board = Board.from_rows([[1, 0], [0, 1]])
        display_values(board)
        self.assertEqual(board.values, ((1, 0), (0, 1)))

    def test_display_values_high_ranks(self):
        """Ranks beyond 64 bits keep their exact value."""
        board = Board.from_rows([[64, 100], [0, 255]])
        values = display_values(board)

        self.assertEqual(values[0, 0], 2**64)
        self.assertEqual(values[0, 1], tile_value(100))
        self.assertEqual(values[1, 0], 0)
        self.assertEqual(values[1, 1], 2**255)


if __name__ == "__main__":
    main()
