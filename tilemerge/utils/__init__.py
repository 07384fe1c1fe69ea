# -*- coding: utf-8 -*-
"""
Helpers for the layers reading the board.
"""

from .display import display_values, tile_value

__all__ = ["display_values", "tile_value"]
