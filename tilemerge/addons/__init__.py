# -*- coding: utf-8 -*-
"""
Configuration of the game.
"""

from .config import BOARD_SIZE, MAX_RANK, TILE_SPAWN_WEIGHTS, GameConfiguration

__all__ = ["BOARD_SIZE", "MAX_RANK", "TILE_SPAWN_WEIGHTS", "GameConfiguration"]
