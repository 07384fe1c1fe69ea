# -*- coding: utf-8 -*-
"""
Tile merging puzzle engine in the style of 2048.
"""

from .addons import GameConfiguration
from .core import Board, Direction, Grid, merge_tiles
from .envs import Game, GameEvent, apply, new_game

__all__ = ["Board", "Direction", "Grid", "merge_tiles", "Game", "GameEvent", "GameConfiguration", "apply", "new_game"]
