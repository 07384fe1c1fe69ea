# -*- coding: utf-8 -*-
"""
Game state wrapping a board, and the transitions applied to it.
"""

from .game import Game, GameEvent, apply, new_game

__all__ = ["Game", "GameEvent", "apply", "new_game"]
