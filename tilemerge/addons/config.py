# -*- coding: utf-8 -*-
"""
Set of config for the game.
"""
from dataclasses import dataclass, field
from typing import Dict

# ##: Default board side.
BOARD_SIZE = 4

# ##: Highest rank a cell can hold (an unsigned byte).
MAX_RANK = 255

# ##: New tiles are rank 1 (shown as 2) three times as often as rank 2 (shown as 4).
TILE_SPAWN_WEIGHTS: Dict[int, int] = {1: 3, 2: 1}


@dataclass
class GameConfiguration:
    """
    Configuration used to start a new game.
    """

    size: int = BOARD_SIZE
    start_tiles: int = 1
    spawn_weights: Dict[int, int] = field(default_factory=lambda: dict(TILE_SPAWN_WEIGHTS))

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"size must be >= 1, got {self.size}")
        if not 1 <= self.start_tiles <= self.size * self.size:
            raise ValueError(f"start_tiles must be between 1 and {self.size * self.size}, got {self.start_tiles}")
        if not self.spawn_weights:
            raise ValueError("spawn_weights must not be empty")
        for rank, weight in self.spawn_weights.items():
            if not 1 <= rank <= MAX_RANK:
                raise ValueError(f"spawn rank must be between 1 and {MAX_RANK}, got {rank}")
            if weight <= 0:
                raise ValueError(f"spawn weight must be positive, got {weight} for rank {rank}")
