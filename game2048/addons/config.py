# -*- coding: utf-8 -*-
"""
Game specific configuration.
"""
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from numpy import ndarray

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Defaults of a classic game.
BOARD_SIZE = 4
START_TILES_QUANTITY = 2
WINNING_TILE = 2048

# ##>: Largest tile an int64 board can hold; two of them never merge.
MAX_EXPONENT = 62
MAX_TILE = 2**MAX_EXPONENT

GridLike = Union[ndarray, Sequence[Sequence[float]]]


@dataclass
class GameConfig:
    """Configuration of a single game."""

    # ##>: Board at construction; None means an empty BOARD_SIZE x BOARD_SIZE grid.
    initial_state: Optional[GridLike] = None

    # ##>: Number of random tiles placed by start().
    start_tiles_amount: int = START_TILES_QUANTITY

    # ##>: Round invalid cells down to a power of two instead of clearing them.
    force_power_of_two: bool = False

    # ##>: Tile value that wins the game.
    winning_tile: int = WINNING_TILE

    # ##>: Spawned tile value -> probability.
    tile_probs: dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS))

    def __post_init__(self):
        if self.start_tiles_amount < 0:
            raise ValueError(f'start_tiles_amount must be >= 0, got {self.start_tiles_amount}')
        if abs(sum(self.tile_probs.values()) - 1.0) > 1e-9:
            raise ValueError(f'tile_probs must sum to 1, got {self.tile_probs}')
