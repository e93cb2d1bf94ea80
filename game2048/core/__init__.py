# -*- coding: utf-8 -*-
"""
Stateless rules of the 2048 game.

It includes functions for sanitizing grids, changing the board orientation, sliding and merging tiles,
spawning new tiles, and checking which moves are possible.
"""

from .gameboard import (
    ORIENTATIONS,
    fill_cells,
    get_two_or_four,
    merge_column,
    merge_up,
    place_new_tile,
    reverse_each_row,
    reverse_rows,
    rotate_clockwise,
    rotate_counter_clockwise,
    sanitize_state,
    slide,
    transpose,
)
from .gamemove import check_move_possibility, has_tile, is_legal, legal_actions, max_tile

__all__ = [
    "ORIENTATIONS",
    "sanitize_state",
    "transpose",
    "reverse_rows",
    "reverse_each_row",
    "rotate_clockwise",
    "rotate_counter_clockwise",
    "merge_column",
    "merge_up",
    "slide",
    "get_two_or_four",
    "place_new_tile",
    "fill_cells",
    "check_move_possibility",
    "is_legal",
    "legal_actions",
    "has_tile",
    "max_tile",
]
