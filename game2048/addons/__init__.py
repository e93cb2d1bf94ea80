# -*- coding: utf-8 -*-
"""
Configuration and shared types of the 2048 engine.
"""

from .config import TILE_SPAWN_PROBS, GameConfig
from .types import MOVE_KEYS, Direction, GameStatus

__all__ = ["GameConfig", "TILE_SPAWN_PROBS", "Direction", "GameStatus", "MOVE_KEYS"]
