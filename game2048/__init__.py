"""Rules engine of the 2048 tile-merging puzzle."""

from game2048.addons import Direction, GameConfig, GameStatus
from game2048.envs import GameEngine

__all__ = ["GameEngine", "GameConfig", "Direction", "GameStatus"]
