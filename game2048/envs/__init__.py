# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `GameEngine` class, which holds the grid, score and status of a game.
"""

from .engine import GameEngine

__all__ = ["GameEngine"]
