"""
Game move utilities, providing functions for determining whether moves are possible and which ones are legal.
"""

from numpy import array_equal, ndarray

from game2048.addons.config import MAX_TILE
from game2048.addons.types import Direction
from game2048.core.gameboard import slide


def check_move_possibility(board: ndarray) -> bool:
    """
    Check whether at least one move is possible on the board.

    Parameters
    ----------
    board : ndarray
        The game board to check.

    Returns
    -------
    bool
        True if the board has an empty cell or two equal mergeable neighbours, False otherwise.

    Notes
    -----
    A False result means the whole board was scanned along both axes.
    """
    if (board == 0).any():
        return True

    mergeable = board < MAX_TILE
    horizontal = (board[:, :-1] == board[:, 1:]) & mergeable[:, :-1]
    vertical = (board[:-1, :] == board[1:, :]) & mergeable[:-1, :]
    return bool(horizontal.any() or vertical.any())


def is_legal(board: ndarray, direction: Direction) -> bool:
    """
    Check if a move would change the board.

    Parameters
    ----------
    board : ndarray
        The game board, left untouched.
    direction : Direction
        The direction to try.

    Returns
    -------
    bool
        True if sliding in this direction moves or merges at least one tile.
    """
    moved = board.copy()
    slide(moved, direction)
    return not array_equal(moved, board)


def legal_actions(board: ndarray) -> list[Direction]:
    """Directions that would change the board."""
    return [direction for direction in Direction if is_legal(board, direction)]


def has_tile(board: ndarray, value: int) -> bool:
    """Check if any cell holds ``value``."""
    return bool((board == value).any())


def max_tile(board: ndarray) -> int:
    """Highest tile on the board, 0 for an empty board."""
    return int(board.max())
