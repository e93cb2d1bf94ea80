"""
Core functionality of the 2048 rules: grid sanitization, orientation changes, merging and tile spawning.

Every transform works in place on a square ``int64`` board so that the buffer handed out by the engine
stays the same object for the whole game.
"""

import logging
from typing import Callable, Optional

from numpy import argwhere, array, asarray, floor, iinfo, int64, isfinite, left_shift, log2, minimum, ndarray, where, zeros
from numpy.random import Generator

from game2048.addons.config import MAX_EXPONENT, MAX_TILE, TILE_SPAWN_PROBS, GridLike
from game2048.addons.types import Direction

_logger = logging.getLogger(__name__)

Transform = Callable[[ndarray], None]


def sanitize_state(state: GridLike, force_power_of_two: bool = False) -> ndarray:
    """
    Build a valid board from an arbitrary grid.

    Parameters
    ----------
    state : GridLike
        A square grid of numbers.
    force_power_of_two : bool, optional
        If True, each value is replaced by the largest power of two lower or equal to it (0 for values <= 0).
        If False, values that are not exactly a power of two are replaced by 0.

    Returns
    -------
    ndarray
        A new ``int64`` board holding only 0 or powers of two.

    Raises
    ------
    ValueError
        If the grid is empty, ragged or not square.

    Examples
    --------
    >>> sanitize_state([[3, 4], [0, -2]])
    array([[0, 4],
           [0, 0]])

    >>> sanitize_state([[3, 4], [0, -2]], force_power_of_two=True)
    array([[2, 4],
           [0, 0]])
    """
    try:
        values = asarray(state)
        if values.dtype.kind not in 'iu':
            values = asarray(values, dtype='float64')
    except (TypeError, ValueError) as error:
        raise ValueError(f'Grid must be a square matrix of numbers: {error}') from error

    if values.ndim != 2 or values.shape[0] == 0 or values.shape[0] != values.shape[1]:
        raise ValueError(f'Grid must be a non-empty square matrix, got shape {values.shape}')

    if values.dtype.kind in 'iu':
        board = _sanitize_integers(values, force_power_of_two)
    else:
        board = _sanitize_floats(values, force_power_of_two)

    changed = int((board != values).sum())
    if changed:
        _logger.warning('Sanitized %d cell(s) of the initial grid (force_power_of_two=%s)', changed, force_power_of_two)
    return board


def _sanitize_integers(values: ndarray, force_power_of_two: bool) -> ndarray:
    """Exact sanitization of an integer grid."""
    values = minimum(values, iinfo(int64).max).astype(int64)
    positive = values > 0
    base = where(positive, values, 1)

    # ##>: float log2 may round up for large integers, correct it by one step.
    exponents = minimum(floor(log2(base)).astype(int64), MAX_EXPONENT)
    exponents = where(left_shift(int64(1), exponents) > base, exponents - 1, exponents)
    nearest = where(positive, left_shift(int64(1), exponents), 0)

    if force_power_of_two:
        return nearest
    return where(nearest == values, values, 0)


def _sanitize_floats(values: ndarray, force_power_of_two: bool) -> ndarray:
    """Sanitization of a grid holding fractions, NaN or infinities."""
    # ##>: NaN and infinities are treated as empty cells.
    positive = isfinite(values) & (values >= 1)
    exponents = minimum(floor(log2(where(positive, values, 1.0))), MAX_EXPONENT)
    nearest = where(positive, 2.0**exponents, 0.0)

    if force_power_of_two:
        return nearest.astype(int64)
    return where(nearest == values, values, 0.0).astype(int64)


# ##: Orientation primitives.


def transpose(board: ndarray) -> None:
    """Swap the board across its main diagonal, rows become columns."""
    board[...] = board.T.copy()


def reverse_rows(board: ndarray) -> None:
    """Reverse the order of the rows (top-to-bottom flip)."""
    board[...] = board[::-1].copy()


def reverse_each_row(board: ndarray) -> None:
    """Reverse the cells inside every row (left-to-right flip)."""
    board[...] = board[:, ::-1].copy()


def rotate_clockwise(board: ndarray) -> None:
    """Rotate the board 90° clockwise: transpose, then reverse each row."""
    transpose(board)
    reverse_each_row(board)


def rotate_counter_clockwise(board: ndarray) -> None:
    """Rotate the board 90° counterclockwise: reverse each row, then transpose."""
    reverse_each_row(board)
    transpose(board)


def identity(board: ndarray) -> None:
    """Leave the board untouched."""


# ##>: Direction -> (pre-transform, post-transform) around the canonical upward merge.
ORIENTATIONS: dict[Direction, tuple[Transform, Transform]] = {
    Direction.UP: (identity, identity),
    Direction.DOWN: (reverse_rows, reverse_rows),
    Direction.LEFT: (rotate_clockwise, rotate_counter_clockwise),
    Direction.RIGHT: (rotate_counter_clockwise, rotate_clockwise),
}


# ##: Merging.


def merge_column(column: ndarray) -> tuple[int, ndarray]:
    """
    Merge adjacent equal values in a column and compute the total score.

    Parameters
    ----------
    column : ndarray
        A 1D array representing one column of the game board, read from the edge the tiles move to.

    Returns
    -------
    score : int
        The total score obtained from merging.
    merged_column : ndarray
        The dense merged values, without zero padding.

    Notes
    -----
    - Zeros (empty cells) are ignored and removed before merging.
    - Merging occurs from the start of the column towards the end, the earliest pair wins.
    - Each value can only be merged once per function call.
    - Two ``MAX_TILE`` tiles never merge, their sum does not fit in int64.

    Examples
    --------
    >>> merge_column(array([2, 2, 2, 0]))
    (4, array([4, 2]))

    >>> merge_column(array([2, 2, 2, 2]))
    (8, array([4, 4]))
    """
    non_zero = column[column != 0]
    if len(non_zero) <= 1:
        return 0, non_zero

    result = []
    score = 0

    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1] and non_zero[i] < MAX_TILE:
            merged = int(non_zero[i]) * 2
            result.append(merged)
            score += merged
            i += 2
        else:
            result.append(int(non_zero[i]))
            i += 1

    return score, array(result, dtype=column.dtype)


def merge_up(board: ndarray) -> int:
    """
    Slide every column towards row 0 and merge it. **Modifies the board in place.**

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    int
        The total score gained by the merges.
    """
    score = 0
    size = board.shape[0]

    for col in range(board.shape[1]):
        gained, merged = merge_column(board[:, col])
        score += gained
        board[: len(merged), col] = merged
        board[len(merged) : size, col] = 0

    return score


def slide(board: ndarray, direction: Optional[Direction]) -> int:
    """
    Slide and merge the board in one direction. **Modifies the board in place.**

    The move runs on a copy which is written back once complete, so the board is never left half rotated.

    Parameters
    ----------
    board : ndarray
        The game board.
    direction : Direction or None
        The direction of the move. Unknown directions leave the board untouched.

    Returns
    -------
    int
        The total score gained by the merges.
    """
    if direction not in ORIENTATIONS:
        return 0

    before, after = ORIENTATIONS[direction]
    work = board.copy()
    before(work)
    score = merge_up(work)
    after(work)

    board[...] = work
    return score


# ##: Spawning.


def get_two_or_four(rng: Generator, tile_probs: Optional[dict[int, float]] = None) -> int:
    """
    Draw the value of a new tile, 2 with a 90% chance and 4 otherwise by default.

    Parameters
    ----------
    rng : Generator
        The random source.
    tile_probs : dict, optional
        Tile value -> probability.

    Returns
    -------
    int
        The drawn tile value.
    """
    probs = tile_probs or TILE_SPAWN_PROBS
    return int(rng.choice(list(probs.keys()), p=list(probs.values())))


def place_new_tile(
    board: ndarray, rng: Generator, tile_probs: Optional[dict[int, float]] = None
) -> Optional[tuple[int, int, int]]:
    """
    Place a new tile in a random empty cell. **Modifies the board in place.**

    Parameters
    ----------
    board : ndarray
        The game board.
    rng : Generator
        The random source used for the cell and for the tile value.
    tile_probs : dict, optional
        Tile value -> probability.

    Returns
    -------
    tuple or None
        ``(row, col, value)`` of the new tile, or None if the board has no empty cell.
    """
    available_cells = argwhere(board == 0)
    if len(available_cells) == 0:
        return None

    row, col = available_cells[int(rng.integers(len(available_cells)))]
    value = get_two_or_four(rng, tile_probs)
    board[row, col] = value
    return int(row), int(col), value


def fill_cells(
    board: ndarray, number_tile: int, rng: Generator, tile_probs: Optional[dict[int, float]] = None
) -> int:
    """
    Fill empty cells with new tiles, one after another. **Modifies the board in place.**

    Parameters
    ----------
    board : ndarray
        The game board.
    number_tile : int
        Number of new tiles to add.
    rng : Generator
        The random source.
    tile_probs : dict, optional
        Tile value -> probability.

    Returns
    -------
    int
        The number of tiles actually placed, lower than requested when the board fills up.
    """
    placed = 0
    for _ in range(number_tile):
        if place_new_tile(board, rng, tile_probs) is None:
            break
        placed += 1
    return placed


def empty_board(size: int) -> ndarray:
    """Create an empty ``size`` x ``size`` board."""
    return zeros((size, size), dtype=int64)
