"""2048 game engine: grid, score and status of a single game."""

import logging
from typing import Any, Optional

from numpy import ndarray
from numpy.random import Generator, default_rng

from game2048.addons.config import BOARD_SIZE, START_TILES_QUANTITY, GameConfig, GridLike
from game2048.addons.types import Direction, GameStatus
from game2048.core.gameboard import empty_board, fill_cells, get_two_or_four, place_new_tile, sanitize_state, slide
from game2048.core.gamemove import check_move_possibility, has_tile

_logger = logging.getLogger(__name__)


class GameEngine:
    """
    2048 game engine.

    The engine exclusively owns its grid, score and status. ``get_state()`` returns the live grid which is
    overwritten in place by later operations: callers that need a stable value must copy it.

    Status transitions::

        Idle --start()--> Playing --move()--> Won | Lost
        any  --restart()--> Idle --start()--> Playing

    Parameters
    ----------
    initial_state : GridLike, optional
        Square grid used at construction and on every restart. Defaults to an empty 4x4 grid.
    start_tiles_amount : int, optional
        Number of tiles placed by ``start()`` (default is 2).
    force_power_of_two : bool, optional
        Round invalid cells down to a power of two instead of clearing them (default is False).
    config : GameConfig, optional
        Full configuration; takes precedence over the three arguments above.
    rng : Generator, optional
        Random source for tile spawning.
    seed : int, optional
        Seed of the default random source, ignored when ``rng`` is given.
    """

    STATUS = GameStatus

    def __init__(
        self,
        initial_state: Optional[GridLike] = None,
        start_tiles_amount: int = START_TILES_QUANTITY,
        force_power_of_two: bool = False,
        *,
        config: Optional[GameConfig] = None,
        rng: Optional[Generator] = None,
        seed: Optional[int] = None,
    ):
        if config is None:
            config = GameConfig(
                initial_state=initial_state,
                start_tiles_amount=start_tiles_amount,
                force_power_of_two=force_power_of_two,
            )
        self.config = config

        grid = config.initial_state if config.initial_state is not None else empty_board(BOARD_SIZE)
        board = sanitize_state(grid, config.force_power_of_two)

        # ##>: Frozen snapshot used by restart().
        self._initial_state = board.copy()
        self._initial_state.setflags(write=False)

        self._state: ndarray = board
        self._score = 0
        self._status = GameStatus.IDLE
        self._rng = rng if rng is not None else default_rng(seed)

    # ##: Queries.

    @property
    def size(self) -> int:
        """Side of the square grid."""
        return self._state.shape[0]

    @property
    def start_tiles_amount(self) -> int:
        """Number of tiles placed by ``start()``."""
        return self.config.start_tiles_amount

    @property
    def initial_state(self) -> ndarray:
        """Read-only snapshot of the sanitized construction grid."""
        return self._initial_state

    def get_score(self) -> int:
        """Return the current score."""
        return self._score

    def get_status(self) -> GameStatus:
        """Return the current status."""
        return self._status

    def get_state(self) -> ndarray:
        """
        Return the live grid.

        Returns
        -------
        ndarray
            The grid buffer owned by the engine. It must be treated as read-only and is overwritten by
            later operations; use ``snapshot()`` or ``.copy()`` for a stable value.
        """
        return self._state

    def snapshot(self) -> ndarray:
        """Return a copy of the grid that later operations will not touch."""
        return self._state.copy()

    # ##: Lifecycle.

    def start(self) -> None:
        """Set the status to Playing and place the starting tiles."""
        self._status = GameStatus.PLAYING
        placed = fill_cells(self._state, self.start_tiles_amount, self._rng, self.config.tile_probs)
        _logger.info('Game started with %d tile(s) on a %dx%d grid', placed, self.size, self.size)

    def restart(self) -> None:
        """Reset the grid to the initial state and the score to 0, then start again."""
        self._status = GameStatus.IDLE
        self._state[...] = self._initial_state
        self._score = 0
        _logger.info('Game restarted')
        self.start()

    # ##: Moves.

    def move(self, direction: Any) -> None:
        """
        Play a move: slide and merge, spawn a tile, then update the status.

        Parameters
        ----------
        direction : Any
            A ``Direction``, an action code (0: left, 1: up, 2: right, 3: down), a name (``"up"``) or a key
            name (``"ArrowUp"``). Unrecognized values do not move the grid, but a tile is still spawned and
            the status is still updated.
        """
        parsed = Direction.parse(direction)
        if parsed is None:
            _logger.warning('Ignoring unrecognized direction %r', direction)

        gained = slide(self._state, parsed)
        self._score += gained

        spawned = self.place_new_tile()
        _logger.debug('Move %s: +%d points, spawned %s', parsed, gained, spawned)

        self.update_game_status()

    def move_up(self) -> None:
        """Slide the grid up, without spawning or status update."""
        self._score += slide(self._state, Direction.UP)

    def move_down(self) -> None:
        """Slide the grid down, without spawning or status update."""
        self._score += slide(self._state, Direction.DOWN)

    def move_left(self) -> None:
        """Slide the grid left, without spawning or status update."""
        self._score += slide(self._state, Direction.LEFT)

    def move_right(self) -> None:
        """Slide the grid right, without spawning or status update."""
        self._score += slide(self._state, Direction.RIGHT)

    def place_new_tile(self) -> Optional[tuple[int, int, int]]:
        """Place a 2 or a 4 in a random empty cell, if any; return ``(row, col, value)`` or None."""
        return place_new_tile(self._state, self._rng, self.config.tile_probs)

    def get_two_or_four(self) -> int:
        """Draw a new tile value from the engine random source."""
        return get_two_or_four(self._rng, self.config.tile_probs)

    def check_move_possibility(self) -> bool:
        """Whether any move is still possible on the grid."""
        return check_move_possibility(self._state)

    def update_game_status(self) -> None:
        """
        Update the status from the current grid.

        A grid without any possible move is Lost, even if it holds the winning tile. Otherwise a grid holding
        the winning tile is Won. Otherwise the status is left unchanged.
        """
        previous = self._status

        if not self.check_move_possibility():
            self._status = GameStatus.LOST
        elif has_tile(self._state, self.config.winning_tile):
            self._status = GameStatus.WON

        if self._status is not previous:
            _logger.info('Status changed from %s to %s (score %d)', previous.value, self._status.value, self._score)

    @staticmethod
    def sanitize_state(state: GridLike, force_power_of_two: bool = False) -> ndarray:
        """Build a valid board from an arbitrary grid, see ``game2048.core.sanitize_state``."""
        return sanitize_state(state, force_power_of_two)

    def __repr__(self) -> str:
        return f'{type(self).__name__}(size={self.size}, score={self._score}, status={self._status.value})'
