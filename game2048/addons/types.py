"""
Enumerations shared by the game engine: move directions and game status.
"""

from enum import Enum
from numbers import Integral
from typing import Any, Optional


class Direction(int, Enum):
    """
    Move direction.

    The integer values are the action codes used across the package (0: left, 1: up, 2: right, 3: down).
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, value: Any) -> Optional['Direction']:
        """
        Resolve a direction from a loosely typed input.

        Parameters
        ----------
        value : Any
            A ``Direction``, an integer action code, a direction name (``"up"``) or a keyboard
            key name (``"ArrowUp"``).

        Returns
        -------
        Direction or None
            The matching direction, or None if the value is not recognized.
        """
        if isinstance(value, cls):
            return value

        # ##>: bool is an int subclass, but True/False are not action codes.
        if isinstance(value, Integral) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                return None

        if isinstance(value, str):
            if value in _NAMES:
                return _NAMES[value]
            return _NAMES.get(value.lower())

        return None


class GameStatus(str, Enum):
    """
    Status of a game.

    IDLE: The game has not started yet.
    PLAYING: The game has started and is in progress.
    WON: A winning tile has been reached.
    LOST: No move is possible anymore.
    """

    IDLE = 'Idle'
    PLAYING = 'Playing'
    WON = 'Won'
    LOST = 'Lost'

    @property
    def is_terminal(self) -> bool:
        """Whether the status ends the game."""
        return self in (GameStatus.WON, GameStatus.LOST)


# ##>: Keyboard names follow the browser KeyboardEvent.key values.
MOVE_KEYS = {
    'ArrowLeft': Direction.LEFT,
    'ArrowUp': Direction.UP,
    'ArrowRight': Direction.RIGHT,
    'ArrowDown': Direction.DOWN,
}

_NAMES = {
    **MOVE_KEYS,
    'left': Direction.LEFT,
    'up': Direction.UP,
    'right': Direction.RIGHT,
    'down': Direction.DOWN,
}
