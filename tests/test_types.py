from unittest import TestCase, main

import numpy as np

from game2048.addons import MOVE_KEYS, TILE_SPAWN_PROBS, Direction, GameConfig


class TestDirection(TestCase):
    """Direction parsing."""

    def test_parse_known_values(self):
        """Enum members, codes, names and key names resolve to the same direction."""
        for value in (Direction.UP, 1, np.int32(1), 'up', 'UP', 'ArrowUp'):
            self.assertIs(Direction.parse(value), Direction.UP, msg=repr(value))

    def test_parse_left_is_not_falsy(self):
        """Action code 0 resolves like every other direction."""
        self.assertIs(Direction.parse('ArrowLeft'), Direction.LEFT)
        self.assertIs(Direction.parse(0), Direction.LEFT)

    def test_parse_unknown_values(self):
        """Anything else resolves to None."""
        for value in (4, -1, True, 'north', '', None, 1.0, [1]):
            self.assertIsNone(Direction.parse(value), msg=repr(value))

    def test_action_codes(self):
        """Action codes 0 to 3 map to left, up, right and down."""
        codes = {code: Direction.parse(code) for code in range(4)}
        self.assertEqual(codes, {0: Direction.LEFT, 1: Direction.UP, 2: Direction.RIGHT, 3: Direction.DOWN})
        self.assertEqual(list(Direction), list(codes.values()))

    def test_move_keys(self):
        """Every direction has a keyboard key."""
        self.assertEqual(set(MOVE_KEYS.values()), set(Direction))


class TestGameConfig(TestCase):
    """Game configuration defaults."""

    def test_defaults(self):
        config = GameConfig()
        self.assertIsNone(config.initial_state)
        self.assertEqual(config.start_tiles_amount, 2)
        self.assertFalse(config.force_power_of_two)
        self.assertEqual(config.winning_tile, 2048)
        self.assertEqual(config.tile_probs, TILE_SPAWN_PROBS)

    def test_tile_probs_are_not_shared(self):
        """Each configuration owns its probabilities."""
        first, second = GameConfig(), GameConfig()
        first.tile_probs[2] = 0.5
        self.assertEqual(second.tile_probs[2], 0.9)
        self.assertEqual(TILE_SPAWN_PROBS[2], 0.9)


if __name__ == '__main__':
    main()
