"""
Tests for the random playout driver.
"""

from unittest import TestCase, main

import numpy as np

from game2048 import GameEngine, GameStatus
from game2048.evaluate import evaluate, play_game


class AlwaysFirst:
    """Random source that always draws index 0, which is LEFT."""

    def integers(self, high):
        return 0


class TestPlayGame(TestCase):
    """Single random game."""

    def test_game_runs_to_the_end(self):
        """Without a cap a random game ends Won or Lost."""
        engine = GameEngine(seed=0)
        engine.start()
        moves, noops = play_game(engine, np.random.default_rng(0))

        self.assertGreater(moves, 0)
        self.assertLessEqual(noops, moves)
        self.assertIn(engine.get_status(), (GameStatus.WON, GameStatus.LOST))

    def test_move_cap(self):
        """The cap stops a running game."""
        engine = GameEngine(seed=0)
        engine.start()
        moves, _ = play_game(engine, np.random.default_rng(0), max_moves=5)

        self.assertEqual(moves, 5)
        self.assertIs(engine.get_status(), GameStatus.PLAYING)

    def test_legal_only_never_wastes_a_move(self):
        """Drawing among legal directions always changes the grid."""
        engine = GameEngine(seed=3)
        engine.start()
        moves, noops = play_game(engine, np.random.default_rng(3), max_moves=100, legal_only=True)

        self.assertGreater(moves, 0)
        self.assertEqual(noops, 0)

    def test_noop_moves_are_counted(self):
        """A move against a packed edge counts as a no-op."""
        engine = GameEngine(initial_state=[[2, 0], [4, 0]], start_tiles_amount=0, seed=0)
        engine.start()

        moves, noops = play_game(engine, AlwaysFirst(), max_moves=1)

        self.assertEqual((moves, noops), (1, 1))


class TestEvaluate(TestCase):
    """Statistics over several games."""

    def test_statistics(self):
        """Every game is counted once."""
        result = evaluate(games=3, seed=1)

        # ##>: One max tile and one status per game.
        self.assertEqual(sum(result['max_tiles'].values()), 3)
        self.assertEqual(sum(result['statuses'].values()), 3)
        self.assertTrue(set(result['statuses']) <= {'Won', 'Lost'})
        self.assertGreater(result['mean_score'], 0)
        self.assertLessEqual(result["mean_noop_moves"], result["mean_moves"])

    def test_reproducible(self):
        """The same seed gives the same statistics."""
        self.assertEqual(evaluate(games=2, seed=4, max_moves=30), evaluate(games=2, seed=4, max_moves=30))

    def test_small_board(self):
        """Any board size can be played."""
        result = evaluate(games=2, seed=2, size=2)
        self.assertEqual(sum(result['statuses'].values()), 2)


if __name__ == '__main__':
    main()
