from unittest import TestCase, main

from numpy import array

from game2048.addons.config import MAX_TILE
from game2048.addons.types import Direction
from game2048.core.gamemove import check_move_possibility, has_tile, is_legal, legal_actions, max_tile


class TestGameMove(TestCase):
    def test_empty_cell_allows_move(self):
        """
        Test if a single empty cell is enough for a move.
        """
        board = array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 0, 4], [4, 2, 4, 2]])
        self.assertTrue(check_move_possibility(board))

    def test_adjacent_pairs_allow_move(self):
        """
        Test if equal neighbours on a full board allow a move, in both axes.
        """
        horizontal = array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 8, 8]])
        vertical = array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 8], [4, 2, 4, 8]])
        self.assertTrue(check_move_possibility(horizontal))
        self.assertTrue(check_move_possibility(vertical))

    def test_blocked_board(self):
        """
        Test if a full board without equal neighbours is blocked.
        """
        board = array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.assertFalse(check_move_possibility(board))
        self.assertEqual(legal_actions(board), [])

    def test_max_tiles_do_not_count_as_pair(self):
        """
        Test if two neighbouring maximum tiles leave a full board blocked.
        """
        board = array([[MAX_TILE, MAX_TILE], [2, 4]])
        self.assertFalse(check_move_possibility(board))
        self.assertEqual(legal_actions(board), [])

    def test_legal_actions(self):
        """
        Test if legal actions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(legal_actions(board), [Direction.UP, Direction.RIGHT, Direction.DOWN])
        self.assertFalse(is_legal(board, Direction.LEFT))

    def test_legality_leaves_board_untouched(self):
        """
        Test if trying a direction does not modify the board.
        """
        board = array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 4]])
        original = board.copy()
        self.assertTrue(is_legal(board, Direction.LEFT))
        self.assertTrue((board == original).all())

    def test_tile_lookup(self):
        """
        Test the winning tile lookup and the max tile.
        """
        board = array([[2, 0], [2048, 4]])
        self.assertTrue(has_tile(board, 2048))
        self.assertFalse(has_tile(board, 1024))
        self.assertEqual(max_tile(board), 2048)


if __name__ == '__main__':
    main()
