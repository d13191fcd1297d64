from unittest import TestCase, main

from numpy import array

from game2048.core.direction import Direction
from game2048.core.errors import InvalidDirection
from game2048.core.gamemove import can_move, illegal_directions, legal_directions, legal_directions_mask


class TestGameMove(TestCase):
    def test_illegal_directions(self):
        """
        Test if illegal directions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        illegal = illegal_directions(board)
        self.assertEqual(set(illegal), {Direction.LEFT})

    def test_legal_directions(self):
        """
        Test if legal directions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        legal = legal_directions(board)
        self.assertEqual(legal, [Direction.UP, Direction.RIGHT, Direction.DOWN])

    def test_stuck_board(self):
        """
        Test that a full board without equal neighbours has no legal direction.
        """
        board = [[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]]
        self.assertEqual(legal_directions_mask(board), (False, False, False, False))
        self.assertEqual(set(illegal_directions(board)), set(Direction))

    def test_can_move(self):
        """
        Test single direction checks with every kind of direction token.
        """
        board = [[0, 0, 0, 2], [0, 0, 0, 4], [0, 0, 0, 8], [0, 0, 0, 16]]
        self.assertFalse(can_move(board, Direction.RIGHT))
        self.assertFalse(can_move(board, 'up'))
        self.assertTrue(can_move(board, 0))
        with self.assertRaises(InvalidDirection):
            can_move(board, 'sideways')

    def test_merge_without_gap(self):
        """
        Test that a full line with an equal pair can move both ways along it.
        """
        board = [[2, 2, 4], [8, 16, 32]]
        self.assertEqual(legal_directions(board), [Direction.LEFT, Direction.RIGHT])

    def test_gap_behind_tile(self):
        """
        Test that a tile can only slide towards a gap on its side.
        """
        board = [[0, 2, 4]]
        self.assertEqual(legal_directions_mask(board), (True, False, False, False))

    def test_tile_less_board(self):
        """
        Test that a board without tiles has no legal direction.
        """
        self.assertEqual(legal_directions([[0, 0], [0, 0]]), [])


if __name__ == '__main__':
    main()
