"""
Tests for the move engine: the line primitive, grid moves and input validation.
"""

from unittest import TestCase, main

import numpy as np

from game2048.core.direction import Direction
from game2048.core.engine import merge_line, move, slide_and_merge
from game2048.core.errors import InvalidDirection, InvalidShape


class TestMergeLine(TestCase):
    """Test merging of compacted values."""

    def test_merge_empty_line(self):
        """Empty line merges to empty with zero score."""
        score, result = merge_line(np.array([0, 0, 0, 0]))

        self.assertEqual(score, 0)
        self.assertEqual(len(result), 0)

    def test_merge_single_tile(self):
        """Single tile line produces no merge."""
        score, result = merge_line(np.array([0, 4, 0, 0]))

        self.assertEqual(score, 0)
        np.testing.assert_array_equal(result, np.array([4]))

    def test_merge_pairs(self):
        """Both pairs merge and their values add up in the score."""
        score, result = merge_line(np.array([2, 2, 4, 4]))

        self.assertEqual(score, 12)
        np.testing.assert_array_equal(result, np.array([4, 8]))

    def test_score_is_python_int(self):
        """Score is a plain integer."""
        score, _ = merge_line(np.array([2, 2, 0, 0]))
        self.assertIs(type(score), int)


class TestSlideAndMerge(TestCase):
    """Test the line primitive."""

    def test_non_cascading_merge(self):
        """Four equal tiles merge into two, never into one."""
        outcome = slide_and_merge([2, 2, 2, 2])

        np.testing.assert_array_equal(outcome.line, [4, 4, 0, 0])
        self.assertTrue(outcome.moved)
        self.assertEqual(outcome.score_delta, 8)

    def test_full_line_without_merge(self):
        """Alternating tiles stay in place."""
        outcome = slide_and_merge([2, 4, 2, 4])

        np.testing.assert_array_equal(outcome.line, [2, 4, 2, 4])
        self.assertFalse(outcome.moved)
        self.assertEqual(outcome.score_delta, 0)

    def test_compaction_without_merge(self):
        """Tiles slide over empty cells and keep their order."""
        outcome = slide_and_merge([0, 2, 0, 4])

        np.testing.assert_array_equal(outcome.line, [2, 4, 0, 0])
        self.assertTrue(outcome.moved)
        self.assertEqual(outcome.score_delta, 0)

    def test_merged_tile_does_not_merge_again(self):
        """A tile produced by a merge ignores an equal neighbour."""
        outcome = slide_and_merge([2, 2, 4, 0])

        np.testing.assert_array_equal(outcome.line, [4, 4, 0, 0])
        self.assertEqual(outcome.score_delta, 4)

    def test_merge_across_gap(self):
        """Equal tiles separated by empty cells merge, the first pair wins."""
        outcome = slide_and_merge([8, 0, 8, 8])

        np.testing.assert_array_equal(outcome.line, [16, 8, 0, 0])
        self.assertEqual(outcome.score_delta, 16)

    def test_empty_line(self):
        """An empty line does not move."""
        outcome = slide_and_merge([0, 0, 0, 0])

        np.testing.assert_array_equal(outcome.line, [0, 0, 0, 0])
        self.assertFalse(outcome.moved)

    def test_padding_keeps_length(self):
        """Result has the length of the input, whatever it is."""
        outcome = slide_and_merge([0, 0, 0, 0, 0, 2])

        np.testing.assert_array_equal(outcome.line, [2, 0, 0, 0, 0, 0])
        self.assertTrue(outcome.moved)


class TestMove(TestCase):
    """Test grid moves in every direction."""

    # ##>: Rows exercise merges and slides for horizontal moves.
    ROWS = np.array([[2, 2, 4, 4], [0, 2, 2, 4], [2, 0, 0, 2], [2, 2, 2, 2]])

    # ##>: Columns exercise merges and slides for vertical moves.
    COLUMNS = np.array([[2, 0, 2, 4], [2, 0, 0, 4], [4, 2, 2, 4], [4, 2, 0, 4]])

    def test_move_left(self):
        """Left slides every row towards column 0."""
        outcome = move(self.ROWS, Direction.LEFT)

        expected = np.array([[4, 8, 0, 0], [4, 4, 0, 0], [4, 0, 0, 0], [4, 4, 0, 0]])
        np.testing.assert_array_equal(outcome.grid, expected)
        self.assertTrue(outcome.moved)
        self.assertEqual(outcome.score_delta, 28)

    def test_move_right(self):
        """Right slides every row towards the last column."""
        outcome = move(self.ROWS, Direction.RIGHT)

        expected = np.array([[0, 0, 4, 8], [0, 0, 4, 4], [0, 0, 0, 4], [0, 0, 4, 4]])
        np.testing.assert_array_equal(outcome.grid, expected)
        self.assertTrue(outcome.moved)
        self.assertEqual(outcome.score_delta, 28)

    def test_move_up(self):
        """Up slides every column towards row 0."""
        outcome = move(self.COLUMNS, Direction.UP)

        expected = np.array([[4, 4, 4, 8], [8, 0, 0, 8], [0, 0, 0, 0], [0, 0, 0, 0]])
        np.testing.assert_array_equal(outcome.grid, expected)
        self.assertTrue(outcome.moved)
        self.assertEqual(outcome.score_delta, 36)

    def test_move_down(self):
        """Down slides every column towards the last row."""
        outcome = move(self.COLUMNS, Direction.DOWN)

        expected = np.array([[0, 0, 0, 0], [0, 0, 0, 0], [4, 0, 0, 8], [8, 4, 4, 8]])
        np.testing.assert_array_equal(outcome.grid, expected)
        self.assertTrue(outcome.moved)
        self.assertEqual(outcome.score_delta, 36)

    def test_unmoved_grid(self):
        """A grid already packed to the left does not move left."""
        board = np.array([[2, 0, 0, 0], [4, 0, 0, 0], [8, 0, 0, 0], [16, 0, 0, 0]])
        outcome = move(board, Direction.LEFT)

        np.testing.assert_array_equal(outcome.grid, board)
        self.assertFalse(outcome.moved)
        self.assertEqual(outcome.score_delta, 0)

    def test_rectangular_grid(self):
        """Moves work on grids that are not square."""
        board = [[2, 2, 0], [0, 4, 4]]

        outcome = move(board, Direction.LEFT)
        np.testing.assert_array_equal(outcome.grid, [[4, 0, 0], [8, 0, 0]])
        self.assertEqual(outcome.score_delta, 12)

        outcome = move(board, Direction.UP)
        np.testing.assert_array_equal(outcome.grid, [[2, 2, 4], [0, 4, 0]])
        self.assertTrue(outcome.moved)
        self.assertEqual(outcome.score_delta, 0)

    def test_input_not_mutated(self):
        """The input grid keeps its values and is not aliased by the result."""
        board = self.ROWS.copy()
        outcome = move(board, Direction.LEFT)

        np.testing.assert_array_equal(board, self.ROWS)
        self.assertFalse(np.shares_memory(outcome.grid, board))
        self.assertFalse(outcome.grid.flags.writeable)

    def test_unmoved_result_is_a_copy(self):
        """Even an unmoved result is a new array."""
        board = np.array([[2, 4], [4, 2]])
        outcome = move(board, Direction.UP)

        self.assertFalse(outcome.moved)
        self.assertFalse(np.shares_memory(outcome.grid, board))

    def test_direction_tokens(self):
        """Directions can be given as names or action indices."""
        expected = move(self.ROWS, Direction.RIGHT)

        for token in ('right', 'Right', 'RIGHT', 2):
            outcome = move(self.ROWS.tolist(), token)
            np.testing.assert_array_equal(outcome.grid, expected.grid)
            self.assertEqual(outcome.score_delta, expected.score_delta)

    def test_invalid_shape(self):
        """Ragged rows are rejected before any output."""
        with self.assertRaises(InvalidShape):
            move([[2, 2, 0, 0], [0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], Direction.LEFT)

    def test_invalid_direction(self):
        """Unknown directions are rejected."""
        for token in ('diagonal', '', 4, -1, True, None, 1.0):
            with self.assertRaises(InvalidDirection):
                move(self.ROWS, token)


class TestDirection(TestCase):
    """Test direction parsing and action indices."""

    def test_action_order(self):
        """Action indices follow left, up, right, down."""
        self.assertEqual([direction.action for direction in Direction], [0, 1, 2, 3])
        self.assertEqual(Direction.from_action(3), Direction.DOWN)

    def test_parse(self):
        """Names are parsed case-insensitively."""
        self.assertIs(Direction.parse(' Up '), Direction.UP)
        self.assertIs(Direction.parse(Direction.LEFT), Direction.LEFT)
        self.assertIs(Direction.parse(1), Direction.UP)

    def test_numpy_integer_actions(self):
        """Numpy integers, as drawn by a numpy generator, are action indices."""
        self.assertIs(Direction.from_action(np.int64(2)), Direction.RIGHT)
        self.assertIs(Direction.parse(np.int64(2)), Direction.RIGHT)
        self.assertIs(Direction.parse(np.int32(3)), Direction.DOWN)
        self.assertIs(Direction.parse(np.uint8(0)), Direction.LEFT)

        grid = [[2, 0, 2, 0], [0, 4, 0, 4], [0, 0, 0, 0], [8, 0, 0, 8]]
        expected = move(grid, 2)
        outcome = move(grid, np.int64(2))
        np.testing.assert_array_equal(outcome.grid, expected.grid)
        self.assertEqual(outcome.score_delta, expected.score_delta)

    def test_invalid_numpy_actions(self):
        """Out of range, boolean and floating numpy scalars are rejected."""
        for token in (np.int64(4), np.int64(-1), np.bool_(True), np.float64(1.0)):
            with self.assertRaises(InvalidDirection):
                Direction.parse(token)
        with self.assertRaises(InvalidDirection):
            Direction.from_action(np.int64(7))

    def test_invalid_direction_is_value_error(self):
        """InvalidDirection can be caught as a ValueError."""
        with self.assertRaises(ValueError):
            Direction.parse('north')


if __name__ == '__main__':
    main()
