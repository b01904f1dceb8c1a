from unittest import TestCase

import numpy as np

from connect4_engine.game.rules import (candidate_lines, check_for_win,
                                        check_win_at_position, find_winning_line,
                                        line_is_win)
from connect4_engine.utils import Player


def to_grid(rows):
    return np.array(rows, dtype=np.int8)


EMPTY_ROW = [0, 0, 0, 0, 0, 0, 0]


class TestCandidateLines(TestCase):
    def test_lines_from_origin(self):
        horiz, vert, diag_dr, diag_dl = candidate_lines(1, 3)
        self.assertEqual(horiz, [(1, 3), (1, 4), (1, 5), (1, 6)])
        self.assertEqual(vert, [(1, 3), (2, 3), (3, 3), (4, 3)])
        self.assertEqual(diag_dr, [(1, 3), (2, 4), (3, 5), (4, 6)])
        self.assertEqual(diag_dl, [(1, 3), (2, 2), (3, 1), (4, 0)])

    def test_out_of_bounds_line_is_not_a_win(self):
        grid = np.full((6, 7), Player.ONE.value, dtype=np.int8)
        # would wrap around with negative indexing if bounds were not checked
        self.assertFalse(line_is_win(grid, candidate_lines(0, 0)[3], Player.ONE))
        self.assertFalse(line_is_win(grid, candidate_lines(5, 5)[0], Player.ONE))
        self.assertFalse(line_is_win(grid, candidate_lines(3, 0)[1], Player.ONE))
        self.assertTrue(line_is_win(grid, candidate_lines(2, 3)[1], Player.ONE))


class TestWinDetection(TestCase):
    def test_horizontal_win(self):
        grid = to_grid([EMPTY_ROW] * 5 + [[0, 0, 2, 2, 2, 2, 1]])
        self.assertTrue(check_for_win(grid, Player.TWO))
        self.assertFalse(check_for_win(grid, Player.ONE))
        self.assertEqual(find_winning_line(grid, Player.TWO), [(5, 2), (5, 3), (5, 4), (5, 5)])

    def test_vertical_win(self):
        grid = to_grid([EMPTY_ROW] * 2 + [[0, 0, 0, 0, 0, 0, 1]] * 4)
        self.assertTrue(check_for_win(grid, Player.ONE))
        self.assertEqual(find_winning_line(grid, Player.ONE), [(2, 6), (3, 6), (4, 6), (5, 6)])

    def test_diagonal_down_right_win(self):
        grid = to_grid([
            [0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 2, 0, 0, 0],
            [0, 0, 0, 1, 2, 0, 0],
            [0, 0, 0, 1, 1, 2, 0],
            [0, 0, 0, 1, 1, 2, 2],
        ])
        self.assertTrue(check_for_win(grid, Player.TWO))
        self.assertFalse(check_for_win(grid, Player.ONE))

    def test_diagonal_down_left_win(self):
        grid = to_grid([
            [0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0],
            [0, 0, 1, 2, 0, 0, 0],
            [0, 1, 2, 1, 0, 0, 0],
            [1, 2, 2, 1, 2, 0, 0],
        ])
        self.assertFalse(check_for_win(grid, Player.ONE))
        grid[2, 3] = Player.ONE.value
        self.assertTrue(check_for_win(grid, Player.ONE))
        self.assertEqual(find_winning_line(grid, Player.ONE), [(2, 3), (3, 2), (4, 1), (5, 0)])

    def test_three_or_broken_lines_do_not_win(self):
        grid = to_grid([
            [0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0],
            [1, 0, 0, 0, 0, 0, 0],
            [1, 0, 0, 0, 0, 0, 0],
            [2, 0, 0, 0, 0, 0, 2],
            [1, 1, 0, 1, 1, 2, 2],
        ])
        self.assertFalse(check_for_win(grid, Player.ONE))
        self.assertFalse(check_for_win(grid, Player.TWO))
        self.assertEqual(find_winning_line(grid, Player.ONE), [])

    def test_empty_grid(self):
        grid = np.zeros((6, 7), dtype=np.int8)
        self.assertFalse(check_for_win(grid, Player.ONE))
        self.assertFalse(check_for_win(grid, Player.TWO))

    def test_longer_line_still_wins(self):
        grid = to_grid([EMPTY_ROW] * 5 + [[1, 1, 1, 1, 1, 0, 0]])
        self.assertTrue(check_for_win(grid, Player.ONE))
        self.assertEqual(find_winning_line(grid, Player.ONE)[0], (5, 0))


class TestIncrementalCheck(TestCase):
    def test_detects_line_through_piece(self):
        grid = to_grid([
            [0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 1, 0, 0, 0],
            [0, 0, 1, 2, 0, 0, 0],
            [0, 1, 2, 1, 0, 0, 0],
            [1, 2, 2, 1, 2, 0, 0],
        ])
        self.assertTrue(check_win_at_position(grid, 2, 3))
        self.assertTrue(check_win_at_position(grid, 5, 0))
        self.assertFalse(check_win_at_position(grid, 5, 4))

    def test_empty_cell_is_never_a_win(self):
        grid = np.zeros((6, 7), dtype=np.int8)
        self.assertFalse(check_win_at_position(grid, 5, 3))

    def test_gap_filled_in_the_middle(self):
        grid = to_grid([EMPTY_ROW] * 5 + [[0, 2, 2, 0, 2, 0, 0]])
        self.assertFalse(check_win_at_position(grid, 5, 2))
        grid[5, 3] = Player.TWO.value
        self.assertTrue(check_win_at_position(grid, 5, 3))
        self.assertTrue(check_for_win(grid, Player.TWO))
