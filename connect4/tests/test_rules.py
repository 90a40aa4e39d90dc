import unittest
from connect4.core.board import BoardState, Cell
from connect4.core.rules import check_win_at, find_winner, winning_cells, is_draw
from connect4.tests.boards import draw_matrix, board_with


class TestWinDetection(unittest.TestCase):
    RUNS = {
        "horizontal": [(0, 5), (1, 5), (2, 5), (3, 5)],
        "vertical": [(2, 5), (2, 4), (2, 3), (2, 2)],
        "diagonal_down": [(0, 2), (1, 3), (2, 4), (3, 5)],
        "diagonal_up": [(3, 5), (4, 4), (5, 3), (6, 2)],
    }

    def test_run_of_four_detected_from_every_cell(self):
        for name, run in self.RUNS.items():
            board = board_with(run)
            for col, row in run:
                with self.subTest(axis=name, origin=(col, row)):
                    self.assertTrue(check_win_at(board, col, row))
            self.assertEqual(find_winner(board), Cell.PLAYER_A)

    def test_blocked_three_is_not_a_win(self):
        """A A A between two B pieces on the bottom row."""
        board = board_with([(1, 5), (2, 5), (3, 5)])
        board.set(0, 5, Cell.PLAYER_B)
        board.set(4, 5, Cell.PLAYER_B)
        for col in (1, 2, 3):
            self.assertFalse(check_win_at(board, col, 5))
        self.assertIsNone(find_winner(board))

    def test_empty_cell_is_never_a_win(self):
        board = BoardState()
        self.assertFalse(check_win_at(board, 3, 5))
        self.assertIsNone(find_winner(board))
        self.assertEqual(winning_cells(board), [])

    def test_winner_is_owner_of_run(self):
        board = board_with([(6, 5), (6, 4), (6, 3), (6, 2)], owner=Cell.PLAYER_B)
        board.set(0, 5, Cell.PLAYER_A)
        self.assertEqual(find_winner(board), Cell.PLAYER_B)

    def test_winning_cells_follow_the_axis(self):
        board = board_with(self.RUNS["diagonal_up"])
        self.assertEqual(winning_cells(board), [(3, 5), (4, 4), (5, 3), (6, 2)])

    def test_five_in_a_row_reported_whole(self):
        board = board_with([(1, 5), (2, 5), (3, 5), (4, 5), (5, 5)])
        self.assertEqual(winning_cells(board), [(1, 5), (2, 5), (3, 5), (4, 5), (5, 5)])


class TestDrawDetection(unittest.TestCase):
    def test_full_board_without_winner_is_draw(self):
        board = BoardState.from_matrix(draw_matrix())
        self.assertTrue(board.is_gravity_consistent())
        self.assertIsNone(find_winner(board))
        self.assertTrue(is_draw(board))

    def test_one_empty_cell_is_not_draw(self):
        board = BoardState.from_matrix(draw_matrix())
        board.undo(4, 0)
        self.assertFalse(is_draw(board))

    def test_empty_board_is_not_draw(self):
        self.assertFalse(is_draw(BoardState()))


if __name__ == '__main__':
    unittest.main()
