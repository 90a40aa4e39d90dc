import unittest
from connect4.core.board import BoardState, Cell, InvalidBoardError
from connect4.core.constants import EMPTY_STATE, ROWS, COLS


class TestBoardState(unittest.TestCase):
    def test_empty_board_serializes_to_initial_state(self):
        self.assertEqual(BoardState().to_string(), EMPTY_STATE)
        self.assertEqual(len(EMPTY_STATE), ROWS * COLS)

    def test_layout_is_row_major_from_top(self):
        """First piece in column 2 lands on the bottom row: index 5*7+2."""
        board = BoardState()
        row = board.drop(2, Cell.PLAYER_A)
        self.assertEqual(row, ROWS - 1)
        state = board.to_string()
        self.assertEqual(state[5 * COLS + 2], "1")
        self.assertEqual(state.count("0"), ROWS * COLS - 1)

    def test_round_trip(self):
        board = BoardState()
        for col, cell in [(3, Cell.PLAYER_A), (3, Cell.PLAYER_B), (2, Cell.PLAYER_A),
                          (6, Cell.PLAYER_B), (0, Cell.PLAYER_A), (3, Cell.PLAYER_B)]:
            board.drop(col, cell)
        state = board.to_string()
        self.assertEqual(BoardState.from_string(state).to_string(), state)
        self.assertEqual(BoardState.from_string(state), board)

    def test_from_string_rejects_bad_length(self):
        with self.assertRaises(InvalidBoardError):
            BoardState.from_string("0" * 41)
        with self.assertRaises(InvalidBoardError):
            BoardState.from_string("0" * 43)

    def test_from_string_rejects_unknown_symbol(self):
        with self.assertRaises(InvalidBoardError):
            BoardState.from_string("3" + "0" * 41)

    def test_load_is_noop_on_malformed_input(self):
        board = BoardState()
        board.drop(4, Cell.PLAYER_B)
        before = board.to_string()

        self.assertFalse(board.load("012"))
        self.assertFalse(board.load("x" * 42))
        self.assertEqual(board.to_string(), before)

        self.assertTrue(board.load(EMPTY_STATE))
        self.assertEqual(board.to_string(), EMPTY_STATE)

    def test_drop_then_undo_restores_board(self):
        board = BoardState()
        board.drop(1, Cell.PLAYER_A)
        board.drop(1, Cell.PLAYER_B)
        before = board.to_string()

        for col in range(COLS):
            row = board.drop(col, Cell.PLAYER_A)
            self.assertIsNotNone(row)
            board.undo(col, row)
            self.assertEqual(board.to_string(), before)

    def test_full_and_out_of_range_columns(self):
        board = BoardState()
        for i in range(ROWS):
            self.assertEqual(board.drop(0, Cell.PLAYER_A if i % 2 == 0 else Cell.PLAYER_B), ROWS - 1 - i)

        self.assertTrue(board.is_column_full(0))
        self.assertIsNone(board.lowest_empty_row(0))
        self.assertIsNone(board.drop(0, Cell.PLAYER_A))
        self.assertIsNone(board.lowest_empty_row(-1))
        self.assertIsNone(board.lowest_empty_row(COLS))
        self.assertIsNone(board.drop(COLS, Cell.PLAYER_A))
        self.assertTrue(board.is_column_full(-1))
        self.assertTrue(board.is_column_full(COLS))

    def test_out_of_range_columns_are_never_playable(self):
        """Negative or too-large indices must not alias other cells of the flat grid."""
        board = BoardState()
        self.assertTrue(board.is_column_full(-1))
        self.assertTrue(board.is_column_full(COLS))

        # Bottom-right cell is index 41, what cells[-1] would read
        board.drop(COLS - 1, Cell.PLAYER_A)
        self.assertTrue(board.is_column_full(-1))
        self.assertFalse(board.is_column_full(COLS - 1))
        self.assertEqual(board.to_string()[-1], "1")
        self.assertEqual(board.valid_moves(), [1, 2, 3, 4, 5, 6])
        self.assertFalse(board.is_full())

    def test_gravity_invariant_after_drops(self):
        board = BoardState()
        sequence = [3, 3, 4, 2, 2, 6, 0, 3, 5, 5, 1, 4, 4, 3]
        for i, col in enumerate(sequence):
            board.drop(col, Cell.PLAYER_A if i % 2 == 0 else Cell.PLAYER_B)
            self.assertTrue(board.is_gravity_consistent())
        self.assertEqual(board.piece_count(), len(sequence))

    def test_floating_piece_breaks_gravity(self):
        # A piece on the top row of an otherwise empty column
        self.assertFalse(BoardState.from_string("1" + "0" * 41).is_gravity_consistent())

    def test_matrix_view(self):
        matrix = [[0] * COLS for _ in range(ROWS)]
        matrix[5][0] = 1
        matrix[5][1] = 2
        matrix[4][0] = 2

        board = BoardState.from_matrix(matrix)
        self.assertEqual(board.get(0, 5), Cell.PLAYER_A)
        self.assertEqual(board.get(1, 5), Cell.PLAYER_B)
        self.assertEqual(board.get(0, 4), Cell.PLAYER_B)
        self.assertEqual(board.to_matrix(), matrix)

        with self.assertRaises(InvalidBoardError):
            BoardState.from_matrix(matrix[:5])

    def test_copy_is_independent(self):
        board = BoardState()
        clone = board.copy()
        clone.drop(3, Cell.PLAYER_A)
        self.assertEqual(board.to_string(), EMPTY_STATE)
        self.assertNotEqual(board, clone)

    def test_opponent(self):
        self.assertEqual(Cell.PLAYER_A.opponent(), Cell.PLAYER_B)
        self.assertEqual(Cell.PLAYER_B.opponent(), Cell.PLAYER_A)
        with self.assertRaises(ValueError):
            Cell.EMPTY.opponent()


if __name__ == '__main__':
    unittest.main()
