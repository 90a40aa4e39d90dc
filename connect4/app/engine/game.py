import logging
from typing import List, Optional, Dict, Any

from connect4.core.constants import ROWS, COLS, EMPTY_STATE, SEARCH_DEPTH
from connect4.core.board import BoardState, Cell
from connect4.core.rules import check_win_at, find_winner, is_draw
from connect4.app.models.enums import GameStatus, PlayerType
from connect4.app.engine.ai import NegamaxAI, NoLegalMoveError

# Logger setup
logger = logging.getLogger(__name__)

PIECE_GLYPHS = {Cell.EMPTY: ".", Cell.PLAYER_A: "X", Cell.PLAYER_B: "O"}


class ConnectFour:
    def __init__(self, ai_player: Optional[Cell] = None, search_depth: int = SEARCH_DEPTH):
        """
        Board uses (row, col) indexing in its matrix view.
        Row 0 is the TOP of the board.
        Row 5 is the BOTTOM of the board.
        Player A (1) always moves first.
        ai_player: which side the engine plays, None for two humans.
        """
        self.board = BoardState()
        self.ai_player = ai_player
        self.search_depth = search_depth
        self.current_turn = Cell.PLAYER_A
        self.winner: Optional[Cell] = None
        self.history: List[Dict[str, Any]] = []

    @property
    def has_ai(self) -> bool:
        return self.ai_player is not None

    def player_type(self, player: Cell) -> PlayerType:
        return PlayerType.AI if player == self.ai_player else PlayerType.HUMAN

    @property
    def is_ai_turn(self) -> bool:
        return self.has_ai and self.current_turn == self.ai_player and not self.is_over()

    @property
    def status(self) -> GameStatus:
        if self.winner is not None:
            return GameStatus.COMPLETED
        if self.is_draw():
            return GameStatus.DRAW
        return GameStatus.IN_PROGRESS

    def get_valid_moves(self) -> List[int]:
        """Returns a list of column indices (0-6) that are not full."""
        return self.board.valid_moves()

    def is_valid_move(self, col: int) -> bool:
        if col < 0 or col >= COLS:
            return False
        return not self.board.is_column_full(col)

    def drop_piece(self, col: int) -> bool:
        """
        Drops a piece into the specified column.
        Returns True if successful, False if invalid or game over.
        """
        if self.is_over() or not self.is_valid_move(col):
            return False

        # Gravity: the piece lands on the lowest empty row
        row = self.board.drop(col, self.current_turn)
        self.history.append({
            "player": int(self.current_turn),
            "column": col
        })
        logger.info("Player %d dropped in column %d (row %d)", self.current_turn, col, row)

        if check_win_at(self.board, col, row):
            self.winner = self.current_turn
            logger.info("Player %d wins", self.winner)
        else:
            self.switch_turn()
            if self.is_draw():
                logger.info("Board full, game drawn")
        return True

    def switch_turn(self):
        self.current_turn = self.current_turn.opponent()

    def is_draw(self) -> bool:
        """Returns True if board is full and no winner."""
        return self.winner is None and is_draw(self.board)

    def is_over(self) -> bool:
        return self.winner is not None or self.is_draw()

    def update_ai(self) -> Optional[int]:
        """
        Lets the engine play its turn. Returns the committed column,
        or None when it is not the engine's turn or no move exists.
        """
        if not self.is_ai_turn:
            return None

        try:
            decision = NegamaxAI(self.ai_player, self.search_depth).get_move(self)
        except NoLegalMoveError:
            return None
        self.drop_piece(decision.column)
        return decision.column

    # --- State strings ---

    @staticmethod
    def initial_state_string() -> str:
        return EMPTY_STATE

    def state_string(self) -> str:
        return self.board.to_string()

    def set_state_string(self, state: str) -> bool:
        """
        Loads a serialized board. Malformed strings are ignored (returns False).
        Turn and winner are recomputed from the pieces; history restarts.
        """
        if not self.board.load(state):
            logger.warning("Ignoring malformed state string of length %d", len(state))
            return False

        self.history = []
        self.winner = find_winner(self.board)
        # A moves first, so equal counts mean it is A's turn
        a_count = self.board.cells.count(Cell.PLAYER_A)
        b_count = self.board.cells.count(Cell.PLAYER_B)
        self.current_turn = Cell.PLAYER_A if a_count <= b_count else Cell.PLAYER_B
        return True

    def reset(self):
        """Clears all pieces and restarts with player A to move."""
        self.board.reset()
        self.current_turn = Cell.PLAYER_A
        self.winner = None
        self.history = []

    # --- Rendering ---

    def get_visual_board(self) -> str:
        """Column indices over one |-separated line per row, top row first."""
        lines = [" " + " ".join(str(c) for c in range(COLS))]
        for row in self.board.to_matrix():
            glyphs = (PIECE_GLYPHS[Cell(value)] for value in row)
            lines.append("|" + "|".join(glyphs) + "|")
        return "\n".join(lines)

    def get_textual_description(self) -> str:
        """One line per column, e.g. 'Column 3: P1, P2' (bottom piece first)."""
        lines = []
        for c in range(COLS):
            stack = []
            row = ROWS - 1
            while row >= 0 and self.board.get(c, row) != Cell.EMPTY:
                stack.append(f"P{int(self.board.get(c, row))}")
                row -= 1
            lines.append(f"Column {c}: {', '.join(stack) or 'Empty'}")
        return "\n".join(lines)
