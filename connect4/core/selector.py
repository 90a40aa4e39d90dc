# connect4/core/selector.py
import logging
from typing import Optional

from .constants import SEARCH_DEPTH, SEARCH_WINDOW, COLUMN_ORDER
from .board import BoardState, Cell
from .search import NegamaxSearch

logger = logging.getLogger(__name__)


class MoveSelector:
    def __init__(self, ai_player: Cell, max_depth: int = SEARCH_DEPTH):
        self.ai_player = ai_player
        self.search = NegamaxSearch(ai_player, max_depth)

    def solve(self, board: BoardState) -> dict:
        """
        Root Entry Point.
        Scores every legal column for the AI. The board is restored on return.
        """
        self.search.nodes = 0

        move_scores = {}
        best_score = None
        best_move = None

        for col in COLUMN_ORDER:
            row = board.drop(col, self.ai_player)
            if row is None:
                continue
            try:
                # Full window for every column: we want each column's exact value.
                # sign=-1 because the opponent replies next.
                score = -self.search.negamax(board, 0, -SEARCH_WINDOW, SEARCH_WINDOW, -1)
            finally:
                board.undo(col, row)

            move_scores[col] = score
            # Strictly greater: ties keep the earlier, more central column
            if best_move is None or score > best_score:
                best_score = score
                best_move = col

        logger.debug(
            "Solved for %s: best=%s score=%s scores=%s nodes=%d",
            self.ai_player.name, best_move, best_score, move_scores, self.search.nodes,
        )

        return {
            "best_move": best_move,
            "best_score": best_score,
            "scores": move_scores,
            "nodes_explored": self.search.nodes,
        }

    def select(self, board: BoardState) -> Optional[int]:
        """Best column for the AI, or None if the board is full."""
        return self.solve(board)["best_move"]
