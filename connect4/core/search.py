# connect4/core/search.py
from .constants import SEARCH_DEPTH, SEARCH_WINDOW, WIN_SCORE, COLUMN_ORDER
from .board import BoardState, Cell
from .evaluator import PositionEvaluator


class NegamaxSearch:
    def __init__(self, ai_player: Cell, max_depth: int = SEARCH_DEPTH):
        """
        Fixed-depth negamax with alpha-beta pruning.

        Scores are always computed from `ai_player`'s point of view and
        flipped by `sign`: +1 when the AI is to move at a node, -1 when
        the opponent is.
        """
        self.ai_player = ai_player
        self.opponent = ai_player.opponent()
        self.max_depth = max_depth
        self.evaluator = PositionEvaluator(ai_player)
        self.nodes = 0

    def negamax(self, board: BoardState, depth: int, alpha: int, beta: int, sign: int) -> int:
        self.nodes += 1
        score = self.evaluator.evaluate(board)

        # 1. A completed window is on the board (evaluator sentinel)
        if score >= WIN_SCORE or score <= -WIN_SCORE:
            return sign * score

        # 2. Check Draw
        if board.is_full():
            return 0

        # 3. Heuristic leaf
        if depth >= self.max_depth:
            return sign * score

        # 4. Recursive Search
        piece = self.ai_player if sign == 1 else self.opponent
        best_val = -SEARCH_WINDOW
        for col in COLUMN_ORDER:  # 3, 2, 4, 1...
            row = board.drop(col, piece)
            if row is None:
                continue
            val = -self.negamax(board, depth + 1, -beta, -alpha, -sign)
            board.undo(col, row)

            best_val = max(best_val, val)
            alpha = max(alpha, best_val)
            if alpha >= beta:
                break  # Beta Cutoff

        return best_val
