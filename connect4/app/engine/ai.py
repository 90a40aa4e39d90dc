import logging
import time
from typing import Dict

from pydantic import BaseModel, Field

from connect4.core.board import BoardState, Cell
from connect4.core.constants import SEARCH_DEPTH, WIN_SCORE
from connect4.core.selector import MoveSelector

logger = logging.getLogger(__name__)


class NoLegalMoveError(Exception):
    """The engine was asked to move on a full board."""


# --- Structured Output ---
class MoveDecision(BaseModel):
    column: int = Field(description="Column index (0-6).")
    reasoning: str = Field(description="Short summary of why the column was chosen.")
    score: int = Field(description="Search value of the column from the engine's side.")
    scores: Dict[int, int] = Field(default_factory=dict, description="Value of every legal column.")
    nodes_explored: int = 0
    duration: float = 0.0


def describe_score(score: int) -> str:
    if score >= WIN_SCORE:
        return "forced win found"
    if score <= -WIN_SCORE:
        return "every line loses, picking the longest defence"
    if score > 0:
        return "heuristic edge"
    if score < 0:
        return "heuristic deficit"
    return "balanced position"


class NegamaxAI:
    def __init__(self, player_id: Cell, max_depth: int = SEARCH_DEPTH):
        self.player_id = Cell(player_id)
        self.opponent_id = self.player_id.opponent()
        self.selector = MoveSelector(self.player_id, max_depth)

    def get_move(self, game_engine) -> MoveDecision:
        return self.get_move_for_board(game_engine.board)

    def get_move_for_board(self, board: BoardState) -> MoveDecision:
        start = time.perf_counter()
        result = self.selector.solve(board)
        duration = time.perf_counter() - start

        if result["best_move"] is None:
            raise NoLegalMoveError("No legal move: every column is full")

        decision = MoveDecision(
            column=result["best_move"],
            reasoning=(
                f"Column {result['best_move']} scores {result['best_score']} "
                f"({describe_score(result['best_score'])})"
            ),
            score=result["best_score"],
            scores=result["scores"],
            nodes_explored=result["nodes_explored"],
            duration=duration,
        )
        logger.info(
            "Player %d chose column %d (score %d, %d nodes, %.2fs)",
            self.player_id, decision.column, decision.score, decision.nodes_explored, duration,
        )
        return decision
