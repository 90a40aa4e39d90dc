import logging

from fastapi import FastAPI, HTTPException

from connect4.core.board import BoardState, Cell
from connect4.core.evaluator import evaluate_position
from connect4.core.rules import find_winner, is_draw
from connect4.app.core.settings import settings, configure_logging
from connect4.app.engine.ai import NegamaxAI, NoLegalMoveError
from connect4.app.schemas.game_schema import BoardRequest, AnalysisResponse, MoveResponse

configure_logging(settings)
logger = logging.getLogger(__name__)

app = FastAPI(title="Connect Four Negamax Engine")


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/analyze", response_model=AnalysisResponse)
async def analyze(request: BoardRequest):
    """Winner, draw flag and heuristic score of a board for `ai_player`."""
    board = BoardState.from_string(request.board)
    winner = find_winner(board)
    return AnalysisResponse(
        winner=int(winner) if winner is not None else None,
        is_draw=winner is None and is_draw(board),
        valid_moves=board.valid_moves(),
        score=evaluate_position(board, Cell(request.ai_player)),
    )


@app.post("/move", response_model=MoveResponse)
def move(request: BoardRequest):
    """
    Picks and commits the engine's move. Runs in the threadpool (plain def)
    since the search is CPU-bound.
    """
    board = BoardState.from_string(request.board)
    if find_winner(board) is not None:
        raise HTTPException(status_code=409, detail="Game is already won")

    ai = NegamaxAI(Cell(request.ai_player), settings.search_depth)
    try:
        decision = ai.get_move_for_board(board)
    except NoLegalMoveError:
        raise HTTPException(status_code=409, detail="No legal move: board is full (draw)")

    board.drop(decision.column, ai.player_id)
    return MoveResponse(
        column=decision.column,
        reasoning=decision.reasoning,
        score=decision.score,
        scores=decision.scores,
        nodes_explored=decision.nodes_explored,
        board=board.to_string(),
    )
