from pydantic import BaseModel, ConfigDict, field_validator
from typing import Dict, List, Optional

from connect4.core.board import BoardState, InvalidBoardError

class BoardRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')

    # 42 characters, row-major from the top: '0' empty, '1' player A, '2' player B
    board: str
    ai_player: int = 2

    @field_validator("board")
    @classmethod
    def check_board(cls, value: str) -> str:
        try:
            parsed = BoardState.from_string(value)
        except InvalidBoardError as e:
            raise ValueError(str(e)) from None
        if not parsed.is_gravity_consistent():
            raise ValueError("Pieces must rest on the bottom row or on other pieces")
        return value

    @field_validator("ai_player")
    @classmethod
    def check_ai_player(cls, value: int) -> int:
        if value not in (1, 2):
            raise ValueError("ai_player must be 1 or 2")
        return value

class AnalysisResponse(BaseModel):
    winner: Optional[int] = None
    is_draw: bool
    valid_moves: List[int]
    score: int

class MoveResponse(BaseModel):
    column: int
    reasoning: str
    score: int
    scores: Dict[int, int]
    nodes_explored: int
    board: str
