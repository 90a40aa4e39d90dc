# connect4/core/evaluator.py
from typing import List, Tuple

from .constants import (
    ROWS, COLS, CENTER_COL, CENTER_BONUS,
    WIN_SCORE, THREE_SCORE, TWO_SCORE, OPP_THREE_SCORE, OPP_TWO_SCORE,
)
from .board import BoardState, Cell, index_of


def _build_windows() -> List[Tuple[int, int, int, int]]:
    """Flat cell indices of every 4-cell window that fits on the board."""
    windows = []
    # Horizontal
    for r in range(ROWS):
        for c in range(COLS - 3):
            windows.append(tuple(index_of(c + i, r) for i in range(4)))
    # Vertical
    for c in range(COLS):
        for r in range(ROWS - 3):
            windows.append(tuple(index_of(c, r + i) for i in range(4)))
    # Diagonal \ (down-right)
    for r in range(ROWS - 3):
        for c in range(COLS - 3):
            windows.append(tuple(index_of(c + i, r + i) for i in range(4)))
    # Diagonal / (up-right)
    for r in range(3, ROWS):
        for c in range(COLS - 3):
            windows.append(tuple(index_of(c + i, r - i) for i in range(4)))
    return windows


WINDOWS = _build_windows()
CENTER_CELLS = [index_of(CENTER_COL, r) for r in range(ROWS)]


def score_window(mine: int, theirs: int) -> int:
    """
    Scores one window from its piece counts (empties = 4 - mine - theirs).
    Mixed windows are dead. Opponent threes weigh -100 against our +50
    so that blocking wins over attacking at equal depth.
    """
    if mine and theirs:
        return 0
    if mine == 4:
        return WIN_SCORE
    if mine == 3:
        return THREE_SCORE
    if mine == 2:
        return TWO_SCORE
    if theirs == 4:
        return -WIN_SCORE
    if theirs == 3:
        return -OPP_THREE_SCORE
    if theirs == 2:
        return -OPP_TWO_SCORE
    return 0


class PositionEvaluator:
    def __init__(self, favorable: Cell):
        self.favorable = favorable
        self.opponent = favorable.opponent()

    def evaluate(self, board: BoardState) -> int:
        """
        Signed favorability of `board` for the favorable side.
        A completed window contributes +-WIN_SCORE, which search reads as terminal.
        """
        cells = board.cells
        favorable = self.favorable
        opponent = self.opponent
        score = 0

        for idx in CENTER_CELLS:
            if cells[idx] == favorable:
                score += CENTER_BONUS
            elif cells[idx] == opponent:
                score -= CENTER_BONUS

        for window in WINDOWS:
            mine = theirs = 0
            for idx in window:
                value = cells[idx]
                if value == favorable:
                    mine += 1
                elif value == opponent:
                    theirs += 1
            score += score_window(mine, theirs)

        return score


def evaluate_position(board: BoardState, favorable: Cell) -> int:
    return PositionEvaluator(favorable).evaluate(board)
