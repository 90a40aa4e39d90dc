# connect4/core/rules.py
from typing import List, Optional, Tuple

from .constants import ROWS, COLS
from .board import BoardState, Cell

# Directions: Horizontal, Vertical, Diagonal \, Diagonal /
DIRECTIONS = [(1, 0), (0, 1), (1, 1), (1, -1)]


def count_direction(board: BoardState, col: int, row: int, dc: int, dr: int) -> int:
    """Counts consecutive pieces matching (col, row), not including it."""
    owner = board.get(col, row)
    count = 0
    c, r = col + dc, row + dr
    while 0 <= c < COLS and 0 <= r < ROWS and board.get(c, r) == owner:
        count += 1
        c += dc
        r += dr
    return count


def _winning_direction(board: BoardState, col: int, row: int) -> Optional[Tuple[int, int]]:
    if board.get(col, row) == Cell.EMPTY:
        return None
    for dc, dr in DIRECTIONS:
        count = 1
        count += count_direction(board, col, row, dc, dr)
        count += count_direction(board, col, row, -dc, -dr)
        if count >= 4:
            return dc, dr
    return None


def check_win_at(board: BoardState, col: int, row: int) -> bool:
    """Checks for 4-in-a-row through the piece at (col, row)."""
    return _winning_direction(board, col, row) is not None


def _first_winning_cell(board: BoardState) -> Optional[Tuple[int, int]]:
    # Column-major scan so the result is deterministic
    for c in range(COLS):
        for r in range(ROWS):
            if check_win_at(board, c, r):
                return c, r
    return None


def find_winner(board: BoardState) -> Optional[Cell]:
    """Returns the owner of the first winning run found, or None."""
    hit = _first_winning_cell(board)
    if hit is None:
        return None
    return board.get(*hit)


def winning_cells(board: BoardState) -> List[Tuple[int, int]]:
    """(col, row) cells of the first winning run, ordered along its axis."""
    hit = _first_winning_cell(board)
    if hit is None:
        return []
    col, row = hit
    dc, dr = _winning_direction(board, col, row)
    back = count_direction(board, col, row, -dc, -dr)
    length = 1 + back + count_direction(board, col, row, dc, dr)
    start_c, start_r = col - dc * back, row - dr * back
    return [(start_c + dc * i, start_r + dr * i) for i in range(length)]


def is_draw(board: BoardState) -> bool:
    """
    True if every column is full.
    Only meaningful once find_winner() has returned None.
    """
    return board.is_full()
