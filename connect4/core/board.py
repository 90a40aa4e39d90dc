# connect4/core/board.py
from enum import IntEnum
from typing import List, Optional

from .constants import ROWS, COLS, CELL_COUNT


class InvalidBoardError(ValueError):
    """Raised when a serialized board cannot be parsed."""


class Cell(IntEnum):
    EMPTY = 0
    PLAYER_A = 1
    PLAYER_B = 2

    @property
    def symbol(self) -> str:
        return str(self.value)

    def opponent(self) -> "Cell":
        if self == Cell.PLAYER_A:
            return Cell.PLAYER_B
        if self == Cell.PLAYER_B:
            return Cell.PLAYER_A
        raise ValueError("EMPTY has no opponent")


_SYMBOLS = {cell.symbol: cell for cell in Cell}


def index_of(col: int, row: int) -> int:
    return row * COLS + col


class BoardState:
    def __init__(self, cells: Optional[List[Cell]] = None):
        """
        Flat row-major grid of Cell values.
        Row 0 is the TOP of the board, row 5 the BOTTOM.
        """
        if cells is None:
            cells = [Cell.EMPTY] * CELL_COUNT
        elif len(cells) != CELL_COUNT:
            raise InvalidBoardError(f"Expected {CELL_COUNT} cells, got {len(cells)}")
        self.cells: List[Cell] = list(cells)

    # --- Serialization ---

    @classmethod
    def from_string(cls, state: str) -> "BoardState":
        """Parses the 42-character state string ('0' empty, '1' A, '2' B)."""
        if len(state) != CELL_COUNT:
            raise InvalidBoardError(
                f"State string must have {CELL_COUNT} characters, got {len(state)}"
            )
        try:
            cells = [_SYMBOLS[ch] for ch in state]
        except KeyError as e:
            raise InvalidBoardError(f"Unknown cell symbol {e.args[0]!r}") from None
        return cls(cells)

    def to_string(self) -> str:
        return "".join(cell.symbol for cell in self.cells)

    def load(self, state: str) -> bool:
        """
        Replaces the board contents from a state string.
        Malformed input leaves the board untouched and returns False.
        """
        try:
            parsed = BoardState.from_string(state)
        except InvalidBoardError:
            return False
        self.cells = parsed.cells
        return True

    @classmethod
    def from_matrix(cls, matrix: List[List[int]]) -> "BoardState":
        """Converts a 2D matrix (Row 0=Top) of 0/1/2 values."""
        if len(matrix) != ROWS or any(len(row) != COLS for row in matrix):
            raise InvalidBoardError(f"Matrix must be {ROWS}x{COLS}")
        try:
            cells = [Cell(value) for row in matrix for value in row]
        except ValueError as e:
            raise InvalidBoardError(str(e)) from None
        return cls(cells)

    def to_matrix(self) -> List[List[int]]:
        return [
            [int(self.cells[index_of(c, r)]) for c in range(COLS)]
            for r in range(ROWS)
        ]

    # --- Cell access ---

    def get(self, col: int, row: int) -> Cell:
        return self.cells[index_of(col, row)]

    def set(self, col: int, row: int, cell: Cell):
        self.cells[index_of(col, row)] = cell

    def lowest_empty_row(self, col: int) -> Optional[int]:
        """Row where a piece dropped in `col` lands, None if full or out of range."""
        if col < 0 or col >= COLS:
            return None
        for r in range(ROWS - 1, -1, -1):
            if self.cells[index_of(col, r)] == Cell.EMPTY:
                return r
        return None

    def is_column_full(self, col: int) -> bool:
        """Out-of-range columns count as full: nothing can be dropped there."""
        return self.lowest_empty_row(col) is None

    def valid_moves(self) -> List[int]:
        """Returns a list of column indices (0-6) that are not full."""
        return [c for c in range(COLS) if self.cells[c] == Cell.EMPTY]

    def is_full(self) -> bool:
        return all(self.cells[c] != Cell.EMPTY for c in range(COLS))

    def piece_count(self) -> int:
        return sum(1 for cell in self.cells if cell != Cell.EMPTY)

    # --- Mutation (apply / undo) ---

    def drop(self, col: int, cell: Cell) -> Optional[int]:
        """Drops `cell` into `col`. Returns the row it landed on, None if illegal."""
        row = self.lowest_empty_row(col)
        if row is not None:
            self.cells[index_of(col, row)] = cell
        return row

    def undo(self, col: int, row: int):
        """Clears the cell filled by a previous drop."""
        self.cells[index_of(col, row)] = Cell.EMPTY

    def reset(self):
        self.cells = [Cell.EMPTY] * CELL_COUNT

    def copy(self) -> "BoardState":
        return BoardState(self.cells)

    def is_gravity_consistent(self) -> bool:
        """True if every column is a contiguous run of pieces anchored at the bottom."""
        for c in range(COLS):
            seen_empty = False
            for r in range(ROWS - 1, -1, -1):
                if self.cells[index_of(c, r)] == Cell.EMPTY:
                    seen_empty = True
                elif seen_empty:
                    return False
        return True

    def __eq__(self, other):
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self):
        return f"BoardState({self.to_string()!r})"
