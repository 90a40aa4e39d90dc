# connect4/core/constants.py

# --- Board Dimensions ---
ROWS = 6
COLS = 7
CELL_COUNT = ROWS * COLS
CENTER_COL = COLS // 2

# Serialized empty board: one '0' per cell, row-major, row 0 = top
EMPTY_STATE = "0" * CELL_COUNT

# --- Search ---
# Plies explored below the root move
SEARCH_DEPTH = 6
# Root alpha/beta bound, also the starting value of bestVal
SEARCH_WINDOW = 10000

# Search center columns first to maximize Alpha-Beta pruning efficiency
COLUMN_ORDER = [3, 2, 4, 1, 5, 0, 6]

# --- Scoring System ---
# WIN_SCORE doubles as the terminal sentinel inside search:
# |score| >= WIN_SCORE means a real 4-in-a-row is on the board.
WIN_SCORE = 1000
THREE_SCORE = 50
TWO_SCORE = 10

# Opponent threats weigh more than our own so the search prefers blocking
OPP_THREE_SCORE = 100
OPP_TWO_SCORE = 10

CENTER_BONUS = 6
