# connect4/core/constants.py

# --- Board Dimensions ---
ROWS = 6
COLS = 7
# Height includes a sentinel row to prevent bit-shift overflows
HEIGHT = ROWS + 1
MAX_MOVES = ROWS * COLS
CONNECT = 4
CENTER_COL = COLS // 2

# --- Scoring System ---
# Terminal wins dwarf anything the heuristic can add up to.
WIN_SCORE = 1_000_000
# Search window bound, strictly outside every reachable score
INFINITY = 1 << 30

# Heuristic weights
CENTER_WEIGHT = 3
# Pieces in an unblocked line of four -> bonus
LINE_WEIGHTS = {3: 50, 2: 10, 1: 2}

# --- Search Limits ---
MIN_DEPTH = 1
MAX_DEPTH = 15

# --- Optimization ---
# Search center columns first to maximize Alpha-Beta pruning efficiency
COLUMN_ORDER = [3, 2, 4, 1, 5, 0, 6]
