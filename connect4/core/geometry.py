from functools import lru_cache
from typing import Tuple

from .constants import ROWS, COLS, HEIGHT, CONNECT, CENTER_COL


def bit_for(col: int, row: int) -> int:
    """Single-bit mask for a cell. Row 0 is the BOTTOM of the column."""
    return 1 << (col * HEIGHT + row)


def _line(col: int, row: int, d_col: int, d_row: int) -> int:
    mask = 0
    for offset in range(CONNECT):
        mask |= bit_for(col + d_col * offset, row + d_row * offset)
    return mask


@lru_cache(maxsize=1)
def center_mask() -> int:
    mask = 0
    for row in range(ROWS):
        mask |= bit_for(CENTER_COL, row)
    return mask


@lru_cache(maxsize=1)
def win_masks() -> Tuple[int, ...]:
    """
    Every line of four on the board as a bitmask.
    Built on first use, then shared read-only (69 masks on 7x6).
    """
    masks = []
    # Horizontal
    for row in range(ROWS):
        for col in range(COLS - CONNECT + 1):
            masks.append(_line(col, row, 1, 0))
    # Vertical
    for col in range(COLS):
        for row in range(ROWS - CONNECT + 1):
            masks.append(_line(col, row, 0, 1))
    # Diagonal /
    for col in range(COLS - CONNECT + 1):
        for row in range(ROWS - CONNECT + 1):
            masks.append(_line(col, row, 1, 1))
    # Diagonal \
    for col in range(COLS - CONNECT + 1):
        for row in range(CONNECT - 1, ROWS):
            masks.append(_line(col, row, 1, -1))
    return tuple(masks)
