from .constants import HEIGHT


def has_won(p: int) -> bool:
    """
    Checks if the occupancy mask 'p' holds 4 connected.
    Each direction is two shift/AND pairs; the sentinel row keeps
    runs from wrapping into the next column.
    """
    # Vertical (Shift 1)
    m = p & (p >> 1)
    if m & (m >> 2): return True
    # Horizontal (Shift 7)
    m = p & (p >> HEIGHT)
    if m & (m >> (2 * HEIGHT)): return True
    # Diagonal \ (Shift 6)
    m = p & (p >> (HEIGHT - 1))
    if m & (m >> (2 * (HEIGHT - 1))): return True
    # Diagonal / (Shift 8)
    m = p & (p >> (HEIGHT + 1))
    if m & (m >> (2 * (HEIGHT + 1))): return True

    return False
