"""
Move history codec.

A history is a run of two-character tokens, e.g. "B3R3B2R4":
player tag (R/B, any case) followed by a single column digit 0-6.
Only syntax is checked here; full or missing columns surface on replay.
"""

from typing import Iterable, List

from .constants import COLS
from .enums import Player
from .errors import ParseMoveError
from .bitboard import TypedMove

PLAYER_TAGS = {
    "R": Player.RED,
    "B": Player.BLUE,
}


def parse_history(history: str) -> List[TypedMove]:
    if not history.strip():
        return []

    moves = []
    idx = 0
    while idx < len(history):
        tag = history[idx]
        player = PLAYER_TAGS.get(tag.upper())
        if player is None:
            raise ParseMoveError(idx, f"expected R or B, found {tag}")

        idx += 1
        if idx >= len(history):
            raise ParseMoveError(idx, "missing column number")

        digit = history[idx]
        # str.isdigit() accepts non-ASCII digits
        if not ("0" <= digit <= "9"):
            raise ParseMoveError(idx, f"expected column digit, found {digit}")
        column = int(digit)
        if column >= COLS:
            raise ParseMoveError(idx, f"column must be 0-{COLS - 1}")

        moves.append(TypedMove(player, column))
        idx += 1
    return moves


def format_history(moves: Iterable[TypedMove]) -> str:
    """Inverse of parse_history, in upper-case form."""
    return "".join(f"{move.player.symbol}{move.column}" for move in moves)
