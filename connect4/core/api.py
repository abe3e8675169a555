"""
Engine entry point.

Stateless: each call decodes the history, replays it onto a fresh
board and searches for the side to move.
"""

import logging

from .constants import MIN_DEPTH, MAX_DEPTH
from .errors import DepthOutOfRangeError
from .history import parse_history
from .bitboard import Bitboard
from .solver import Solver
from .schemas import MoveRequest, MoveResponse

logger = logging.getLogger(__name__)


def best_move(request: MoveRequest) -> MoveResponse:
    if not (MIN_DEPTH <= request.level <= MAX_DEPTH):
        raise DepthOutOfRangeError(request.level)

    moves = parse_history(request.position)
    board = Bitboard.from_history(moves)
    column = Solver().choose_move(board, request.level)

    logger.info("position=%r level=%d -> column %d", request.position, request.level, column)
    return MoveResponse(column=column)


def compute_best_move(history: str, depth: int) -> int:
    return best_move(MoveRequest(position=history, level=depth)).column
