import logging

from .constants import WIN_SCORE, INFINITY
from .enums import Player
from .errors import NoMovesError
from .evaluator import evaluate
from .bitboard import Bitboard

logger = logging.getLogger(__name__)


class Solver:
    """
    Depth-limited negamax with alpha-beta pruning.
    Every branch works on its own copy of the board; the only state kept
    on the instance is the node counter of the last search.
    """

    def __init__(self):
        self.nodes = 0

    def choose_move(self, board: Bitboard, depth: int) -> int:
        """
        Root Entry Point.
        Returns the best column for board.to_move. Ties keep the earliest
        column in center-out order (strict '>' comparison).
        """
        self.nodes = 0
        player = board.to_move
        alpha = -INFINITY
        beta = INFINITY
        best_col = None

        for col in board.legal_moves():
            child = board.copy()
            outcome = child.play(col)

            if outcome.won:
                score = WIN_SCORE - 1
            elif child.is_full():
                score = 0  # Draw
            else:
                score = -self.negamax(child, max(depth - 1, 0), -beta, -alpha, player.opponent)

            if score > alpha:
                alpha = score
                best_col = col

        if best_col is None:
            raise NoMovesError()

        logger.debug(
            "Search depth=%d chose column %d (score=%d, nodes=%d)",
            depth, best_col, alpha, self.nodes,
        )
        return best_col

    def negamax(self, board: Bitboard, depth: int, alpha: int, beta: int, player: Player) -> int:
        self.nodes += 1

        # 1. Leaf: static evaluation from the mover's perspective
        if depth == 0 or board.is_full():
            return evaluate(board, player)

        best = -INFINITY

        # 2. Recursive Search
        for col in board.legal_moves():  # 3, 2, 4, 1...
            child = board.copy()
            outcome = child.play(col)

            if outcome.won:
                # Remaining depth rewards the faster win
                score = WIN_SCORE - 1 + depth
            elif child.is_full():
                score = 0
            else:
                score = -self.negamax(child, depth - 1, -beta, -alpha, player.opponent)

            if score > best:
                best = score
            if score > alpha:
                alpha = score
            if alpha >= beta:
                break  # Beta Cutoff

        return best
