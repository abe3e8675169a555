from .constants import WIN_SCORE, CENTER_WEIGHT, LINE_WEIGHTS
from .enums import Player
from .geometry import center_mask, win_masks
from .win import has_won
from .bitboard import Bitboard


def evaluate(board: Bitboard, player: Player) -> int:
    """
    Static score of 'board' from 'player's point of view.
    Terminal positions return +/- WIN_SCORE; anything else is
    center control plus a bonus per unblocked line of four.
    """
    mine = board.bits(player)
    theirs = board.bits(player.opponent)
    if has_won(mine):
        return WIN_SCORE
    if has_won(theirs):
        return -WIN_SCORE

    center = center_mask()
    score = CENTER_WEIGHT * (mine & center).bit_count()
    score -= CENTER_WEIGHT * (theirs & center).bit_count()

    for mask in win_masks():
        mine_count = (mine & mask).bit_count()
        theirs_count = (theirs & mask).bit_count()
        if mine_count and theirs_count:
            continue  # blocked
        if mine_count:
            score += LINE_WEIGHTS.get(mine_count, 0)
        elif theirs_count:
            score -= LINE_WEIGHTS.get(theirs_count, 0)
    return score
