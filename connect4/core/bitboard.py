import logging
from typing import List, NamedTuple, Optional, Sequence

from .constants import ROWS, COLS, MAX_MOVES, COLUMN_ORDER
from .enums import Player
from .errors import ColumnFullError, ColumnOutOfBoundsError
from .geometry import bit_for
from .win import has_won

logger = logging.getLogger(__name__)


class TypedMove(NamedTuple):
    player: Player
    column: int


class MoveOutcome(NamedTuple):
    player: Player
    column: int
    won: bool


class Bitboard:
    """
    Two occupancy masks (one per player) plus per-column heights.
    Bit index = col * HEIGHT + row, Row 0 = Bottom. Row 6 of every
    column is the sentinel and is never set.
    """

    def __init__(
        self,
        players: Optional[List[int]] = None,
        heights: Optional[List[int]] = None,
        to_move: Player = Player.RED,
        moves_played: int = 0,
    ):
        self.players = players if players is not None else [0, 0]
        self.heights = heights if heights is not None else [0] * COLS
        self.to_move = to_move
        self.moves_played = moves_played

    @classmethod
    def empty(cls, to_move: Player = Player.RED) -> "Bitboard":
        return cls(to_move=to_move)

    @classmethod
    def from_history(cls, moves: Sequence[TypedMove]) -> "Bitboard":
        """
        Replays moves for the player each one declares (turns are NOT
        forced to alternate). Side to move afterwards is the opponent
        of the last mover, or Red for an empty history.
        """
        if not moves:
            return cls.empty(Player.RED)

        board = cls.empty(moves[0].player)
        for move_index, move in enumerate(moves):
            try:
                outcome = board.force_play(move.player, move.column)
            except ColumnFullError:
                raise ColumnFullError(move.column, move_index) from None
            if outcome.won:
                logger.debug("History move %s%d completes four", move.player.symbol, move.column)
        board.to_move = moves[-1].player.opponent
        return board

    def copy(self) -> "Bitboard":
        return Bitboard(list(self.players), list(self.heights), self.to_move, self.moves_played)

    def bits(self, player: Player) -> int:
        return self.players[player.slot]

    def can_play(self, col: int) -> bool:
        """Checks that the column exists and has room left."""
        return 0 <= col < COLS and self.heights[col] < ROWS

    def legal_moves(self) -> List[int]:
        """Non-full columns, center first."""
        return [col for col in COLUMN_ORDER if self.heights[col] < ROWS]

    def is_full(self) -> bool:
        return self.moves_played >= MAX_MOVES

    def check_win(self, player: Player) -> bool:
        return has_won(self.bits(player))

    def force_play(self, player: Player, col: int) -> MoveOutcome:
        """
        Drops a piece for 'player' into 'col' and hands the turn to
        the opponent. Raises on a missing or full column.
        """
        if col < 0 or col >= COLS:
            raise ColumnOutOfBoundsError(col)
        height = self.heights[col]
        if height >= ROWS:
            raise ColumnFullError(col)

        idx = player.slot
        self.players[idx] |= bit_for(col, height)
        self.heights[col] = height + 1
        self.moves_played += 1
        self.to_move = player.opponent
        return MoveOutcome(player, col, has_won(self.players[idx]))

    def play(self, col: int) -> MoveOutcome:
        """Plays 'col' for the side to move."""
        return self.force_play(self.to_move, col)

    def render(self) -> str:
        """ASCII grid, top row first."""
        red, blue = self.players
        lines = []
        for row in range(ROWS - 1, -1, -1):
            cells = []
            for col in range(COLS):
                bit = bit_for(col, row)
                if red & bit:
                    cells.append(Player.RED.symbol)
                elif blue & bit:
                    cells.append(Player.BLUE.symbol)
                else:
                    cells.append(".")
            lines.append("|" + "|".join(cells) + "|")
        lines.append(" " + " ".join(str(c) for c in range(COLS)))
        return "\n".join(lines)

    def __eq__(self, other):
        if not isinstance(other, Bitboard):
            return NotImplemented
        return (
            self.players == other.players
            and self.heights == other.heights
            and self.to_move == other.to_move
            and self.moves_played == other.moves_played
        )

    def __repr__(self):
        return (
            f"Bitboard(players={self.players}, heights={self.heights}, "
            f"to_move={self.to_move!r}, moves_played={self.moves_played})"
        )
