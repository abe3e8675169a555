"""
Error taxonomy for the move engine.

Every failure is raised as a GameError subclass and propagates unchanged
up to the caller; nothing in the engine retries or recovers.
"""

from typing import Optional

from .constants import MIN_DEPTH, MAX_DEPTH


class GameError(ValueError):
    """Base class for every error the engine raises."""


class ParseMoveError(GameError):
    def __init__(self, position: int, reason: str):
        self.position = position
        self.reason = reason
        super().__init__(f"invalid move string at position {position}: {reason}")


class ColumnFullError(GameError):
    def __init__(self, column: int, move_index: Optional[int] = None):
        self.column = column
        # Index of the offending move within a replayed history
        self.move_index = move_index
        super().__init__(f"column {column} is full")


class ColumnOutOfBoundsError(GameError):
    def __init__(self, column: int):
        self.column = column
        super().__init__(f"column {column} is out of bounds")


class NoMovesError(GameError):
    def __init__(self):
        super().__init__("no legal moves remain")


class DepthOutOfRangeError(GameError):
    def __init__(self, depth: int):
        self.depth = depth
        super().__init__(f"depth {depth} is out of range ({MIN_DEPTH}-{MAX_DEPTH})")
