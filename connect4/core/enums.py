from enum import StrEnum


class Player(StrEnum):
    RED = "red"
    BLUE = "blue"

    @property
    def slot(self) -> int:
        """Slot in the per-player occupancy array."""
        return 0 if self is Player.RED else 1

    @property
    def opponent(self) -> "Player":
        return Player.BLUE if self is Player.RED else Player.RED

    @property
    def symbol(self) -> str:
        return "R" if self is Player.RED else "B"
