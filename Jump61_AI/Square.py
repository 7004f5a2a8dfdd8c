"""Cell values: the owning side and the number of spots on a square."""

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    RED = "r"
    BLUE = "b"
    NEUTRAL = "-"

    @property
    def symbol(self):
        """Single-character marker used in board dumps."""
        return self.value

    def opposite(self):
        if self is Side.RED:
            return Side.BLUE
        if self is Side.BLUE:
            return Side.RED
        return Side.NEUTRAL

    @classmethod
    def from_symbol(cls, symbol):
        try:
            return cls(symbol)
        except ValueError as exc:
            raise ValueError(f"unknown side marker {symbol!r}") from exc

    def __str__(self):
        return self.name.capitalize()


@dataclass(frozen=True)
class Square:
    side: Side = Side.NEUTRAL
    spots: int = 0

    def __post_init__(self):
        if self.spots < 0:
            raise ValueError("spots must be nonnegative")
        if (self.side is Side.NEUTRAL) != (self.spots == 0):
            raise ValueError(f"{self.side} square cannot hold {self.spots} spots")

    @classmethod
    def empty(cls):
        return _EMPTY

    @classmethod
    def of(cls, side, spots):
        if spots == 0 and side is Side.NEUTRAL:
            return _EMPTY
        return cls(side, spots)


_EMPTY = Square()
