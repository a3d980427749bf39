"""Player sides and the immutable per-square cell record."""

import enum
from typing import NamedTuple


class Side(enum.IntEnum):
    # Sign doubles as the evaluator's sense: Red maximizes, Blue minimizes.
    NEUTRAL = 0
    RED = 1
    BLUE = -1

    def opponent(self) -> "Side":
        if self is Side.NEUTRAL:
            return Side.NEUTRAL
        return Side.BLUE if self is Side.RED else Side.RED

    @property
    def label(self) -> str:
        return {Side.RED: "Red", Side.BLUE: "Blue", Side.NEUTRAL: "Neutral"}[self]

    @classmethod
    def parse(cls, text: str) -> "Side":
        """Map 'red'/'blue' (any case) to a player side."""
        key = text.strip().lower()
        if key == "red":
            return cls.RED
        if key == "blue":
            return cls.BLUE
        raise ValueError(f"unknown side: {text!r}")


_SIDE_CHARS = {Side.RED: "r", Side.BLUE: "b", Side.NEUTRAL: "-"}


class Cell(NamedTuple):
    side: Side
    spots: int

    def __str__(self):
        return f"{self.spots}{_SIDE_CHARS[self.side]}"


EMPTY_CELL = Cell(Side.NEUTRAL, 1)
