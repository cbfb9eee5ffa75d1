"""Core enumerations for the game domain."""

from __future__ import annotations

from enum import IntEnum


class Mark(IntEnum):
    """Content of a single cell."""

    EMPTY = 0
    FIRST = 1
    SECOND = 2

    @property
    def opposite(self) -> Mark:
        if self == Mark.EMPTY:
            return Mark.EMPTY
        return Mark(3 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class Outcome(IntEnum):
    """State of a game derived from the board.

    Winning values match the value of the winning ``Mark``.
    """

    UNFINISHED = 0
    FIRST_WINS = 1
    SECOND_WINS = 2
    DRAW = 3

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.UNFINISHED

    @classmethod
    def win_for(cls, mark: Mark) -> Outcome:
        """Outcome in which *mark* has completed a line."""
        if mark == Mark.EMPTY:
            raise ValueError("Empty cells cannot win")
        return cls(int(mark))
