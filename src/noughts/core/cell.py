"""Cell - a single write-once square of the grid."""

from __future__ import annotations

from noughts.core.enums import Mark


class Cell:
    """Tri-state value that accepts one mark and keeps it.

    ``write`` is the only mutation used by normal play. ``set_state`` bypasses
    the check and exists for trial moves, which must restore ``Mark.EMPTY``.
    """

    __slots__ = ("_state",)

    def __init__(self, state: Mark = Mark.EMPTY) -> None:
        self._state = state

    @property
    def state(self) -> Mark:
        return self._state

    @property
    def is_empty(self) -> bool:
        return self._state == Mark.EMPTY

    def read(self) -> Mark:
        return self._state

    def write(self, mark: Mark) -> bool:
        """Place *mark* if the cell is empty. Returns True on success."""
        if self._state != Mark.EMPTY or mark == Mark.EMPTY:
            return False
        self._state = mark
        return True

    def set_state(self, mark: Mark) -> None:
        self._state = mark

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self._state == other._state

    def __repr__(self) -> str:
        return f"Cell({self._state.name})"
