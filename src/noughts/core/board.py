"""Board - mark placement on the 3x3 grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from noughts.core.cell import Cell
from noughts.core.enums import Mark, Outcome
from noughts.core.types import BOARD_SIZE, WIN_LINES, Coord, coord_of, in_bounds, index_of

_CELL_COUNT = BOARD_SIZE * BOARD_SIZE

_SYMBOLS: dict[Mark, str] = {
    Mark.EMPTY: ".",
    Mark.FIRST: "O",
    Mark.SECOND: "X",
}
_FROM_SYMBOL: dict[str, Mark] = {v: k for k, v in _SYMBOLS.items()}


class Board:
    """Mutable 3x3 grid of write-once cells, stored row-major."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Cell] = [Cell() for _ in range(_CELL_COUNT)]

    # -- Element access -----------------------------------------------------

    def cell(self, x: int, y: int) -> Cell:
        if not in_bounds(x, y):
            raise IndexError(f"Coordinate out of range: ({x}, {y})")
        return self._cells[index_of(x, y)]

    def mark_at(self, x: int, y: int) -> Mark:
        """Read-only accessor used by renderers."""
        return self.cell(x, y).state

    def __iter__(self) -> Iterator[tuple[Coord, Mark]]:
        for index, cell in enumerate(self._cells):
            yield coord_of(index), cell.state

    # -- Query helpers ------------------------------------------------------

    def empty_cells(self) -> list[Coord]:
        """Empty coordinates in row-major order."""
        return [coord_of(i) for i, cell in enumerate(self._cells) if cell.is_empty]

    def has_empty(self) -> bool:
        return any(cell.is_empty for cell in self._cells)

    def is_full(self) -> bool:
        return not self.has_empty()

    def mark_count(self, mark: Mark | None = None) -> int:
        """Number of occupied cells, or of cells holding *mark*."""
        if mark is None:
            return sum(1 for cell in self._cells if not cell.is_empty)
        return sum(1 for cell in self._cells if cell.state == mark)

    def _line_owner(self, line: tuple[Coord, ...]) -> Mark:
        cells = self._cells
        first = cells[index_of(*line[0])].state
        if first == Mark.EMPTY:
            return Mark.EMPTY
        for x, y in line[1:]:
            if cells[index_of(x, y)].state != first:
                return Mark.EMPTY
        return first

    def winning_line(self) -> tuple[Coord, ...] | None:
        """The first complete line found, if any."""
        for line in WIN_LINES:
            if self._line_owner(line) != Mark.EMPTY:
                return line
        return None

    def outcome(self) -> Outcome:
        """Derive the game outcome from the current contents."""
        for line in WIN_LINES:
            owner = self._line_owner(line)
            if owner != Mark.EMPTY:
                return Outcome.win_for(owner)
        if self.has_empty():
            return Outcome.UNFINISHED
        return Outcome.DRAW

    # -- Moves --------------------------------------------------------------

    def apply_move(self, x: int, y: int, mark: Mark) -> bool:
        """Place *mark* at ``(x, y)``. False if off-board or occupied."""
        if not in_bounds(x, y):
            return False
        return self._cells[index_of(x, y)].write(mark)

    def apply_first_player_move(self, x: int, y: int) -> bool:
        return self.apply_move(x, y, Mark.FIRST)

    def set_mark(self, x: int, y: int, mark: Mark) -> None:
        """Unchecked placement for trial moves. Pair with :meth:`clear_mark`."""
        self._cells[index_of(x, y)].set_state(mark)

    def clear_mark(self, x: int, y: int) -> None:
        self._cells[index_of(x, y)].set_state(Mark.EMPTY)

    # -- Copying / factory --------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = [Cell(cell.state) for cell in self._cells]
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build a board from three strings, e.g. ``["O.X", "...", "..."]``.

        ``O`` is the first player, ``X`` the second and ``.`` an empty cell.
        """
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} cells")
        b = cls()
        for y, row in enumerate(rows):
            for x, symbol in enumerate(row.upper()):
                mark = _FROM_SYMBOL.get(symbol)
                if mark is None:
                    raise ValueError(f"Unknown cell symbol: {symbol!r}")
                b.set_mark(x, y, mark)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(BOARD_SIZE):
            rows.append(
                "".join(_SYMBOLS[self._cells[index_of(x, y)].state] for x in range(BOARD_SIZE))
            )
        return "\n".join(rows)
