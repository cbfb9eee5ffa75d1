"""Coordinate type alias and helpers.

Board layout (row-major):
    (0, 0) (1, 0) (2, 0)      a
    (0, 1) (1, 1) (2, 1)      b
    (0, 2) (1, 2) (2, 2)      c
      1      2      3

Coordinates are ``(x, y)`` with x the column and y the row.
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]

BOARD_SIZE = 3

_COLUMN_DIGITS = "123"
_ROW_LETTERS = "abc"


def in_bounds(x: int, y: int) -> bool:
    """Whether ``(x, y)`` lies on the board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def index_of(x: int, y: int) -> int:
    """Row-major index 0–8."""
    return y * BOARD_SIZE + x


def coord_of(index: int) -> Coord:
    """Inverse of :func:`index_of`."""
    return index % BOARD_SIZE, index // BOARD_SIZE


def coord_name(coord: Coord) -> str:
    """Human-readable name, e.g. (0, 0) → '1a', (2, 1) → '3b'."""
    x, y = coord
    return _COLUMN_DIGITS[x] + _ROW_LETTERS[y]


def parse_coord(text: str) -> Coord:
    """Parse console input such as ``'1 a'``, ``'1a'`` or ``'a1'``.

    The digit selects the column (1–3), the letter selects the row (a–c).
    """
    chars = [c for c in text.strip().lower() if not c.isspace()]
    if len(chars) != 2:
        raise ValueError(f"Invalid position: {text!r}")
    first, second = chars
    if first in _ROW_LETTERS and second in _COLUMN_DIGITS:
        first, second = second, first
    if first not in _COLUMN_DIGITS or second not in _ROW_LETTERS:
        raise ValueError(f"Invalid position: {text!r}")
    return _COLUMN_DIGITS.index(first), _ROW_LETTERS.index(second)


def _build_lines() -> tuple[tuple[Coord, ...], ...]:
    lines: list[tuple[Coord, ...]] = []
    for y in range(BOARD_SIZE):
        lines.append(tuple((x, y) for x in range(BOARD_SIZE)))
    for x in range(BOARD_SIZE):
        lines.append(tuple((x, y) for y in range(BOARD_SIZE)))
    lines.append(tuple((i, i) for i in range(BOARD_SIZE)))
    lines.append(tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)))
    return tuple(lines)


# Rows, columns, then both diagonals.
WIN_LINES: tuple[tuple[Coord, ...], ...] = _build_lines()
