"""Tests for coordinate helpers."""

import pytest

from noughts.core.enums import Mark, Outcome
from noughts.core.types import (
    WIN_LINES,
    coord_name,
    coord_of,
    in_bounds,
    index_of,
    parse_coord,
)


class TestCoordinates:
    def test_index_round_trip(self) -> None:
        for index in range(9):
            assert index_of(*coord_of(index)) == index

    def test_row_major(self) -> None:
        assert index_of(1, 0) == 1
        assert index_of(0, 1) == 3

    @pytest.mark.parametrize(
        "x, y, expected",
        [(0, 0, True), (2, 2, True), (3, 0, False), (0, -1, False), (-1, 3, False)],
    )
    def test_in_bounds(self, x: int, y: int, expected: bool) -> None:
        assert in_bounds(x, y) is expected

    def test_coord_name(self) -> None:
        assert coord_name((0, 0)) == "1a"
        assert coord_name((2, 1)) == "3b"


class TestParseCoord:
    @pytest.mark.parametrize("text", ["1 a", "1a", "a1", "a 1", " 1  A ", "A1"])
    def test_accepts_both_orders(self, text: str) -> None:
        assert parse_coord(text) == (0, 0)

    def test_digit_is_column_letter_is_row(self) -> None:
        assert parse_coord("3 b") == (2, 1)
        assert parse_coord("2 c") == (1, 2)

    @pytest.mark.parametrize("text", ["", "1", "4 a", "1 d", "11", "ab", "1 a b", "x y"])
    def test_rejects_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_coord(text)


class TestLinesAndEnums:
    def test_eight_lines_of_three(self) -> None:
        assert len(WIN_LINES) == 8
        assert all(len(line) == 3 for line in WIN_LINES)
        assert len(set(WIN_LINES)) == 8

    def test_diagonals(self) -> None:
        assert ((0, 0), (1, 1), (2, 2)) in WIN_LINES
        assert ((0, 2), (1, 1), (2, 0)) in WIN_LINES

    def test_outcome_win_for(self) -> None:
        assert Outcome.win_for(Mark.FIRST) == Outcome.FIRST_WINS
        assert Outcome.win_for(Mark.SECOND) == Outcome.SECOND_WINS
        with pytest.raises(ValueError):
            Outcome.win_for(Mark.EMPTY)

    def test_mark_opposite(self) -> None:
        assert Mark.FIRST.opposite == Mark.SECOND
        assert Mark.SECOND.opposite == Mark.FIRST
        assert Mark.EMPTY.opposite == Mark.EMPTY

    def test_terminal(self) -> None:
        assert not Outcome.UNFINISHED.is_terminal
        assert Outcome.DRAW.is_terminal
