"""Tests for Board."""

import itertools

import pytest

from noughts.core.board import Board
from noughts.core.enums import Mark, Outcome


class TestBoardMoves:
    def test_new_board_is_empty(self) -> None:
        board = Board()
        assert board.mark_count() == 0
        assert len(board.empty_cells()) == 9

    def test_first_player_move(self) -> None:
        board = Board()
        assert board.apply_first_player_move(2, 1)
        assert board.mark_at(2, 1) == Mark.FIRST
        assert board.mark_count() == 1

    def test_occupied_cell_rejected(self) -> None:
        board = Board()
        assert board.apply_move(1, 1, Mark.SECOND)
        assert not board.apply_first_player_move(1, 1)
        assert board.mark_at(1, 1) == Mark.SECOND

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
    def test_out_of_range_rejected(self, x: int, y: int) -> None:
        board = Board()
        assert not board.apply_first_player_move(x, y)
        assert board == Board()

    def test_x_is_column_y_is_row(self) -> None:
        board = Board()
        board.apply_first_player_move(2, 0)
        assert repr(board) == "..O\n...\n..."

    def test_mark_at_out_of_range_raises(self) -> None:
        with pytest.raises(IndexError):
            Board().mark_at(3, 0)

    def test_empty_cells_row_major(self) -> None:
        board = Board.from_rows(["O.X", "X..", "..."])
        assert board.empty_cells()[:3] == [(1, 0), (1, 1), (2, 1)]

    def test_trial_mark_and_clear(self) -> None:
        board = Board()
        board.set_mark(0, 0, Mark.SECOND)
        assert board.mark_at(0, 0) == Mark.SECOND
        board.clear_mark(0, 0)
        assert board == Board()

    def test_iteration_yields_all_cells(self) -> None:
        board = Board.from_rows(["O..", "...", "..X"])
        cells = dict(board)
        assert len(cells) == 9
        assert cells[(0, 0)] == Mark.FIRST
        assert cells[(2, 2)] == Mark.SECOND


class TestBoardOutcome:
    def test_empty_board_unfinished(self) -> None:
        assert Board().outcome() == Outcome.UNFINISHED

    def test_row_of_second_wins(self) -> None:
        board = Board.from_rows(["XXX", "...", "..."])
        assert board.outcome() == Outcome.SECOND_WINS

    def test_column_of_first_wins(self) -> None:
        board = Board.from_rows([".O.", ".OX", "XO."])
        assert board.outcome() == Outcome.FIRST_WINS

    def test_diagonals(self) -> None:
        assert Board.from_rows(["O..", ".O.", "..O"]).outcome() == Outcome.FIRST_WINS
        assert Board.from_rows(["..X", ".X.", "X.."]).outcome() == Outcome.SECOND_WINS

    def test_full_board_without_line_is_draw(self) -> None:
        board = Board.from_rows(["OXO", "OXX", "XOO"])
        assert board.is_full()
        assert board.outcome() == Outcome.DRAW

    def test_full_board_with_line_is_win(self) -> None:
        board = Board.from_rows(["OOO", "XXO", "XOX"])
        assert board.outcome() == Outcome.FIRST_WINS

    def test_mixed_line_is_not_a_win(self) -> None:
        board = Board.from_rows(["OXO", "...", "..."])
        assert board.outcome() == Outcome.UNFINISHED

    def test_outcome_is_pure(self) -> None:
        for marks in itertools.islice(
            itertools.product(list(Mark), repeat=9), 0, 19683, 97
        ):
            board = Board()
            for index, mark in enumerate(marks):
                board.set_mark(index % 3, index // 3, mark)
            snapshot = board.copy()
            assert board.outcome() == board.outcome()
            assert board == snapshot

    def test_winning_line(self) -> None:
        board = Board.from_rows(["O.X", ".X.", "X.O"])
        assert board.winning_line() == ((0, 2), (1, 1), (2, 0))
        assert Board().winning_line() is None


class TestBoardCopy:
    def test_copy_independence(self) -> None:
        board = Board.from_rows(["O..", "...", "..."])
        copy = board.copy()
        assert board == copy
        copy.apply_move(1, 1, Mark.SECOND)
        assert board != copy
        assert board.mark_at(1, 1) == Mark.EMPTY

    def test_from_rows_rejects_bad_input(self) -> None:
        with pytest.raises(ValueError):
            Board.from_rows(["...", "..."])
        with pytest.raises(ValueError):
            Board.from_rows(["..Q", "...", "..."])

    def test_repr_round_trip(self) -> None:
        rows = ["O.X", ".X.", "O.."]
        assert repr(Board.from_rows(rows)) == "\n".join(rows)
