"""Core domain layer — pure game logic with zero external dependencies.

Quick start::

    from noughts.core import Board, Outcome

    board = Board()
    board.apply_first_player_move(1, 1)
    assert board.outcome() == Outcome.UNFINISHED
"""

from noughts.core.board import Board
from noughts.core.cell import Cell
from noughts.core.enums import Mark, Outcome
from noughts.core.types import (
    BOARD_SIZE,
    WIN_LINES,
    Coord,
    coord_name,
    in_bounds,
    parse_coord,
)

__all__ = [
    # Enums
    "Mark",
    "Outcome",
    # Types / helpers
    "BOARD_SIZE",
    "Coord",
    "WIN_LINES",
    "coord_name",
    "in_bounds",
    "parse_coord",
    # Domain objects
    "Board",
    "Cell",
]
