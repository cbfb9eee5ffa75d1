"""First-available selector: plays the first empty cell in row-major order."""

from __future__ import annotations

import logging

from noughts.core.board import Board
from noughts.core.enums import Mark
from noughts.core.types import Coord
from noughts.engine.search import IMoveSelector, SearchResult

_LOGGER = logging.getLogger(__name__)


class OrderedSelector(IMoveSelector):
    """Deterministic selector without look-ahead."""

    __slots__ = ("last_result",)

    def __init__(self) -> None:
        self.last_result: SearchResult | None = None

    def choose_move(self, board: Board) -> Coord | None:
        empty = board.empty_cells()
        move = empty[0] if empty else None
        self.last_result = SearchResult(move, 0, 1 if move is not None else 0)
        return move

    def select_and_apply(self, board: Board) -> bool:
        move = self.choose_move(board)
        if move is None:
            _LOGGER.debug("No empty cell left for the ordered selector")
            return False
        return board.apply_move(*move, Mark.SECOND)
