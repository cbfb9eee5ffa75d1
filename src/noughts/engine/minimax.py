"""Exhaustive minimax selector for the second player."""

from __future__ import annotations

import logging

from noughts.core.board import Board
from noughts.core.enums import Mark, Outcome
from noughts.core.types import Coord
from noughts.engine.search import IMoveSelector, SearchResult

_LOGGER = logging.getLogger(__name__)

_WIN_SCORE = 10
_INF_SCORE = 1_000


class MinimaxSelector(IMoveSelector):
    """Full-depth minimax with depth-adjusted scores.

    Wins are worth ``10 - depth`` and losses ``-10 + depth``, so the selector
    prefers the quickest win and the slowest loss. Candidate moves are scanned
    row-major and ties keep the first one found.

    The search mutates the board in place; every trial move is reverted before
    the next candidate is tried.
    """

    __slots__ = ("_nodes", "last_result")

    def __init__(self) -> None:
        self._nodes = 0
        self.last_result: SearchResult | None = None

    def choose_move(self, board: Board) -> Coord | None:
        self._nodes = 0
        best_score = -_INF_SCORE
        best_move: Coord | None = None

        for x, y in board.empty_cells():
            board.set_mark(x, y, Mark.SECOND)
            try:
                score = self._minimax(board, depth=1, maximizing=False)
            finally:
                board.clear_mark(x, y)

            if score > best_score:
                best_score = score
                best_move = (x, y)

        if best_move is None:
            best_score = 0
        self.last_result = SearchResult(best_move, best_score, self._nodes)
        _LOGGER.debug(
            "Minimax chose %s (score %d, %d nodes)", best_move, best_score, self._nodes
        )
        return best_move

    def select_and_apply(self, board: Board) -> bool:
        move = self.choose_move(board)
        if move is None:
            _LOGGER.debug("No empty cell left for the minimax selector")
            return False
        return board.apply_move(*move, Mark.SECOND)

    def _minimax(self, board: Board, depth: int, maximizing: bool) -> int:
        self._nodes += 1

        outcome = board.outcome()
        if outcome == Outcome.SECOND_WINS:
            return _WIN_SCORE - depth
        if outcome == Outcome.FIRST_WINS:
            return -_WIN_SCORE + depth
        if outcome == Outcome.DRAW:
            return 0

        mark = Mark.SECOND if maximizing else Mark.FIRST
        best = -_INF_SCORE if maximizing else _INF_SCORE
        for x, y in board.empty_cells():
            board.set_mark(x, y, mark)
            try:
                score = self._minimax(board, depth + 1, not maximizing)
            finally:
                board.clear_mark(x, y)
            if maximizing:
                best = max(best, score)
            else:
                best = min(best, score)
        return best
