"""Shared move-selector models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from noughts.core.board import Board
    from noughts.core.types import Coord


class SelectorKind(str, Enum):
    """Available computer strategies."""

    ORDERED = "ordered"
    MINIMAX = "minimax"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by a single move decision."""

    best_move: Coord | None
    score: int
    nodes: int


class IMoveSelector(Protocol):
    """Protocol for computer players choosing moves for the second mark."""

    last_result: SearchResult | None

    def choose_move(self, board: Board) -> Coord | None:
        """Pick a move without changing *board*. None if the board is full."""
        ...

    def select_and_apply(self, board: Board) -> bool:
        """Pick a move and apply it. False means there was nothing to play."""
        ...
