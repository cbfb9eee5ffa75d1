"""GameSession — one game between the human and the computer.

Owns the board and the active selector, caches the outcome after each
accepted half-turn and notifies listeners through simple callbacks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from noughts.core.board import Board
from noughts.core.enums import Mark, Outcome
from noughts.engine import IMoveSelector, create_selector
from noughts.game.interfaces import GamePhase, SessionConfig

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class MoveRecord:
    """A move accepted by the session."""

    mark: Mark
    x: int
    y: int


MoveCallback = Callable[[MoveRecord, Board], None]
GameOverCallback = Callable[[Outcome], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


class GameSession:
    """A single game: the human plays first, the selector plays second.

    The session is discarded once the game is over; front ends create a new
    one for the next game.
    """

    __slots__ = (
        "_board",
        "_selector",
        "_outcome",
        "_phase",
        "_resigned",
        "_history",
        "events",
    )

    def __init__(
        self,
        config: SessionConfig | None = None,
        selector: IMoveSelector | None = None,
    ) -> None:
        config = config or SessionConfig()
        self._board = Board()
        self._selector = selector if selector is not None else create_selector(config.selector)
        self._outcome = Outcome.UNFINISHED
        self._phase = GamePhase.AWAITING_MOVE
        self._resigned = False
        self._history: list[MoveRecord] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def selector(self) -> IMoveSelector:
        return self._selector

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def is_game_over(self) -> bool:
        return self._outcome.is_terminal

    @property
    def resigned(self) -> bool:
        """True if the computer had no move and gave up."""
        return self._resigned

    @property
    def history(self) -> list[MoveRecord]:
        return list(self._history)

    # ── Turns ────────────────────────────────────────────────────────────

    def submit_move(self, x: int, y: int) -> bool:
        """Apply the human's move. Returns False if rejected."""
        if self.is_game_over:
            return False
        if not self._board.apply_first_player_move(x, y):
            _LOGGER.debug("Rejected move (%d, %d)", x, y)
            return False
        self._record(MoveRecord(Mark.FIRST, x, y))
        return True

    def computer_move(self) -> bool:
        """Let the selector play. A selector without a move resigns."""
        if self.is_game_over:
            return False

        self._phase = GamePhase.THINKING
        before = set(self._board.empty_cells())
        if not self._selector.select_and_apply(self._board):
            _LOGGER.warning("Computer has no move and resigns")
            self._resigned = True
            self._finish(Outcome.FIRST_WINS)
            return False

        x, y = (before - set(self._board.empty_cells())).pop()
        self._record(MoveRecord(Mark.SECOND, x, y))
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _record(self, record: MoveRecord) -> None:
        self._history.append(record)
        self._outcome = self._board.outcome()
        _LOGGER.debug("%s played (%d, %d)", record.mark, record.x, record.y)

        for cb in self.events.on_move:
            cb(record, self._board)

        if self._outcome.is_terminal:
            self._finish(self._outcome)
        else:
            self._phase = GamePhase.AWAITING_MOVE

    def _finish(self, outcome: Outcome) -> None:
        self._outcome = outcome
        self._phase = GamePhase.GAME_OVER
        _LOGGER.info("Game over: %s", outcome.name)
        for cb in self.events.on_game_over:
            cb(outcome)
