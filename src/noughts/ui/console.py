"""Terminal front end: board rendering and the endless game loop."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from noughts.core.board import Board
from noughts.core.enums import Mark, Outcome
from noughts.core.types import BOARD_SIZE, coord_name, parse_coord
from noughts.game.interfaces import SessionConfig
from noughts.game.session import GameSession
from noughts.ui.i18n import t

_LOGGER = logging.getLogger(__name__)

_SYMBOLS: dict[Mark, str] = {
    Mark.EMPTY: " ",
    Mark.FIRST: "O",
    Mark.SECOND: "X",
}
_ROW_LETTERS = "abc"
_SEPARATOR = "  " + "+---" * BOARD_SIZE + "+"


def render_board(board: Board) -> str:
    """Text grid with column numbers on top and row letters on the left."""
    lines = ["    " + "   ".join(str(x + 1) for x in range(BOARD_SIZE)), _SEPARATOR]
    for y in range(BOARD_SIZE):
        cells = " | ".join(_SYMBOLS[board.mark_at(x, y)] for x in range(BOARD_SIZE))
        lines.append(f"{_ROW_LETTERS[y]} | {cells} |")
        lines.append(_SEPARATOR)
    return "\n".join(lines)


def result_message(session: GameSession) -> str:
    s = t()
    if session.resigned:
        return s.computer_resigns
    if session.outcome == Outcome.FIRST_WINS:
        return s.you_win
    if session.outcome == Outcome.SECOND_WINS:
        return s.you_lose
    return s.draw


class ConsoleGame:
    """Plays games on a text stream, starting a new one after each result.

    Args:
        config: Settings applied to every session.
        input_fn: ``(prompt) -> str``; raising ``EOFError`` stops the loop.
        output: Stream receiving the board and messages.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        input_fn: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self._config = config or SessionConfig()
        self._input = input_fn
        self._output = output if output is not None else sys.stdout

    def run(self, max_games: int | None = None) -> int:
        """Play until input ends or *max_games* are finished.

        Returns the number of finished games.
        """
        finished = 0
        while max_games is None or finished < max_games:
            self._show_banner()
            if self.play_game() is None:
                break
            finished += 1
        return finished

    def play_game(self) -> Outcome | None:
        """Play one game. Returns None if input ended mid-game."""
        session = GameSession(self._config)
        human_turn = True

        while True:
            self._say(render_board(session.board))

            if session.is_game_over:
                self._say(result_message(session))
                self._say()
                return session.outcome

            if human_turn:
                try:
                    self._read_human_move(session)
                except EOFError:
                    _LOGGER.debug("Input closed during a game")
                    return None
            elif not session.computer_move():
                self._say(result_message(session))
                self._say()
                return session.outcome
            else:
                record = session.history[-1]
                self._say(t().computer_played.format(name=coord_name((record.x, record.y))))
                self._say()

            human_turn = not human_turn

    def _read_human_move(self, session: GameSession) -> None:
        s = t()
        while True:
            text = self._input(s.prompt)
            try:
                x, y = parse_coord(text)
            except ValueError:
                self._say(s.invalid_input.format(text=text))
                continue
            if session.submit_move(x, y):
                return
            self._say(s.occupied.format(name=coord_name((x, y))))

    def _show_banner(self) -> None:
        s = t()
        rule = "=" * 24
        self._say(rule)
        self._say(s.banner_title.center(24).rstrip())
        self._say()
        self._say(s.banner_hint)
        self._say(rule)

    def _say(self, text: str = "") -> None:
        print(text, file=self._output)
