"""MainWindow — board, menus and status line for a game against the computer."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from noughts.core.enums import Outcome
from noughts.engine.search import SelectorKind
from noughts.game.interfaces import SessionConfig
from noughts.game.session import GameSession
from noughts.ui.board_widget import BoardWidget
from noughts.ui.console import result_message
from noughts.ui.i18n import t

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window. The human always plays first."""

    def __init__(self, config: SessionConfig | None = None) -> None:
        super().__init__()
        self._config = config or SessionConfig()
        self._session = GameSession(self._config)

        self.setWindowTitle(t().window_title)
        self.setMinimumSize(300, 340)

        self._setup_ui()
        self._setup_menu()
        self.new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_widget = BoardWidget()
        self._board_widget.cell_clicked.connect(self._on_cell_clicked)
        self.setCentralWidget(self._board_widget)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        menu_game = menu_bar.addMenu(s.menu_game)
        assert menu_game is not None

        self._act_new_game = QAction(s.menu_new_game, self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        menu_game.addAction(self._act_new_game)

        menu_game.addSeparator()
        act_quit = QAction(s.menu_quit, self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        menu_game.addAction(act_quit)

        menu_opponent = menu_bar.addMenu(s.menu_opponent)
        assert menu_opponent is not None

        group = QActionGroup(self)
        group.setExclusive(True)
        self._opponent_actions: dict[SelectorKind, QAction] = {}
        for kind, label in (
            (SelectorKind.ORDERED, s.opponent_ordered),
            (SelectorKind.MINIMAX, s.opponent_minimax),
        ):
            action = QAction(label, self)
            action.setCheckable(True)
            action.setChecked(kind == self._config.selector)
            action.triggered.connect(
                lambda _checked=False, k=kind: self.set_selector(k)
            )
            group.addAction(action)
            menu_opponent.addAction(action)
            self._opponent_actions[kind] = action

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def board_widget(self) -> BoardWidget:
        return self._board_widget

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── Actions ──────────────────────────────────────────────────────────

    def new_game(self) -> None:
        self._session = GameSession(self._config)
        _LOGGER.debug("New game with %s selector", self._config.selector)
        self._refresh()

    def set_selector(self, kind: SelectorKind) -> None:
        """Switch the opponent; takes effect with a new game."""
        self._config = SessionConfig(selector=kind)
        self._opponent_actions[kind].setChecked(True)
        self.new_game()

    def _on_cell_clicked(self, x: int, y: int) -> None:
        if not self._session.submit_move(x, y):
            return
        if not self._session.is_game_over:
            self._session.computer_move()
        self._refresh()

    def _refresh(self) -> None:
        session = self._session
        self._board_widget.refresh(session.board, interactive=not session.is_game_over)
        if session.outcome == Outcome.UNFINISHED:
            self._status_label.setText(t().status_your_turn)
        else:
            self._status_label.setText(t().status_game_over + result_message(session))
