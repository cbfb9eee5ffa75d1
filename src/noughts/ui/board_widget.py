"""BoardWidget — clickable 3x3 grid."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from noughts.core.board import Board
from noughts.core.enums import Mark
from noughts.core.types import BOARD_SIZE, Coord

_SYMBOLS: dict[Mark, str] = {
    Mark.EMPTY: "",
    Mark.FIRST: "O",
    Mark.SECOND: "X",
}
_NORMAL_STYLE = "QPushButton { background-color: #2b2b2b; color: #ddd; }"
_WIN_STYLE = "QPushButton { background-color: #3a7d44; color: white; }"


class BoardWidget(QWidget):
    """Grid of buttons; emits ``cell_clicked(x, y)`` for empty cells."""

    cell_clicked = pyqtSignal(int, int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._buttons: dict[Coord, QPushButton] = {}
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QGridLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        font = QFont("Adwaita Sans", 28, QFont.Weight.Bold)
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                btn = QPushButton()
                btn.setFont(font)
                btn.setMinimumSize(80, 80)
                btn.setSizePolicy(
                    QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
                )
                btn.setStyleSheet(_NORMAL_STYLE)
                btn.clicked.connect(lambda _checked=False, cx=x, cy=y: self._on_click(cx, cy))
                layout.addWidget(btn, y, x)
                self._buttons[(x, y)] = btn

    def button(self, x: int, y: int) -> QPushButton:
        return self._buttons[(x, y)]

    def refresh(self, board: Board, *, interactive: bool = True) -> None:
        """Mirror *board*; highlight a completed line."""
        winning = set(board.winning_line() or ())
        for (x, y), mark in board:
            btn = self._buttons[(x, y)]
            btn.setText(_SYMBOLS[mark])
            btn.setEnabled(interactive and mark == Mark.EMPTY)
            btn.setStyleSheet(_WIN_STYLE if (x, y) in winning else _NORMAL_STYLE)

    def _on_click(self, x: int, y: int) -> None:
        self.cell_clicked.emit(x, y)
