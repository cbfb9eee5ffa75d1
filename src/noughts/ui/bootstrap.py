"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from noughts.game.interfaces import SessionConfig

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings."""
    from noughts.ui.i18n import t

    app.setApplicationName(t().window_title)
    app.setStyle("Fusion")


def run_application(
    argv: list[str] | None = None,
    config: SessionConfig | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from noughts.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(config)
    window.show()
    _LOGGER.debug("Main window shown")

    return app.exec()
