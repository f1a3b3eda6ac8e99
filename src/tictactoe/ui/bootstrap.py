"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from tictactoe.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(settings: AppSettings) -> None:
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        _LOGGER.warning("Unknown log level %r, using WARNING", settings.log_level)
        level = logging.WARNING
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def _configure_application(app: QApplication, settings: AppSettings) -> None:
    """Apply app-wide settings and theme."""
    from tictactoe.ui.styles.theme import APP_STYLE

    app.setApplicationName(settings.window_title)
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from tictactoe.ui.main_window import MainWindow

    settings = settings or AppSettings()
    settings.validate()
    _configure_logging(settings)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app, settings)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info(
        "Started %dx%d window at %d fps",
        settings.window_width,
        settings.window_height,
        settings.frame_rate,
    )

    return app.exec()
