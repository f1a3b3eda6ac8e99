"""MainWindow — top-level window hosting the game view."""

from __future__ import annotations

from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QMainWindow, QWidget

from tictactoe.core.enums import GamePhase
from tictactoe.ui.game_view import GameView
from tictactoe.ui.settings import AppSettings


class MainWindow(QMainWindow):
    """Main application window; the title mirrors the game status."""

    def __init__(
        self, settings: AppSettings | None = None, parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self._settings = settings or AppSettings()
        self._view = GameView(self._settings, self)
        self.setCentralWidget(self._view)
        self.resize(self._settings.window_width, self._settings.window_height)

        self._view.phase_changed.connect(self._on_phase_changed)
        self._on_phase_changed(self._view.controller.phase)

    @property
    def game_view(self) -> GameView:
        return self._view

    def _on_phase_changed(self, phase: GamePhase) -> None:
        title = self._settings.window_title
        if phase == GamePhase.PENDING:
            self.setWindowTitle(title)
            return
        text, _color = self._view.controller.status()
        self.setWindowTitle(f"{title} - {text}")

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._view.stop()
        super().closeEvent(event)
