"""GameView — widget that runs the frame loop and forwards pointer input."""

from __future__ import annotations

import logging
import time

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtGui import (
    QFont,
    QHideEvent,
    QMouseEvent,
    QPainter,
    QPaintEvent,
    QResizeEvent,
    QShowEvent,
)
from PyQt6.QtWidgets import QWidget

from tictactoe.game.controller import GameController
from tictactoe.game.interfaces import IInputSource
from tictactoe.ui.painter_surface import PainterSurface
from tictactoe.ui.settings import AppSettings
from tictactoe.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class PointerState(IInputSource):
    """Pointer state written by Qt mouse events and polled once per frame.

    A press is latched until the next :meth:`end_frame`, so a click whose
    press and release both land between two ticks still reads as down once.
    """

    __slots__ = ("_down", "_pressed_since_poll", "_x", "_y")

    def __init__(self) -> None:
        self._down = False
        self._pressed_since_poll = False
        self._x = 0
        self._y = 0

    def press(self, x: int, y: int) -> None:
        self._down = True
        self._pressed_since_poll = True
        self.move(x, y)

    def release(self, x: int, y: int) -> None:
        self._down = False
        if not self._pressed_since_poll:
            # A latched press still acts where it landed.
            self.move(x, y)

    def move(self, x: int, y: int) -> None:
        self._x, self._y = x, y

    def is_pointer_down(self) -> bool:
        return self._down or self._pressed_since_poll

    def pointer_position(self) -> tuple[int, int]:
        return self._x, self._y

    def end_frame(self) -> None:
        self._pressed_since_poll = False


class GameView(QWidget):
    """Hosts a :class:`GameController` and drives it from a QTimer.

    Signals:
        phase_changed(GamePhase): Re-emitted from the controller's events.
    """

    phase_changed = pyqtSignal(object)

    def __init__(
        self, settings: AppSettings | None = None, parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self._settings = settings or AppSettings()
        self.setMinimumSize(120, 120)
        self.resize(self._settings.window_width, self._settings.window_height)
        self.setMouseTracking(True)

        self._pointer = PointerState()
        self._surface = PainterSurface(
            self,
            BoardTheme.named(self._settings.theme),
            QFont(self._settings.font_family, self._settings.font_size),
        )
        self._controller = GameController(
            self._surface,
            self._pointer,
            start_delay=self._settings.start_delay,
            line_thickness=self._settings.line_thickness,
        )
        self._controller.events.on_phase_changed.append(self.phase_changed.emit)

        self._timer = QTimer(self)
        self._timer.setInterval(self._settings.frame_interval_ms)
        self._timer.timeout.connect(self._tick)
        self._last_tick = 0.0

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def pointer(self) -> PointerState:
        return self._pointer

    def start(self) -> None:
        """Start the frame loop."""
        if self._timer.isActive():
            return
        self._last_tick = time.monotonic()
        self._timer.start()
        _LOGGER.debug("Frame loop started at %d ms", self._timer.interval())

    def stop(self) -> None:
        self._timer.stop()

    def is_running(self) -> bool:
        return self._timer.isActive()

    def step(self, delta: float) -> None:
        """Advance one frame by *delta* seconds and schedule a repaint."""
        self._controller.update(delta)
        self.update()

    def set_theme(self, theme: BoardTheme) -> None:
        self._surface.set_theme(theme)
        self.update()

    # ── Frame loop ───────────────────────────────────────────────────────

    def _tick(self) -> None:
        now = time.monotonic()
        delta = now - self._last_tick
        self._last_tick = now
        self.step(delta)

    # ── Qt events ────────────────────────────────────────────────────────

    def showEvent(self, event: QShowEvent | None) -> None:
        super().showEvent(event)
        self.start()

    def hideEvent(self, event: QHideEvent | None) -> None:
        self.stop()
        super().hideEvent(event)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        if self.width() > 0 and self.height() > 0:
            self._controller.resize(self.width(), self.height())

    def paintEvent(self, event: QPaintEvent | None) -> None:
        painter = QPainter(self)
        try:
            with self._surface.painting(painter):
                self._controller.render()
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position().toPoint()
        self._pointer.press(pos.x(), pos.y())

    def mouseReleaseEvent(self, event: QMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position().toPoint()
        self._pointer.release(pos.x(), pos.y())

    def mouseMoveEvent(self, event: QMouseEvent | None) -> None:
        if event is None:
            return
        pos = event.position().toPoint()
        self._pointer.move(pos.x(), pos.y())
