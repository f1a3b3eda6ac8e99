"""PainterSurface — IDisplaySurface implemented on top of QPainter."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

from PyQt6.QtCore import QPoint, Qt
from PyQt6.QtGui import QFont, QFontMetrics, QPainter, QPen

from tictactoe.core.enums import StatusColor
from tictactoe.game.interfaces import IDisplaySurface
from tictactoe.ui.styles.theme import BoardTheme


class _Sized(Protocol):
    def width(self) -> int: ...

    def height(self) -> int: ...


class PainterSurface(IDisplaySurface):
    """Draws render commands with a QPainter.

    The viewport is read from *device* (a widget or an image). Drawing is only
    possible inside :meth:`painting`, which binds the painter for one frame.
    """

    def __init__(self, device: _Sized, theme: BoardTheme, font: QFont) -> None:
        self._device = device
        self._theme = theme
        self._font = font
        self._metrics = QFontMetrics(font)
        self._painter: QPainter | None = None
        self._color = StatusColor.BOARD
        self._thickness = 1

    # ── Configuration ────────────────────────────────────────────────────

    @property
    def theme(self) -> BoardTheme:
        return self._theme

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme

    @contextmanager
    def painting(self, painter: QPainter) -> Iterator[PainterSurface]:
        """Bind *painter* for the duration of one paint pass."""
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setFont(self._font)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        self._painter = painter
        self._apply_pen()
        try:
            yield self
        finally:
            self._painter = None

    # ── IDisplaySurface: metrics ─────────────────────────────────────────

    def viewport_width(self) -> int:
        return self._device.width()

    def viewport_height(self) -> int:
        return self._device.height()

    def text_size(self, text: str) -> tuple[float, float]:
        return float(self._metrics.horizontalAdvance(text)), float(
            self._metrics.height()
        )

    # ── IDisplaySurface: state ───────────────────────────────────────────

    def set_background_color(self, color: StatusColor) -> None:
        painter = self._require_painter()
        painter.fillRect(
            0,
            0,
            self.viewport_width(),
            self.viewport_height(),
            self._theme.color_for(color),
        )

    def set_color(self, color: StatusColor) -> None:
        self._color = color
        if self._painter is not None:
            self._apply_pen()

    def set_line_thickness(self, px: int) -> None:
        self._thickness = px
        if self._painter is not None:
            self._apply_pen()

    # ── IDisplaySurface: primitives ──────────────────────────────────────

    def draw_rect(self, x: int, y: int, width: int, height: int) -> None:
        self._require_painter().drawRect(x, y, width, height)

    def draw_line_segment(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self._require_painter().drawLine(x1, y1, x2, y2)

    def draw_circle(self, cx: int, cy: int, radius: int) -> None:
        self._require_painter().drawEllipse(QPoint(cx, cy), radius, radius)

    def draw_text(self, text: str, x: int, y: int) -> None:
        # (x, y) is the top-left corner; QPainter anchors text on the baseline.
        self._require_painter().drawText(x, y + self._metrics.ascent(), text)

    # ── Internal ─────────────────────────────────────────────────────────

    def _require_painter(self) -> QPainter:
        if self._painter is None:
            raise RuntimeError("PainterSurface used outside a paint pass")
        return self._painter

    def _apply_pen(self) -> None:
        self._require_painter().setPen(
            QPen(self._theme.color_for(self._color), self._thickness)
        )
