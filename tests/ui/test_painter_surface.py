"""Tests for the QPainter-backed display surface."""

from __future__ import annotations

import pytest
from PyQt6.QtGui import QColor, QFont, QFontMetrics, QImage, QPainter

from tictactoe.core.enums import Cell, StatusColor
from tictactoe.game.controller import GameController
from tictactoe.ui.painter_surface import PainterSurface
from tictactoe.ui.styles.theme import BoardTheme


def _image(width: int = 400, height: int = 400) -> QImage:
    image = QImage(width, height, QImage.Format.Format_ARGB32)
    image.fill(QColor(255, 0, 0))
    return image


def test_viewport_follows_device(qapp: object) -> None:
    surface = PainterSurface(_image(320, 240), BoardTheme.default(), QFont())
    assert surface.viewport_width() == 320
    assert surface.viewport_height() == 240


def test_text_size_uses_font_metrics(qapp: object) -> None:
    font = QFont()
    surface = PainterSurface(_image(), BoardTheme.default(), font)
    metrics = QFontMetrics(font)
    assert surface.text_size("Player 1's turn") == (
        float(metrics.horizontalAdvance("Player 1's turn")),
        float(metrics.height()),
    )


def test_drawing_outside_paint_pass_raises(qapp: object) -> None:
    surface = PainterSurface(_image(), BoardTheme.default(), QFont())
    with pytest.raises(RuntimeError):
        surface.draw_rect(0, 0, 10, 10)


def test_state_setters_allowed_outside_paint_pass(qapp: object) -> None:
    surface = PainterSurface(_image(), BoardTheme.default(), QFont())
    surface.set_color(StatusColor.PLAYER_1)
    surface.set_line_thickness(3)


def test_pen_state_carries_into_paint_pass(qapp: object) -> None:
    image = _image()
    surface = PainterSurface(image, BoardTheme.default(), QFont())
    surface.set_color(StatusColor.PLAYER_1)
    surface.set_line_thickness(3)
    painter = QPainter(image)
    with surface.painting(painter):
        assert painter.pen().color() == QColor(0, 0, 255)
        assert painter.pen().width() == 3
    painter.end()


def test_background_fills_viewport(qapp: object) -> None:
    image = _image()
    surface = PainterSurface(image, BoardTheme.default(), QFont())
    painter = QPainter(image)
    with surface.painting(painter):
        surface.set_background_color(StatusColor.BACKGROUND)
    painter.end()
    assert image.pixelColor(0, 0) == QColor(255, 255, 255)
    assert image.pixelColor(399, 399) == QColor(255, 255, 255)


def test_controller_frame_renders(qapp: object) -> None:
    image = _image()
    surface = PainterSurface(image, BoardTheme.default(), QFont())
    ctrl = GameController(surface)
    ctrl.board[1, 1] = Cell.X

    painter = QPainter(image)
    with surface.painting(painter):
        ctrl.render()
    painter.end()

    # Bottom-left corner lies outside the board: plain background.
    assert image.pixelColor(1, 398) == QColor(255, 255, 255)
    # Grid line of the top-left cell (board spans 50..350 on a 400px image).
    assert image.pixelColor(50, 200) == QColor(0, 0, 0)


def test_theme_lookup() -> None:
    assert BoardTheme.named("Dark") == BoardTheme.dark()
    assert BoardTheme.named("missing") == BoardTheme.default()
    theme = BoardTheme.default()
    assert theme.color_for(StatusColor.PLAYER_1) == QColor(0, 0, 255)
    assert theme.color_for(StatusColor.SUCCESS) == QColor(0, 255, 0)
