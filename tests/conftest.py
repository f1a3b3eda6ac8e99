"""Shared pytest fixtures: headless Qt setup and a ready-to-play game view."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from tictactoe.ui.settings import AppSettings

if TYPE_CHECKING:
    from tictactoe.ui.game_view import GameView

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


@pytest.fixture
def small_settings() -> AppSettings:
    """400x400 window: 100px cells, board spanning 50..350 on both axes."""
    return AppSettings(window_width=400, window_height=400)


@pytest.fixture
def game_view(qapp: object, small_settings: AppSettings) -> GameView:
    """A hidden GameView whose countdown has already run out."""
    from tictactoe.ui.game_view import GameView

    view = GameView(small_settings)
    view.step(small_settings.start_delay)
    return view
