"""Fixtures for the game-layer tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from game_fakes import FakeInput, RecordingSurface, cell_center

from tictactoe.game.controller import GameController


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def pointer() -> FakeInput:
    return FakeInput()


@pytest.fixture
def make_controller(
    surface: RecordingSurface, pointer: FakeInput
) -> Callable[..., GameController]:
    def _make(started: bool = True, **kwargs: Any) -> GameController:
        ctrl = GameController(surface, pointer, **kwargs)
        if started:
            ctrl.advance(ctrl.timer.duration, False, 0, 0)
        return ctrl

    return _make


@pytest.fixture
def play() -> Callable[..., None]:
    """Press on each cell in turn, releasing between presses."""

    def _play(ctrl: GameController, *cells: tuple[int, int]) -> None:
        for x, y in cells:
            ctrl.advance(0.016, True, *cell_center(x, y))
            ctrl.advance(0.016, False, *cell_center(x, y))

    return _play
