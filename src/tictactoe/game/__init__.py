"""Game layer — controller, countdown, render commands and engine interfaces.

Quick start::

    from tictactoe.game import GameController

    ctrl = GameController(surface, input_source)
    ctrl.update(1 / 60)
    ctrl.render()
"""

from tictactoe.game.controller import GameController, GameEvents
from tictactoe.game.countdown import DEFAULT_START_DELAY, StartTimer
from tictactoe.game.interfaces import IDisplaySurface, IInputSource
from tictactoe.game.render import RenderCommand, replay

__all__ = [
    # Interfaces
    "IDisplaySurface",
    "IInputSource",
    # Concrete
    "DEFAULT_START_DELAY",
    "GameController",
    "GameEvents",
    "RenderCommand",
    "StartTimer",
    "replay",
]
