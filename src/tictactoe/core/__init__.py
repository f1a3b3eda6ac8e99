"""Core domain layer — pure board logic with zero external dependencies."""

from tictactoe.core.board import SIZE, WINNING_LINES, Board
from tictactoe.core.enums import Cell, GamePhase, StatusColor
from tictactoe.core.layout import Layout

__all__ = [
    # Enums
    "Cell",
    "GamePhase",
    "StatusColor",
    # Domain objects
    "Board",
    "Layout",
    "SIZE",
    "WINNING_LINES",
]
