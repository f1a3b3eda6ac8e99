"""Visual theme constants and QSS styles for the game window."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from tictactoe.core.enums import StatusColor


@dataclass(frozen=True)
class BoardTheme:
    """Concrete colours for each semantic :class:`StatusColor` token."""

    background: QColor
    board: QColor  # grid and marks
    neutral: QColor  # countdown / tie message
    player_1: QColor
    player_2: QColor
    success: QColor  # victory message

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            background=QColor(255, 255, 255),  # white
            board=QColor(0, 0, 0),  # black
            neutral=QColor(0, 0, 0),
            player_1=QColor(0, 0, 255),  # blue
            player_2=QColor(160, 32, 240),  # purple
            success=QColor(0, 255, 0),  # green
        )

    @classmethod
    def dark(cls) -> BoardTheme:
        return cls(
            background=QColor(43, 43, 43),
            board=QColor(224, 224, 224),
            neutral=QColor(224, 224, 224),
            player_1=QColor(138, 202, 255),
            player_2=QColor(255, 138, 138),
            success=QColor(58, 200, 68),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Look up a theme by its settings name, falling back to the default."""
        return THEMES.get(name, cls.default)()

    def color_for(self, token: StatusColor) -> QColor:
        return {
            StatusColor.BACKGROUND: self.background,
            StatusColor.BOARD: self.board,
            StatusColor.NEUTRAL: self.neutral,
            StatusColor.PLAYER_1: self.player_1,
            StatusColor.PLAYER_2: self.player_2,
            StatusColor.SUCCESS: self.success,
        }[token]


THEMES = {
    "Classic": BoardTheme.default,
    "Dark": BoardTheme.dark,
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #ffffff;
}
"""
