"""Core enumerations for the tic-tac-toe domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Cell(IntEnum):
    """Content of a single board space."""

    FREE = 0
    X = 1  # player 1
    O = 2  # noqa: E741  (player 2)

    @classmethod
    def for_player(cls, player_1: bool) -> Cell:
        return cls.X if player_1 else cls.O

    def __str__(self) -> str:
        return "." if self is Cell.FREE else self.name


class GamePhase(IntEnum):
    """Finite-state-machine states for a round."""

    PENDING = auto()
    PLAYER_1_TURN = auto()
    PLAYER_2_TURN = auto()
    PLAYER_1_VICTORY = auto()
    PLAYER_2_VICTORY = auto()
    TIED = auto()

    @property
    def is_turn(self) -> bool:
        return self in (GamePhase.PLAYER_1_TURN, GamePhase.PLAYER_2_TURN)

    @property
    def is_terminal(self) -> bool:
        return self in (
            GamePhase.PLAYER_1_VICTORY,
            GamePhase.PLAYER_2_VICTORY,
            GamePhase.TIED,
        )


class StatusColor(IntEnum):
    """Semantic colour tokens; the UI theme maps them to real colours."""

    BACKGROUND = auto()
    BOARD = auto()
    NEUTRAL = auto()
    PLAYER_1 = auto()
    PLAYER_2 = auto()
    SUCCESS = auto()
