"""Tests for core enumerations."""

import pytest

from tictactoe.core.enums import Cell, GamePhase


class TestGamePhase:
    def test_turn_phases(self) -> None:
        assert {p for p in GamePhase if p.is_turn} == {
            GamePhase.PLAYER_1_TURN,
            GamePhase.PLAYER_2_TURN,
        }

    def test_terminal_phases(self) -> None:
        assert {p for p in GamePhase if p.is_terminal} == {
            GamePhase.PLAYER_1_VICTORY,
            GamePhase.PLAYER_2_VICTORY,
            GamePhase.TIED,
        }

    @pytest.mark.parametrize("phase", list(GamePhase))
    def test_pending_only_phase_outside_both_groups(self, phase: GamePhase) -> None:
        outside = not phase.is_turn and not phase.is_terminal
        assert outside == (phase == GamePhase.PENDING)


class TestCell:
    def test_for_player(self) -> None:
        assert Cell.for_player(True) == Cell.X
        assert Cell.for_player(False) == Cell.O
