"""Tests for StartTimer."""

import pytest

from tictactoe.game.countdown import DEFAULT_START_DELAY, StartTimer


class TestStartTimer:
    def test_defaults(self) -> None:
        timer = StartTimer()
        assert timer.duration == DEFAULT_START_DELAY == 5.0
        assert timer.remaining == 5.0
        assert not timer.expired

    def test_tick_decrements(self) -> None:
        timer = StartTimer(5.0)
        assert not timer.tick(1.5)
        assert timer.remaining == pytest.approx(3.5)

    def test_expires_at_zero(self) -> None:
        timer = StartTimer(2.0)
        assert timer.tick(2.0)
        assert timer.expired

    def test_overshoot_expires(self) -> None:
        timer = StartTimer(1.0)
        assert timer.tick(3.0)
        assert timer.display_seconds == 0

    def test_display_rounds_up(self) -> None:
        timer = StartTimer(5.0)
        assert timer.display_seconds == 5
        timer.tick(0.1)
        assert timer.display_seconds == 5
        timer.tick(4.0)
        assert timer.display_seconds == 1

    def test_reset(self) -> None:
        timer = StartTimer(3.0)
        timer.tick(2.5)
        timer.reset()
        assert timer.remaining == 3.0

    @pytest.mark.parametrize("duration", [0.0, -1.0])
    def test_non_positive_rejected(self, duration: float) -> None:
        with pytest.raises(ValueError):
            StartTimer(duration)
