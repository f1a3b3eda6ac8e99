"""Countdown shown before a round starts."""

from __future__ import annotations

import math

DEFAULT_START_DELAY = 5.0


class StartTimer:
    """Cooperative countdown decremented by caller-supplied frame deltas."""

    __slots__ = ("_duration", "_remaining")

    def __init__(self, duration: float = DEFAULT_START_DELAY) -> None:
        if duration <= 0:
            raise ValueError(f"Start delay must be positive, got {duration}")
        self._duration = duration
        self._remaining = duration

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def remaining(self) -> float:
        return self._remaining

    @property
    def expired(self) -> bool:
        return self._remaining <= 0.0

    @property
    def display_seconds(self) -> int:
        """Whole seconds left, rounded up, never negative."""
        return max(0, math.ceil(self._remaining))

    def tick(self, delta: float) -> bool:
        """Consume *delta* seconds. Returns True once the countdown has expired."""
        self._remaining -= delta
        return self.expired

    def reset(self) -> None:
        self._remaining = self._duration
