"""Screen geometry of the board for a given viewport."""

from __future__ import annotations

from dataclasses import dataclass

from tictactoe.core.board import SIZE


@dataclass(frozen=True, slots=True)
class Layout:
    """Board origin and space size in surface pixels.

    The board is centred in the viewport and spans three quarters of its
    shorter side.
    """

    offset_x: int
    offset_y: int
    space_size: int

    @classmethod
    def for_viewport(cls, width: int, height: int) -> Layout:
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport must be positive, got {width}x{height}")
        space = min(width // 4, height // 4)
        return cls(
            offset_x=width // 2 - (space * SIZE) // 2,
            offset_y=height // 2 - (space * SIZE) // 2,
            space_size=space,
        )

    def cell_rect(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return ``(left, top, width, height)`` of cell ``(x, y)``."""
        s = self.space_size
        return self.offset_x + x * s, self.offset_y + y * s, s, s

    def contains(self, x: int, y: int, px: float, py: float) -> bool:
        """Edge-inclusive hit test of point ``(px, py)`` against cell ``(x, y)``."""
        left, top, w, h = self.cell_rect(x, y)
        return left <= px <= left + w and top <= py <= top + h
