"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the GameController depends on these ABCs,
not on a concrete windowing toolkit, so it can be driven without a running
event loop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tictactoe.core.enums import StatusColor


class IInputSource(ABC):
    """Pointer (mouse / touch) state polled once per frame."""

    @abstractmethod
    def is_pointer_down(self) -> bool:
        """Is the pointer currently pressed?"""

    @abstractmethod
    def pointer_position(self) -> tuple[int, int]:
        """Last known pointer position in surface pixels."""

    def end_frame(self) -> None:
        """Called once per frame after polling. Sources that latch events reset here."""


class IDisplaySurface(ABC):
    """Immediate-mode drawing target with a viewport and text metrics."""

    @abstractmethod
    def viewport_width(self) -> int: ...

    @abstractmethod
    def viewport_height(self) -> int: ...

    @abstractmethod
    def text_size(self, text: str) -> tuple[float, float]:
        """Rendered ``(width, height)`` of *text* in the current font."""

    @abstractmethod
    def set_background_color(self, color: StatusColor) -> None: ...

    @abstractmethod
    def set_color(self, color: StatusColor) -> None: ...

    @abstractmethod
    def set_line_thickness(self, px: int) -> None: ...

    @abstractmethod
    def draw_rect(self, x: int, y: int, width: int, height: int) -> None: ...

    @abstractmethod
    def draw_line_segment(self, x1: int, y1: int, x2: int, y2: int) -> None: ...

    @abstractmethod
    def draw_circle(self, cx: int, cy: int, radius: int) -> None: ...

    @abstractmethod
    def draw_text(self, text: str, x: int, y: int) -> None: ...
