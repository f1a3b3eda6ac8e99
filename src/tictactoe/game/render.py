"""Render commands — a plain-data description of one frame.

Each command knows how to issue itself to an :class:`IDisplaySurface`, so a
frame can be built once, compared in tests, and replayed on any surface.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tictactoe.core.enums import StatusColor
from tictactoe.game.interfaces import IDisplaySurface


@dataclass(frozen=True, slots=True)
class SetBackgroundColor:
    color: StatusColor

    def apply(self, surface: IDisplaySurface) -> None:
        surface.set_background_color(self.color)


@dataclass(frozen=True, slots=True)
class SetColor:
    color: StatusColor

    def apply(self, surface: IDisplaySurface) -> None:
        surface.set_color(self.color)


@dataclass(frozen=True, slots=True)
class SetLineThickness:
    px: int

    def apply(self, surface: IDisplaySurface) -> None:
        surface.set_line_thickness(self.px)


@dataclass(frozen=True, slots=True)
class DrawRect:
    x: int
    y: int
    width: int
    height: int

    def apply(self, surface: IDisplaySurface) -> None:
        surface.draw_rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True, slots=True)
class DrawLineSegment:
    x1: int
    y1: int
    x2: int
    y2: int

    def apply(self, surface: IDisplaySurface) -> None:
        surface.draw_line_segment(self.x1, self.y1, self.x2, self.y2)


@dataclass(frozen=True, slots=True)
class DrawCircle:
    cx: int
    cy: int
    radius: int

    def apply(self, surface: IDisplaySurface) -> None:
        surface.draw_circle(self.cx, self.cy, self.radius)


@dataclass(frozen=True, slots=True)
class DrawText:
    text: str
    x: int
    y: int

    def apply(self, surface: IDisplaySurface) -> None:
        surface.draw_text(self.text, self.x, self.y)


RenderCommand = (
    SetBackgroundColor
    | SetColor
    | SetLineThickness
    | DrawRect
    | DrawLineSegment
    | DrawCircle
    | DrawText
)


def replay(commands: Iterable[RenderCommand], surface: IDisplaySurface) -> None:
    """Issue *commands* to *surface* in order."""
    for cmd in commands:
        cmd.apply(surface)
