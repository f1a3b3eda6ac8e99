"""GameController — the per-frame state machine of a tic-tac-toe round.

Owns: Board, GamePhase, StartTimer, the victory-acknowledged flag and the
Layout. Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field

from tictactoe.core.board import Board
from tictactoe.core.enums import Cell, GamePhase, StatusColor
from tictactoe.core.layout import Layout
from tictactoe.game.countdown import DEFAULT_START_DELAY, StartTimer
from tictactoe.game.interfaces import IDisplaySurface, IInputSource
from tictactoe.game.render import (
    DrawCircle,
    DrawLineSegment,
    DrawRect,
    DrawText,
    RenderCommand,
    SetBackgroundColor,
    SetColor,
    SetLineThickness,
    replay,
)

_LOGGER = logging.getLogger(__name__)

LINE_THICKNESS = 4

# ── Event definitions ────────────────────────────────────────────────────────

PhaseCallback = Callable[[GamePhase], None]
MarkCallback = Callable[[int, int, Cell], None]  # x, y, mark
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_mark_placed: list[MarkCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


_STATUS: dict[GamePhase, tuple[str, StatusColor]] = {
    GamePhase.PLAYER_1_TURN: ("Player 1's turn", StatusColor.PLAYER_1),
    GamePhase.PLAYER_2_TURN: ("Player 2's turn", StatusColor.PLAYER_2),
    GamePhase.PLAYER_1_VICTORY: ("Player 1 wins!", StatusColor.SUCCESS),
    GamePhase.PLAYER_2_VICTORY: ("Player 2 wins!", StatusColor.SUCCESS),
    GamePhase.TIED: ("Game is tied :(", StatusColor.NEUTRAL),
}


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Advances a round once per frame and projects it into render commands.

    Thread-safety: every method is meant to be called from the single thread
    that runs the frame loop. ``render_intent`` never mutates state.
    """

    __slots__ = (
        "_surface",
        "_input",
        "_board",
        "_phase",
        "_timer",
        "_victory_acknowledged",
        "_layout",
        "_line_thickness",
        "events",
    )

    def __init__(
        self,
        surface: IDisplaySurface,
        input_source: IInputSource | None = None,
        start_delay: float = DEFAULT_START_DELAY,
        line_thickness: int = LINE_THICKNESS,
    ) -> None:
        self._surface = surface
        self._input = input_source
        self._board = Board()
        self._phase = GamePhase.PENDING
        self._timer = StartTimer(start_delay)
        self._victory_acknowledged = False
        self._layout = Layout.for_viewport(
            surface.viewport_width(), surface.viewport_height()
        )
        self._line_thickness = line_thickness
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def timer(self) -> StartTimer:
        return self._timer

    @property
    def victory_acknowledged(self) -> bool:
        return self._victory_acknowledged

    @property
    def layout(self) -> Layout:
        return self._layout

    # ── Frame step ───────────────────────────────────────────────────────

    def update(self, delta: float) -> None:
        """Poll the injected input source and advance one frame."""
        if self._input is None:
            raise RuntimeError("GameController has no input source to poll")
        x, y = self._input.pointer_position()
        down = self._input.is_pointer_down()
        self._input.end_frame()
        self.advance(delta, down, x, y)

    def advance(
        self, delta: float, pointer_down: bool, pointer_x: int, pointer_y: int
    ) -> None:
        if self._phase == GamePhase.PENDING:
            if self._timer.tick(delta):
                self._timer.reset()
                self._set_phase(GamePhase.PLAYER_1_TURN)
            return

        if self._phase.is_turn:
            self._advance_turn(pointer_down, pointer_x, pointer_y)
            return

        if not self._phase.is_terminal:
            return

        # The press that ended the round may still be held.
        if not self._victory_acknowledged:
            if not pointer_down:
                self._victory_acknowledged = True
            return
        if pointer_down:
            self.reset()

    def _advance_turn(self, pointer_down: bool, pointer_x: int, pointer_y: int) -> None:
        if not pointer_down:
            return
        player_1 = self._phase == GamePhase.PLAYER_1_TURN
        if not self.place_mark(player_1, pointer_x, pointer_y):
            return

        if self.evaluate_win(Cell.for_player(player_1)):
            self._set_phase(
                GamePhase.PLAYER_1_VICTORY if player_1 else GamePhase.PLAYER_2_VICTORY
            )
        elif self.evaluate_tied():
            self._set_phase(GamePhase.TIED)
        else:
            self._set_phase(
                GamePhase.PLAYER_2_TURN if player_1 else GamePhase.PLAYER_1_TURN
            )

    # ── Rules ────────────────────────────────────────────────────────────

    def place_mark(self, player_1: bool, screen_x: int, screen_y: int) -> bool:
        """Mark the first free cell under the point.

        Returns True if the board changed.
        """
        for x, y, cell in self._board:
            if not self._layout.contains(x, y, screen_x, screen_y):
                continue
            if cell != Cell.FREE:
                continue
            mark = Cell.for_player(player_1)
            self._board[x, y] = mark
            _LOGGER.debug("Placed %s at (%d, %d)", mark, x, y)
            for cb in self.events.on_mark_placed:
                cb(x, y, mark)
            return True
        return False

    def evaluate_win(self, mark: Cell) -> bool:
        return self._board.has_line(mark)

    def evaluate_tied(self) -> bool:
        return self._board.is_full()

    def reset(self) -> None:
        """Start over: empty board, countdown pending."""
        self._board.reset()
        self._timer.reset()
        self._victory_acknowledged = False
        _LOGGER.debug("Board reset")
        for cb in self.events.on_reset:
            cb()
        self._set_phase(GamePhase.PENDING)

    def resize(self, width: int, height: int) -> None:
        """Recompute the board geometry for a new viewport."""
        self._layout = Layout.for_viewport(width, height)

    # ── Rendering ────────────────────────────────────────────────────────

    def status(self) -> tuple[str, StatusColor]:
        """Status line text and colour for the current phase."""
        if self._phase == GamePhase.PENDING:
            return (
                f"Starting game in {self._timer.display_seconds} seconds...",
                StatusColor.NEUTRAL,
            )
        return _STATUS[self._phase]

    def render_intent(self) -> tuple[RenderCommand, ...]:
        """Describe the current frame without drawing it."""
        commands: list[RenderCommand] = [
            SetBackgroundColor(StatusColor.BACKGROUND),
            SetLineThickness(self._line_thickness),
            SetColor(StatusColor.BOARD),
        ]

        size = self._layout.space_size
        quarter = size // 4
        half = size // 2
        for x, y, cell in self._board:
            left, top, w, h = self._layout.cell_rect(x, y)
            commands.append(DrawRect(left, top, w, h))
            if cell == Cell.O:
                commands.append(DrawCircle(left + half, top + half, quarter))
            elif cell == Cell.X:
                commands.append(
                    DrawLineSegment(
                        left + quarter,
                        top + quarter,
                        left + quarter + half,
                        top + quarter + half,
                    )
                )
                commands.append(
                    DrawLineSegment(
                        left + half + quarter,
                        top + quarter,
                        left + quarter,
                        top + quarter + half,
                    )
                )

        text, color = self.status()
        text_w, text_h = self._surface.text_size(text)
        commands.append(SetColor(color))
        commands.append(
            DrawText(
                text,
                _round_half_up(self._surface.viewport_width() // 2 - text_w / 2),
                _round_half_up(text_h),
            )
        )
        return tuple(commands)

    def render(self, surface: IDisplaySurface | None = None) -> None:
        """Draw the current frame onto *surface* (default: the injected one)."""
        target = surface if surface is not None else self._surface
        replay(self.render_intent(), target)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_phase(self, phase: GamePhase) -> None:
        _LOGGER.debug("Phase %s -> %s", self._phase.name, phase.name)
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
