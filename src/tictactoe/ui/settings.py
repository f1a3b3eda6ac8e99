"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass

from tictactoe.game.countdown import DEFAULT_START_DELAY


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Window
    window_title: str = "Tic-Tac-Toe"
    window_width: int = 800
    window_height: int = 600

    # Loop
    frame_rate: int = 60
    start_delay: float = DEFAULT_START_DELAY

    # Look
    line_thickness: int = 4
    theme: str = "Classic"  # "Classic" or "Dark"
    font_family: str = "Sans Serif"
    font_size: int = 18

    # Diagnostics
    log_level: str = "WARNING"

    @property
    def frame_interval_ms(self) -> int:
        return max(1, round(1000 / self.frame_rate))

    def validate(self) -> None:
        """Raise ValueError if any value cannot drive the game loop."""
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError(
                f"Window size must be positive, got "
                f"{self.window_width}x{self.window_height}"
            )
        if self.frame_rate <= 0:
            raise ValueError(f"Frame rate must be positive, got {self.frame_rate}")
        if self.start_delay <= 0:
            raise ValueError(f"Start delay must be positive, got {self.start_delay}")
        if self.line_thickness <= 0:
            raise ValueError(
                f"Line thickness must be positive, got {self.line_thickness}"
            )
        if self.font_size <= 0:
            raise ValueError(f"Font size must be positive, got {self.font_size}")
