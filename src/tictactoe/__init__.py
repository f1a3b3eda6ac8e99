"""Tic-tac-toe — a two-player board game driven by a per-frame game loop."""

__version__ = "0.1.0"
