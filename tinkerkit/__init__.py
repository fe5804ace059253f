"""Puzzle helpers, number games and small text tools."""

__version__ = "0.1.0"