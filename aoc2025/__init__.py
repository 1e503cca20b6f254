"""Solutions to the 2025 Advent of Code puzzles, days 2 to 11."""

__version__ = "0.1.0"