"""Solvers for list, report, instruction and letter-grid puzzles."""

__version__ = "1.0.0"
__all__ = ["level1", "level2", "level3", "level4"]