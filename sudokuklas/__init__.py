"""Sudoku board and placement rules, solution checking, key handling, CSV storage and pygame drawing."""

__version__ = "0.1.0"
__all__ = ["board", "check", "input_handler", "storage", "graphics"]