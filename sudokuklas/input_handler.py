"""Applying key presses to the selected cell."""

from __future__ import annotations

from enum import Enum

from .board import BOARD_SIZE, BOX_SIZE, SudokuBoard


class Key(Enum):
    """Keys the board reacts to."""

    NUM0 = "0"
    NUM1 = "1"
    NUM2 = "2"
    NUM3 = "3"
    NUM4 = "4"
    NUM5 = "5"
    NUM6 = "6"
    NUM7 = "7"
    NUM8 = "8"
    NUM9 = "9"
    DELETE = "delete"

    @property
    def digit(self) -> int | None:
        """The number a digit key enters, or None for other keys."""
        return int(self.value) if self.value.isdigit() else None


class InputHandler:
    """Enters numbers into, or clears, the board's selected cell."""

    def __init__(self, board: SudokuBoard | None = None):
        self.board = board if board is not None else SudokuBoard()

    def handle_key_press(self, key):
        """Apply a key to the selected cell; return whether the board changed."""
        if self.board.selected_cell is None:
            return False
        row, col = self.board.selected_cell
        if not self.board.grid[row][col].editable:
            return False
        if key is Key.DELETE:
            return self.board.set_cell_value(row, col, 0)
        value = key.digit
        if value is None or value == 0:
            return False
        if self._conflicts(row, col, value):
            return False
        return self.board.set_cell_value(row, col, value)

    def _conflicts(self, row: int, col: int, value: int) -> bool:
        grid = self.board.grid
        if any(i != row and grid[i][col].value == value for i in range(BOARD_SIZE)):
            return True
        if any(j != col and grid[row][j].value == value for j in range(BOARD_SIZE)):
            return True
        start_row = (row // BOX_SIZE) * BOX_SIZE
        start_col = (col // BOX_SIZE) * BOX_SIZE
        return any(
            i != row and j != col and grid[i][j].value == value
            for i in range(start_row, start_row + BOX_SIZE)
            for j in range(start_col, start_col + BOX_SIZE)
        )