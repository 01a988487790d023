"""The Sudoku grid, its cells and the placement rules."""

from __future__ import annotations

from dataclasses import dataclass

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 640
BOARD_SIZE = 9
BOX_SIZE = 3
CELL_SIZE = WINDOW_WIDTH // BOARD_SIZE
FONT_PATH = "arial.ttf"


@dataclass
class Cell:
    """One square of the grid; a value of 0 means empty."""

    value: int = 0
    initial: bool = False
    editable: bool = True


class SudokuBoard:
    """A 9x9 grid of cells with an optional selected cell."""

    def __init__(self):
        self.grid: list[list[Cell]] = [
            [Cell() for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]
        self.selected_cell: tuple[int, int] | None = None
        self.difficulty = 0

    def select_cell(self, row, col):
        """Select the cell at (row, col); -1 in either coordinate clears the selection."""
        if row == -1 or col == -1:
            self.selected_cell = None
        else:
            self.selected_cell = (row, col)

    def is_board_filled(self):
        """Return True when no cell is empty."""
        return all(cell.value != 0 for row in self.grid for cell in row)

    def set_cell_value(self, row, col, value, initial=False):
        """Place a value if the rules allow it; return whether it was placed."""
        if not self.is_number_valid(row, col, value):
            return False
        cell = self.grid[row][col]
        cell.value = value
        cell.initial = initial
        return True

    def is_number_valid(self, row, col, num):
        """Return True if num appears nowhere in the row, column or box of (row, col)."""
        self._check_position(row, col)
        if any(
            self.grid[row][i].value == num or self.grid[i][col].value == num
            for i in range(BOARD_SIZE)
        ):
            return False
        start_row = row - row % BOX_SIZE
        start_col = col - col % BOX_SIZE
        return all(
            self.grid[i][j].value != num
            for i in range(start_row, start_row + BOX_SIZE)
            for j in range(start_col, start_col + BOX_SIZE)
        )

    @staticmethod
    def _check_position(row, col):
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise IndexError(f"cell ({row}, {col}) is outside the board")