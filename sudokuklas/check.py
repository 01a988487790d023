"""Checking a grid for repeated numbers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor

from .board import BOARD_SIZE, BOX_SIZE, Cell, SudokuBoard


def _units(grid: list[list[Cell]]) -> Iterator[list[Cell]]:
    yield from grid
    yield from (list(column) for column in zip(*grid))
    for top in range(0, BOARD_SIZE, BOX_SIZE):
        for left in range(0, BOARD_SIZE, BOX_SIZE):
            yield [
                grid[i][j]
                for i in range(top, top + BOX_SIZE)
                for j in range(left, left + BOX_SIZE)
            ]


def _has_repeat(cells: Iterable[Cell]) -> bool:
    seen: set[int] = set()
    for cell in cells:
        if cell.value == 0:
            continue
        if cell.value in seen:
            return True
        seen.add(cell.value)
    return False


class SudokuCheck:
    """Verifies that no row, column or box of a board repeats a number."""

    def __init__(self, board: SudokuBoard | None = None):
        self.board = board if board is not None else SudokuBoard()

    def check_solution(self):
        """Return True if no non-empty number repeats in any row, column or box."""
        return not any(_has_repeat(unit) for unit in _units(self.board.grid))

    def check_solution_async(self):
        """Run the check on a worker thread and wait for its result."""
        with ThreadPoolExecutor(max_workers=1) as executor:
            return executor.submit(self.check_solution).result()