"""Saving and loading boards as CSV files."""

from __future__ import annotations

import re
from pathlib import Path

from .board import BOARD_SIZE, SudokuBoard

_FILENAME = re.compile(r"[a-zA-Z0-9_]+\.csv")


def _check_filename(filename: str) -> None:
    if not _FILENAME.fullmatch(filename):
        raise ValueError(f"invalid filename format: {filename!r}")


def _parse(text: str) -> tuple[list[list[int]], int | None]:
    lines = text.splitlines()
    if len(lines) < BOARD_SIZE:
        raise ValueError("board file has too few rows")
    rows = []
    for line in lines[:BOARD_SIZE]:
        fields = [field.strip() for field in line.split(",") if field.strip()]
        if len(fields) != BOARD_SIZE:
            raise ValueError(f"board row has {len(fields)} values: {line!r}")
        rows.append([int(field) for field in fields])
    difficulty = None
    if len(lines) > BOARD_SIZE:
        label, _, rest = lines[BOARD_SIZE].partition(",")
        if label == "difficulty":
            difficulty = int(rest.split(",")[0])
    return rows, difficulty


class FileHandler:
    """Reads and writes a board in the game's CSV save format."""

    def __init__(self, board: SudokuBoard | None = None):
        self.board = board if board is not None else SudokuBoard()

    def save_board_to_file(self, filename):
        """Write the board's values and difficulty to filename."""
        _check_filename(filename)
        with open(filename, "w", encoding="ascii", newline="") as file:
            for row in self.board.grid:
                file.write("".join(f"{cell.value}," for cell in row) + "\n")
            file.write(f"difficulty,{self.board.difficulty}\n")

    def load_board_from_file(self, filename):
        """Read values from filename; non-zero values become initial cells."""
        if not Path(filename).exists():
            raise FileNotFoundError(f"file {filename} does not exist")
        _check_filename(filename)
        with open(filename, encoding="ascii") as file:
            rows, difficulty = _parse(file.read())
        for cells, values in zip(self.board.grid, rows):
            for cell, value in zip(cells, values):
                cell.value = value
                cell.initial = value != 0
        if difficulty is not None:
            self.board.difficulty = difficulty