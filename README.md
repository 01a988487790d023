# sudokuklas

The pieces of a Sudoku game: a 9×9 board with its placement rules, a check for
repeated numbers, the effect of a key press on the selected cell, CSV save files,
and drawing the board onto a pygame surface.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `sudokuklas.board`

- `Cell`: a dataclass with `value` (0 means empty), `initial` and `editable`.
- `SudokuBoard`: holds `grid`, a 9×9 list of lists of `Cell`, plus
  `selected_cell` (a `(row, col)` tuple or `None`) and `difficulty` (an int, 0 at start).
  - `select_cell(row, col)` selects a cell; `-1` in either coordinate clears the selection.
  - `is_number_valid(row, col, num)` is true when `num` appears nowhere in that row,
    column or 3×3 box, the cell itself included. A position outside the board raises
    `IndexError`.
  - `set_cell_value(row, col, value, initial=False)` stores the value and the
    `initial` flag only when `is_number_valid` allows it, and returns whether it did.
  - `is_board_filled()` is true when no cell is 0.

The module also defines the layout constants `WINDOW_WIDTH`, `WINDOW_HEIGHT`,
`BOARD_SIZE`, `BOX_SIZE`, `CELL_SIZE` and `FONT_PATH`.

### `sudokuklas.check`

`SudokuCheck(board)` (a fresh board when none is given):

- `check_solution()` returns `True` when no non-zero number repeats in any row,
  column or 3×3 box. Empty cells are ignored, so a partly filled board can pass.
- `check_solution_async()` runs the same check on a worker thread and waits for
  the result.

### `sudokuklas.input_handler`

- `Key`: an enum of `NUM0` … `NUM9` and `DELETE`.
- `InputHandler(board)`: `handle_key_press(key)` acts on the selected cell and returns
  whether the board changed. Nothing happens when no cell is selected or the cell is
  not editable. `NUM1` … `NUM9` place that digit if it does not already appear
  elsewhere in the row, column or box and the board's `set_cell_value` accepts it;
  `NUM0` does nothing. `DELETE` asks the board to set the cell to 0, which goes
  through the same `is_number_valid` rule, so it only succeeds when no other cell in
  that row, column or box is empty.

### `sudokuklas.storage`

`FileHandler(board)`:

- `save_board_to_file(filename)` writes nine lines of comma-terminated values
  (`5,0,0,...,`) and then `difficulty,<n>`.
- `load_board_from_file(filename)` reads such a file back. Non-zero values are marked
  `initial`, zeros are not; a `difficulty,<n>` line sets the board's `difficulty`.

The file name must be letters, digits and underscores followed by `.csv`, otherwise
`ValueError` is raised. Loading a file that does not exist raises `FileNotFoundError`;
a file with fewer than nine rows, or a row without nine values, raises `ValueError`.

### `sudokuklas.graphics`

`Graphics(board).draw(surface)` draws the board onto a pygame surface: a white
background, the numbers (blue for initial cells, black for the rest), thin cell lines,
thick lines around the 3×3 boxes, and a blue outline with a translucent fill on the
selected cell. It uses `arial.ttf` at size 30 when that file can be loaded and
pygame's default font otherwise.

## Example

```python
from sudokuklas.board import SudokuBoard
from sudokuklas.check import SudokuCheck
from sudokuklas.input_handler import InputHandler, Key
from sudokuklas.storage import FileHandler

board = SudokuBoard()
board.select_cell(0, 0)
InputHandler(board).handle_key_press(Key.NUM5)   # True: 5 placed at (0, 0)

print(SudokuCheck(board).check_solution())      # True: nothing repeats
FileHandler(board).save_board_to_file("save.csv")
```

## What this package does not do

It is a set of building blocks, not a playable game. There is no command to run,
no window, menu or event loop, and nothing that generates puzzles or solves them:
a board starts empty and is filled through `set_cell_value`, `InputHandler` or a
loaded save file.