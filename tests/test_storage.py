import pytest

from sudokuklas.board import SudokuBoard
from sudokuklas.storage import FileHandler


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_save_format(workdir):
    board = SudokuBoard()
    board.grid[0][0].value = 5
    FileHandler(board).save_board_to_file("save.csv")
    lines = (workdir / "save.csv").read_text().splitlines()
    assert lines[0] == "5,0,0,0,0,0,0,0,0,"
    assert lines[1] == "0,0,0,0,0,0,0,0,0,"
    assert lines[9] == "difficulty,0"
    assert len(lines) == 10

    loaded = SudokuBoard()
    FileHandler(loaded).load_board_from_file("save.csv")
    assert loaded.grid[0][0].value == 5
    assert loaded.grid[1][0].value == 0
    assert loaded.difficulty == 0


def test_round_trip(workdir):
    board = SudokuBoard()
    board.set_cell_value(0, 0, 3)
    board.set_cell_value(4, 7, 9)
    board.set_cell_value(8, 2, 1)
    board.difficulty = 20
    FileHandler(board).save_board_to_file("game_1.csv")

    loaded = SudokuBoard()
    FileHandler(loaded).load_board_from_file("game_1.csv")
    assert [[c.value for c in row] for row in loaded.grid] == [
        [c.value for c in row] for row in board.grid
    ]
    assert loaded.difficulty == 20


def test_loaded_values_marked_initial(workdir):
    board = SudokuBoard()
    board.set_cell_value(2, 3, 6)
    FileHandler(board).save_board_to_file("save.csv")
    loaded = SudokuBoard()
    loaded.grid[0][0].initial = True
    FileHandler(loaded).load_board_from_file("save.csv")
    assert loaded.grid[2][3].initial is True
    assert loaded.grid[0][0].initial is False


@pytest.mark.parametrize("name", ["save.txt", "my save.csv", "save-1.csv", ".csv"])
def test_save_rejects_bad_filename(workdir, name):
    with pytest.raises(ValueError):
        FileHandler(SudokuBoard()).save_board_to_file(name)
    assert list(workdir.iterdir()) == []


def test_load_missing_file(workdir):
    with pytest.raises(FileNotFoundError):
        FileHandler(SudokuBoard()).load_board_from_file("missing.csv")


def test_load_rejects_bad_filename(workdir):
    (workdir / "save.txt").write_text("0,\n")
    with pytest.raises(ValueError):
        FileHandler(SudokuBoard()).load_board_from_file("save.txt")


def test_load_rejects_malformed_content(workdir):
    (workdir / "broken.csv").write_text("1,2,3,\n")
    board = SudokuBoard()
    with pytest.raises(ValueError):
        FileHandler(board).load_board_from_file("broken.csv")
    assert all(cell.value == 0 for row in board.grid for cell in row)


def test_load_without_difficulty_line_keeps_difficulty(workdir):
    row = "0,0,0,0,0,0,0,0,0,\n"
    (workdir / "plain.csv").write_text("7,0,0,0,0,0,0,0,0,\n" + row * 8)
    board = SudokuBoard()
    board.difficulty = 14
    FileHandler(board).load_board_from_file("plain.csv")
    assert board.grid[0][0].value == 7
    assert board.difficulty == 14