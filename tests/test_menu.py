import pytest

from matrixdrills.matrix import Diagonal, LowerTriangular, Symmetric, Toeplitz
from matrixdrills.menu import build_matrix, main, matrix_menu, menu_text


def _reader(answers):
    it = iter(answers)
    return lambda prompt: next(it)


def _loaded_toeplitz():
    m = Toeplitz(5)
    m.load([2, 3, 4, 5, 7, 1, 6, 8, 9])
    return m


def test_menu_text_lines():
    lines = menu_text().splitlines()
    assert lines[0] == "1. Diagonal"
    assert lines[-1] == "5. Exit"
    assert len(lines) == 5


@pytest.mark.parametrize(
    "choice, cls",
    [(1, Diagonal), (2, LowerTriangular), (3, Symmetric), (4, Toeplitz)],
)
def test_build_matrix(choice, cls):
    m = build_matrix(choice)
    assert type(m) is cls
    assert m.rows == 5 and m.cols == 5


@pytest.mark.parametrize("choice", [0, 5, 9])
def test_build_matrix_rejects(choice):
    with pytest.raises(ValueError):
        build_matrix(choice)


def test_matrix_menu_lookup():
    m = _loaded_toeplitz()
    out = []
    matrix_menu(m, _reader([1, 0, 0, 2]), out.append)
    text = "".join(out)
    assert "Result: 2 \n\n" in text
    assert "Specify coordinates \n" in text


def test_matrix_menu_ignores_unknown_option():
    m = _loaded_toeplitz()
    out = []
    matrix_menu(m, _reader([3, 2]), out.append)
    assert out.count(m.render()) == 2


def test_matrix_menu_bad_coordinates():
    m = _loaded_toeplitz()
    out = []
    matrix_menu(m, _reader([1, 9, 9, 2]), out.append)
    text = "".join(out)
    assert "Invalid coordinates" in text
    assert "Result:" not in text


def _feed(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def test_main_diagonal_session(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "1", "2", "3", "4", "5", "1", "2", "2", "2", "5"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Result: 2 \n" in out
    assert "Exiting..." in out


def test_main_invalid_choice(monkeypatch, capsys):
    _feed(monkeypatch, ["9", "5"])
    assert main([]) == 0
    assert "Invalid choice. Please try again." in capsys.readouterr().out


def test_main_input_ends(monkeypatch, capsys):
    def _eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    assert main([]) == 0
    assert "Menu:" in capsys.readouterr().out