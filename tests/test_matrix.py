import pytest

from matrixdrills.matrix import Diagonal, LowerTriangular, Matrix, Symmetric, Toeplitz


def _grid(matrix):
    return [[matrix.get(i, j) for j in range(matrix.cols)] for i in range(matrix.rows)]


def test_non_square_rejected():
    matrix = Toeplitz(3)
    with pytest.raises(ValueError):
        Matrix.__init__(matrix, 3, 4)


def test_border_characters():
    m = Toeplitz(3)
    assert m.border_character(0, 0) == "┌"
    assert m.border_character(0, 2) == "┐"
    assert m.border_character(2, 0) == "└"
    assert m.border_character(2, 2) == "┘"
    assert m.border_character(1, 1) == "|"


def test_get_before_load():
    with pytest.raises(RuntimeError):
        Toeplitz(3).get(0, 0)


@pytest.mark.parametrize("cls", [Diagonal, LowerTriangular, Symmetric, Toeplitz])
def test_load_wrong_length(cls):
    m = cls(4)
    with pytest.raises(ValueError):
        m.load(range(m.storage_size() + 1))


def test_diagonal_get_is_one_based():
    m = Diagonal(5)
    m.load([10, 20, 30, 40, 50])
    assert [m.get(k, k) for k in range(1, 6)] == [10, 20, 30, 40, 50]
    assert m.get(1, 2) == 0
    assert m.get(0, 0) == 0
    with pytest.raises(IndexError):
        m.get(6, 6)


def test_diagonal_render_matches_get():
    m = Diagonal(5)
    m.load([10, 20, 30, 40, 50])
    lines = m.render().splitlines()
    rows = [[int(c) for c in line[1:-1].split()] for line in lines]
    assert rows == [[m.get(i + 1, j + 1) for j in range(5)] for i in range(5)]


def test_lower_triangular_layout():
    m = LowerTriangular(5)
    values = list(range(1, m.storage_size() + 1))
    m.load(values)
    grid = _grid(m)
    assert all(grid[i][j] == 0 for i in range(5) for j in range(5) if j > i)
    assert [grid[i][j] for i in range(5) for j in range(i + 1)] == values


def test_lower_triangular_out_of_range():
    m = LowerTriangular(3)
    m.load(range(m.storage_size()))
    with pytest.raises(IndexError):
        m.get(3, 0)


def test_symmetric_is_symmetric_and_uses_all_values():
    m = Symmetric(5)
    values = list(range(1, m.storage_size() + 1))
    m.load(values)
    grid = _grid(m)
    assert all(grid[i][j] == grid[j][i] for i in range(5) for j in range(5))
    assert [grid[i][j] for i in range(5) for j in range(i + 1)] == values


def test_toeplitz_worked_example():
    m = Toeplitz(5)
    m.load([2, 3, 4, 5, 7, 1, 6, 8, 9])
    assert _grid(m)[0] == [2, 3, 4, 5, 7]
    assert [row[0] for row in _grid(m)] == [2, 1, 6, 8, 9]


def test_toeplitz_diagonals_constant():
    m = Toeplitz(5)
    m.load(range(9))
    assert all(m.get(i, j) == m.get(i + 1, j + 1) for i in range(4) for j in range(4))


def test_render_frame():
    m = Toeplitz(5)
    m.load(range(9))
    lines = m.render().splitlines()
    assert len(lines) == 5
    assert lines[0][0] == "┌" and lines[0][-1] == "┐"
    assert lines[-1][0] == "└" and lines[-1][-1] == "┘"
    assert all(line[0] == "|" and line[-1] == "|" for line in lines[1:-1])