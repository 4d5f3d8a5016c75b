import pytest

from matrixdrills.recursion import countdown, general_countdown, main, tree_recursion


def test_tree_recursion_small_trace():
    assert list(tree_recursion(3)) == [3, 2, 1, 1, 2, 1, 1]


@pytest.mark.parametrize("n", [0, 1, 2, 5, 8])
def test_tree_recursion_call_count(n):
    assert len(list(tree_recursion(n))) == 2**n - 1


def test_tree_recursion_non_positive_is_empty():
    assert list(tree_recursion(-3)) == []


@pytest.mark.parametrize("n", [1, 4, 9, -1, -6])
def test_countdown_moves_towards_zero(n):
    values = countdown(n)
    assert len(values) == abs(n)
    assert values[0] == n
    assert 0 not in values
    assert all(abs(b) == abs(a) - 1 for a, b in zip(values, values[1:]))


def test_countdown_zero():
    assert countdown(0) == []


@pytest.mark.parametrize("n", [1, 3, 10, -2, -7])
def test_general_countdown_wraps_inner_countdown(n):
    trace = general_countdown(n)
    assert trace[0] == n
    assert trace[-1] == n
    inner = n - 1 if n > 0 else n + 1
    assert trace[1:-1] == countdown(inner)


def test_general_countdown_zero():
    assert general_countdown(0) == []


def test_main_output(capsys):
    assert main(["--tree", "2", "--count", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Final number is: 3 "
    assert lines[0] == "2 "
    assert "i => 3 " in lines