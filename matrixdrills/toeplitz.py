"""Toeplitz matrices stored as their first row followed by their first column."""

from __future__ import annotations

import sys
from collections.abc import Sequence

DEFAULT_VALUES: tuple[int, ...] = (2, 3, 4, 5, 6, 7, 8, 9, 10)
DEFAULT_ORDER = 5


def toeplitz_get(values: Sequence[int], i: int, j: int) -> int:
    """Look up element ``(i, j)`` of the packed Toeplitz matrix.

    ``values`` holds the first row and then the rest of the first column.
    When ``i >= j`` the index is ``i - j``; otherwise it is ``len(values) // 2 + j - i``.
    """
    if not values or len(values) % 2 == 0:
        raise ValueError("a packed Toeplitz matrix holds an odd, non-zero number of values")
    if i < 0 or j < 0:
        raise IndexError(f"({i}, {j}) has a negative coordinate")
    index = i - j if i >= j else len(values) // 2 + j - i
    if index >= len(values):
        raise IndexError(f"({i}, {j}) is outside the matrix")
    return values[index]


def render_toeplitz(values: Sequence[int], n: int) -> str:
    """The ``n`` x ``n`` matrix as text, one line per row."""
    if n <= 0 or len(values) != 2 * n - 1:
        raise ValueError(f"an order {n} matrix needs {2 * n - 1} values, got {len(values)}")
    span = range(n)
    return "".join(
        "".join(f" {toeplitz_get(values, column, row)} " for column in span) + "\n"
        for row in span
    )


def main(argv: list[str] | None = None) -> int:
    """Print the sample Toeplitz matrix and look up one element."""
    del argv
    print(render_toeplitz(DEFAULT_VALUES, DEFAULT_ORDER), end="")
    print("-- Search number --")
    print()
    try:
        i = int(input("I: "))
        print()
        j = int(input("J: "))
        result = toeplitz_get(DEFAULT_VALUES, i, j)
    except (ValueError, EOFError, IndexError) as exc:
        print(f"invalid input: {exc}", file=sys.stderr)
        return 1
    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())