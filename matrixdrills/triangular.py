"""Triangular matrices stored in packed one-dimensional form."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from enum import Enum


class Layout(Enum):
    """How the non-zero triangle of a matrix is laid out in storage."""

    LOWER_ROW_MAJOR = "lower-row"
    LOWER_COLUMN_MAJOR = "lower-column"
    UPPER_ROW_MAJOR = "upper-row"

    @property
    def is_lower(self) -> bool:
        return self is not Layout.UPPER_ROW_MAJOR


def _check_order(n: int) -> None:
    if n <= 0:
        raise ValueError("matrix order must be positive")


def triangular_size(n: int) -> int:
    """Number of cells in the triangle of an ``n`` x ``n`` matrix."""
    _check_order(n)
    return n * (n + 1) // 2


def tridiagonal_size(n: int) -> int:
    """Number of cells with ``|i - j| <= 1`` in an ``n`` x ``n`` matrix."""
    _check_order(n)
    return n + (n - 1) * 2


def lower_row_major_index(row: int, column: int) -> int:
    """Storage index of 1-based ``(row, column)`` in a lower triangle stored row by row."""
    if column < 1 or row < column:
        raise ValueError(f"({row}, {column}) is not in the lower triangle")
    return row * (row - 1) // 2 + column - 1


def lower_column_major_index(n: int, row: int, column: int) -> int:
    """Storage index of 1-based ``(row, column)`` in a lower triangle stored column by column."""
    if column < 1 or row < column or row > n:
        raise ValueError(f"({row}, {column}) is not in the lower triangle")
    return n * (column - 1) - (column - 2) * (column - 1) // 2 + (row - column)


def upper_row_major_index(n: int, row: int, column: int) -> int:
    """Storage index of 1-based ``(row, column)`` in an upper triangle stored row by row."""
    if row < 1 or column < row or column > n:
        raise ValueError(f"({row}, {column}) is not in the upper triangle")
    return n * (row - 1) - (row - 2) * (row - 1) // 2 + (column - row)


class PackedTriangular:
    """An ``n`` x ``n`` triangular matrix keeping only its triangle."""

    def __init__(self, n: int, values: Iterable[int], layout: Layout = Layout.LOWER_ROW_MAJOR) -> None:
        expected = triangular_size(n)
        self.n = n
        self.values = tuple(values)
        self.layout = Layout(layout)
        if len(self.values) != expected:
            raise ValueError(f"expected {expected} values, got {len(self.values)}")

    def _in_triangle(self, row: int, column: int) -> bool:
        return row >= column if self.layout.is_lower else column >= row

    def _index(self, row: int, column: int) -> int:
        if self.layout is Layout.LOWER_ROW_MAJOR:
            return lower_row_major_index(row, column)
        if self.layout is Layout.LOWER_COLUMN_MAJOR:
            return lower_column_major_index(self.n, row, column)
        return upper_row_major_index(self.n, row, column)

    def get(self, row: int, column: int) -> int:
        """Value at 1-based ``(row, column)``; zero outside the stored triangle."""
        if not (1 <= row <= self.n and 1 <= column <= self.n):
            raise IndexError(f"({row}, {column}) is outside a {self.n}x{self.n} matrix")
        if not self._in_triangle(row, column):
            return 0
        return self.values[self._index(row, column)]

    def rows(self) -> list[list[int]]:
        """The full matrix as a list of rows."""
        span = range(1, self.n + 1)
        return [[self.get(row, column) for column in span] for row in span]

    def render(self) -> str:
        """The full matrix as text, one line per row."""
        return "".join("".join(f" {cell} " for cell in row) + "\n" for row in self.rows())


def _ask(prompt: str) -> int:
    return int(input(prompt))


def _run(layout: Layout) -> int:
    rows = _ask("Type the value of I: ")
    columns = _ask("Type the value of J: ")
    if rows <= 0 or columns <= 0:
        print("i or J must not be 0", file=sys.stderr)
        return 1
    if rows != columns:
        print("I and J don't have the same value", file=sys.stderr)
        return 1

    size = triangular_size(rows)
    print(f"Space to occupy: {size} ")
    values: Sequence[int] = [_ask(f"Type a value for #{number}:") for number in range(1, size + 1)]
    print(f"Printing the first space: {values[0]} ")
    print()
    matrix = PackedTriangular(rows, values, layout)
    print(matrix.render(), end="")

    selected_row = _ask("Type your selected row: ")
    selected_column = _ask("Type your selected column: ")
    try:
        result = matrix.get(selected_row, selected_column)
    except IndexError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Result: {result} ")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Read a triangular matrix interactively, print it and look up one cell."""
    parser = argparse.ArgumentParser(description="Packed triangular matrix.")
    parser.add_argument(
        "--layout",
        choices=[layout.value for layout in Layout],
        default=Layout.LOWER_COLUMN_MAJOR.value,
        help="storage layout of the triangle",
    )
    args = parser.parse_args(argv)
    try:
        return _run(Layout(args.layout))
    except (ValueError, EOFError) as exc:
        print(f"invalid input: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())