"""Sparse matrices in coordinate (three-column) and compressed-row form."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import accumulate
from operator import attrgetter


@dataclass(frozen=True)
class Entry:
    """One non-zero element of a sparse matrix, with 1-based coordinates."""

    row: int
    column: int
    value: int


def _check_shape(rows: int, columns: int) -> None:
    if rows <= 0 or columns <= 0:
        raise ValueError("a matrix needs a positive number of rows and columns")


def _check_entries(rows: int, columns: int, entries: Iterable[Entry]) -> None:
    for entry in entries:
        if not (1 <= entry.row <= rows and 1 <= entry.column <= columns):
            raise ValueError(
                f"entry ({entry.row}, {entry.column}) is outside a {rows}x{columns} matrix"
            )


def _render_line(cells: Iterable[int]) -> str:
    return "".join(f" {cell} " for cell in cells) + "\n"


def coordinate_lookup(entries: Iterable[Entry], row: int, column: int) -> int:
    """Value stored at ``(row, column)``; the last matching entry wins, zero if none."""
    value = 0
    for entry in entries:
        if entry.row == row and entry.column == column:
            value = entry.value
    return value


def render_coordinate(rows: int, columns: int, entries: Iterable[Entry]) -> str:
    """The full matrix described by coordinate entries, one line per row."""
    _check_shape(rows, columns)
    cells = {(entry.row, entry.column): entry.value for entry in entries}
    return "".join(
        _render_line(cells.get((row, column), 0) for column in range(1, columns + 1))
        for row in range(1, rows + 1)
    )


def compressed_rows(rows: int, entries: Iterable[Entry]) -> list[int]:
    """Row offsets of the compressed form: ``rows + 1`` prefix counts starting at zero."""
    if rows <= 0:
        raise ValueError("a matrix needs a positive number of rows")
    counts: Counter[int] = Counter()
    for entry in entries:
        if not 1 <= entry.row <= rows:
            raise ValueError(f"row {entry.row} is outside a matrix of {rows} rows")
        counts[entry.row] += 1
    return list(accumulate((counts[row] for row in range(1, rows + 1)), initial=0))


def render_compressed(rows: int, columns: int, entries: Iterable[Entry]) -> str:
    """The full matrix rebuilt from its compressed-row form, one line per row."""
    _check_shape(rows, columns)
    ordered = sorted(entries, key=attrgetter("row"))
    _check_entries(rows, columns, ordered)
    offsets = compressed_rows(rows, ordered)
    lines = []
    for row in range(1, rows + 1):
        segment = ordered[offsets[row - 1] : offsets[row]]
        by_column = {entry.column: entry.value for entry in segment}
        lines.append(_render_line(by_column.get(column, 0) for column in range(1, columns + 1)))
    return "".join(lines)


def _ask_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt))
        except ValueError:
            print("Please type a whole number.")


def _ask_in_range(prompt: str, low: int, high: int, complaint: str | None = None) -> int:
    while True:
        value = _ask_int(prompt)
        if low <= value <= high:
            return value
        if complaint:
            print(complaint)


def _print_spaced(text: str) -> None:
    for line in text.splitlines():
        print(line + "\n\n")


def _read_coordinate(rows: int, columns: int, count: int) -> list[Entry]:
    entries = []
    for _ in range(count):
        row = _ask_in_range("Row: ", 0, rows, f"Row must be lower or equal to {rows}")
        column = _ask_in_range(
            "Column: ", 0, columns, f"Column must be lower or equal to {columns}"
        )
        value = _ask_int("Value: ")
        entries.append(Entry(row, column, value))
        print("Accepted ✅")
        print("--------------")
    return entries


def _read_compressed(rows: int, columns: int, count: int) -> list[Entry]:
    entries = []
    for _ in range(count):
        row = _ask_in_range("Row: ", 1, rows)
        column = _ask_in_range("Column: ", 1, columns)
        value = _ask_int("Value: ")
        entries.append(Entry(row, column, value))
        print("Accepted ✅")
    return entries


def _run_coordinate() -> None:
    rows, columns, count = 7, 5, 10
    entries = _read_coordinate(rows, columns, count)
    print("--- Information of the matrix ---")
    print(f"| Rows: {rows}| Columns: {columns}|")
    print("---------------------------------")
    for entry in entries:
        print(f"({entry.row},{entry.column}): {entry.value}")
    print("\n\n")
    _print_spaced(render_coordinate(rows, columns, entries))


def _run_compressed() -> None:
    rows, columns, count = 8, 9, 8
    entries = _read_compressed(rows, columns, count)
    for offset in compressed_rows(rows, entries)[1:]:
        print(offset)
    _print_spaced(render_compressed(rows, columns, entries))


def main(argv: Sequence[str] | None = None) -> int:
    """Read sparse entries interactively and print the full matrix."""
    parser = argparse.ArgumentParser(description="Sparse matrix representations.")
    parser.add_argument(
        "--format",
        choices=["coordinate", "compressed"],
        default="coordinate",
        help="representation used to store the entries",
    )
    args = parser.parse_args(argv)
    try:
        if args.format == "coordinate":
            _run_coordinate()
        else:
            _run_compressed()
    except EOFError:
        print("input ended early", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())