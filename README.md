# matrixdrills

A small collection of data-structure drills: packed storage for special
square matrices (diagonal, lower and upper triangular, symmetric, Toeplitz),
two sparse-matrix representations, bitmask duplicate detection and a pair of
recursion exercises. Each drill is a plain Python module you can import, and
each also comes with an interactive command. There are no third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

### Packed triangular matrices (`matrixdrills.triangular`)

A triangular matrix of order `n` needs only `triangular_size(n)` stored
values. `PackedTriangular(n, values, layout)` keeps them in a tuple and maps
a 1-based `(row, column)` to its slot according to a `Layout`:
`LOWER_ROW_MAJOR` (the default), `LOWER_COLUMN_MAJOR` or `UPPER_ROW_MAJOR`.

```python
from matrixdrills.triangular import Layout, PackedTriangular, triangular_size

n = 3
values = list(range(1, triangular_size(n) + 1))
matrix = PackedTriangular(n, values, Layout.LOWER_ROW_MAJOR)
print(matrix.get(3, 2))   # 5
print(matrix.rows())      # the full matrix as a list of rows
print(matrix.render())
```

`get` returns 0 outside the stored triangle and raises `IndexError` outside
the matrix; a wrong number of values raises `ValueError`. The index formulas
are also available on their own as `lower_row_major_index(row, column)`,
`lower_column_major_index(n, row, column)` and
`upper_row_major_index(n, row, column)`, which raise `ValueError` for a cell
outside their triangle. `tridiagonal_size(n)` gives the number of cells with
`|i - j| <= 1`.

### Toeplitz matrices (`matrixdrills.toeplitz`)

A Toeplitz matrix is stored as its first row followed by the rest of its
first column, an odd number of values:

```python
from matrixdrills.toeplitz import toeplitz_get, render_toeplitz

values = [2, 3, 4, 5, 6, 7, 8, 9, 10]
print(toeplitz_get(values, 2, 0))   # 4
print(render_toeplitz(values, 5))
```

Coordinates are 0-based. Negative or out-of-range coordinates raise
`IndexError`; `render_toeplitz` needs exactly `2 * n - 1` values.

### The matrix family (`matrixdrills.matrix`)

`Matrix` is an abstract base with the subclasses `Diagonal`,
`LowerTriangular`, `Symmetric` and `Toeplitz`, each built from a positive
size. Each reports how many values it stores with `storage_size()`, takes
them with `load()`, answers `get(i, j)` and draws itself framed with
box-drawing corners via `render()`; `border_character(row, column)` gives the
frame character for a cell.

```python
from matrixdrills.matrix import Diagonal, Symmetric

diagonal = Diagonal(3)
diagonal.load([4, 5, 6])
print(diagonal.get(2, 2))   # 5
print(diagonal.render())

symmetric = Symmetric(2)
symmetric.load([1, 2, 3])
print(symmetric.get(0, 1))  # 2
```

`Diagonal.get` takes 1-based coordinates and returns 0 off the diagonal; the
other classes take 0-based coordinates and raise `IndexError` outside the
matrix. `load` raises `ValueError` for the wrong number of values, and
reading a matrix before `load` raises `RuntimeError`.

### Sparse matrices (`matrixdrills.sparse`)

Non-zero values are `Entry(row, column, value)` records with 1-based
coordinates.

- `coordinate_lookup(entries, row, column)` returns the stored value, the
  last matching entry winning, or 0.
- `render_coordinate(rows, columns, entries)` prints the full grid from the
  coordinate (three-column) form.
- `compressed_rows(rows, entries)` returns the `rows + 1` row offsets of the
  compressed-row form, starting at 0.
- `render_compressed(rows, columns, entries)` rebuilds the full grid from the
  compressed-row form.

### Bits and recursion

```python
from matrixdrills.bits import contains_bits, duplicated_letters
from matrixdrills.recursion import countdown, general_countdown, tree_recursion

print(duplicated_letters("finding"))     # ['i', 'n']
print(contains_bits(ord("z"), ord("f")))
print(list(tree_recursion(3)))           # [3, 2, 1, 1, 2, 1, 1]
print(countdown(3))                      # [3, 2, 1]
print(general_countdown(3))              # [3, 2, 1, 3]
```

`duplicated_letters` accepts only lower-case `a`-`z` and raises `ValueError`
otherwise.

## Commands

| Command                   | What it does |
|---------------------------|--------------|
| `matrixdrills-menu`       | Menu to build, fill and query 5x5 diagonal, lower triangular, symmetric and Toeplitz matrices |
| `matrixdrills-triangular` | Read a packed triangular matrix, print it and look up a cell; `--layout lower-row\|lower-column\|upper-row` (default `lower-column`) |
| `matrixdrills-toeplitz`   | Print the sample 5x5 Toeplitz matrix and look up a cell |
| `matrixdrills-sparse`     | Enter non-zero values and print the full matrix; `--format coordinate` (7x5, 10 values, the default) or `--format compressed` (8x9, 8 values) |
| `matrixdrills-bits`       | Show the bitmask membership test and the duplicated letters of the given words (default `finding`) |
| `matrixdrills-recursion`  | Print a tree recursion trace and a countdown trace; `--tree N` (default 5), `--count N` (default 10) |

For example:

```
matrixdrills-menu
```

## Limits

- There is no tri-diagonal matrix type; only its storage size is computed.
- Upper triangular matrices have a row-major layout only.
- The interactive commands use fixed sizes and keep nothing between runs.