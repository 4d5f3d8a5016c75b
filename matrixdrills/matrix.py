"""Square matrices with special structure, each kept in compact storage."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable


class Matrix(ABC):
    """A square matrix whose non-trivial cells live in a flat tuple."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows != cols:
            raise ValueError(
                "Matrix must be square for diagonal, lower triangular, "
                "upper triangular, and symmetric matrices."
            )
        if rows <= 0:
            raise ValueError("matrix size must be positive")
        self.rows = rows
        self.cols = cols
        self._values: tuple[int, ...] | None = None

    @abstractmethod
    def storage_size(self) -> int:
        """Number of values the compact storage holds."""

    def load(self, values: Iterable[int]) -> None:
        """Fill the compact storage, in the order the values are entered."""
        stored = tuple(values)
        expected = self.storage_size()
        if len(stored) != expected:
            raise ValueError(f"expected {expected} values, got {len(stored)}")
        self._values = stored

    @property
    def values(self) -> tuple[int, ...]:
        if self._values is None:
            raise RuntimeError("matrix has no values loaded")
        return self._values

    @abstractmethod
    def get(self, i: int, j: int) -> int:
        """Value of the cell at ``(i, j)``."""

    def _check(self, i: int, j: int) -> None:
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"({i}, {j}) is outside a {self.rows}x{self.cols} matrix")

    def _cell(self, i: int, j: int) -> int:
        return self.get(i, j)

    def border_character(self, row: int, column: int) -> str:
        """Box-drawing character framing the matrix at 0-based ``(row, column)``."""
        last_row = self.rows - 1
        last_col = self.cols - 1
        if row == 0 and column == 0:
            return "┌"
        if row == 0 and column == last_col:
            return "┐"
        if row == last_row and column == 0:
            return "└"
        if row == last_row and column == last_col:
            return "┘"
        return "|"

    def render(self) -> str:
        """The full matrix as framed text, one line per row."""
        lines = []
        for i in range(self.rows):
            cells = "".join(f" {self._cell(i, j)} " for j in range(self.cols))
            left = self.border_character(i, 0)
            right = self.border_character(i, self.cols - 1)
            lines.append(f"{left}{cells}{right}\n")
        return "".join(lines)


class Diagonal(Matrix):
    """Only the main diagonal is stored; ``get`` takes 1-based coordinates."""

    def __init__(self, size: int) -> None:
        super().__init__(size, size)

    def storage_size(self) -> int:
        return self.rows

    def get(self, i: int, j: int) -> int:
        if i != j or i <= 0 or j <= 0:
            return 0
        if i > self.rows:
            raise IndexError(f"({i}, {j}) is outside a {self.rows}x{self.cols} matrix")
        return self.values[i - 1]

    def _cell(self, i: int, j: int) -> int:
        return self.values[i] if i == j else 0


class LowerTriangular(Matrix):
    """Cells with ``j <= i`` stored row by row; ``get`` takes 0-based coordinates."""

    def __init__(self, size: int) -> None:
        super().__init__(size, size)

    def storage_size(self) -> int:
        return self.rows * (self.rows + 1) // 2

    def get(self, i: int, j: int) -> int:
        self._check(i, j)
        if j > i:
            return 0
        return self.values[i * (i + 1) // 2 + j]


class Symmetric(Matrix):
    """The lower triangle stored row by row, mirrored above the diagonal."""

    def __init__(self, size: int) -> None:
        super().__init__(size, size)

    def storage_size(self) -> int:
        return self.rows * (self.rows + 1) // 2

    def get(self, i: int, j: int) -> int:
        self._check(i, j)
        if j > i:
            i, j = j, i
        return self.values[i * (i + 1) // 2 + j]


class Toeplitz(Matrix):
    """The first row followed by the rest of the first column."""

    def __init__(self, size: int) -> None:
        super().__init__(size, size)

    def storage_size(self) -> int:
        return self.rows + self.cols - 1

    def get(self, i: int, j: int) -> int:
        self._check(i, j)
        if i <= j:
            return self.values[j - i]
        return self.values[self.rows - 1 + i - j]