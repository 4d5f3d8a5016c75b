"""Interactive menu for exploring compactly stored square matrices."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from matrixdrills.matrix import Diagonal, LowerTriangular, Matrix, Symmetric, Toeplitz

MENU_SIZE = 5
EXIT_CHOICE = 5

_CHOICES: dict[int, type[Matrix]] = {
    1: Diagonal,
    2: LowerTriangular,
    3: Symmetric,
    4: Toeplitz,
}


def menu_text() -> str:
    """The main menu entries."""
    return (
        "1. Diagonal\n"
        "2. Lower triangular matrix\n"
        "3. Symmetric matrix\n"
        "4. Toeplitz matrix\n"
        "5. Exit\n"
    )


def build_matrix(choice: int) -> Matrix:
    """A fresh, empty matrix for a menu choice from 1 to 4."""
    try:
        cls = _CHOICES[choice]
    except KeyError:
        raise ValueError(f"no matrix for menu choice {choice}") from None
    return cls(MENU_SIZE)


def matrix_menu(
    matrix: Matrix,
    read_int: Callable[[str], int],
    write: Callable[[str], object],
) -> None:
    """Show a loaded matrix and answer cell lookups until the user picks exit."""
    while True:
        write(matrix.render())
        write("1. Select one item \n")
        write("2. Exit \n\n")
        option = read_int("Option: ")
        if option == 2:
            return
        if option != 1:
            continue
        write(matrix.render())
        write("Specify coordinates \n")
        i = read_int("I: ")
        j = read_int("J: ")
        try:
            result = matrix.get(i, j)
        except IndexError as exc:
            write(f"Invalid coordinates: {exc}\n\n")
            continue
        write(f"Result: {result} \n\n")


def _clear() -> None:
    if sys.stdout.isatty():
        sys.stdout.write("\033[H\033[2J")
        sys.stdout.flush()


def _read_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt))
        except ValueError:
            print("Please type a whole number.")


def _value_prompts(matrix: Matrix) -> tuple[str, list[str]]:
    size = matrix.storage_size()
    if isinstance(matrix, Diagonal):
        header = f"Initializing Diagonal matrix of size {matrix.rows}x{matrix.cols}"
        return header, [f"Value #{k}: " for k in range(1, size + 1)]
    if isinstance(matrix, LowerTriangular):
        header = "Initializing matrix using Lower Triangular method."
        prompts = [
            f"Input for ({j}, {i}): " for i in range(matrix.rows) for j in range(i + 1)
        ]
        return header, prompts
    if isinstance(matrix, Symmetric):
        return "Initializing Symmetric Matrix.", [f"Value for #{k}: " for k in range(1, size + 1)]
    return "Initializing Toeplitz Matrix", [
        f"Type the value for value #{k}: " for k in range(1, size + 1)
    ]


def _initialize(matrix: Matrix) -> None:
    _clear()
    header, prompts = _value_prompts(matrix)
    print(header)
    matrix.load(_read_int(prompt) for prompt in prompts)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive matrix menu."""
    del argv
    try:
        while True:
            print("Menu:")
            print(menu_text(), end="")
            choice = _read_int("Enter your choice: ")
            if choice == EXIT_CHOICE:
                print("Exiting...")
                return 0
            try:
                matrix = build_matrix(choice)
            except ValueError:
                _clear()
                print("Invalid choice. Please try again.")
                continue
            _initialize(matrix)
            matrix_menu(matrix, _read_int, sys.stdout.write)
            _clear()
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())