"""Small recursion exercises: tree recursion and counting towards zero."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator


def tree_recursion(n: int) -> Iterator[int]:
    """Yield ``n`` and then recurse twice on ``n - 1``, while ``n`` is positive."""
    if n > 0:
        yield n
        yield from tree_recursion(n - 1)
        yield from tree_recursion(n - 1)


def countdown(i: int) -> list[int]:
    """Return the values visited while stepping ``i`` towards zero, zero excluded."""
    step = -1 if i > 0 else 1
    return list(range(i, 0, step))


def general_countdown(i: int) -> list[int]:
    """Return the trace of visiting ``i``, counting from the next step to zero, then ``i`` again."""
    if i > 0:
        return [i, *countdown(i - 1), i]
    if i < 0:
        return [i, *countdown(i + 1), i]
    return []


def main(argv: list[str] | None = None) -> int:
    """Print a tree recursion trace and a countdown trace."""
    parser = argparse.ArgumentParser(description="Recursion traces.")
    parser.add_argument("--tree", type=int, default=5, help="depth of the tree recursion")
    parser.add_argument("--count", type=int, default=10, help="start of the countdown")
    args = parser.parse_args(argv)

    for value in tree_recursion(args.tree):
        print(f"{value} ")
    for value in general_countdown(args.count):
        print(f"i => {value} ")
    print(f"Final number is: {args.count} ")
    return 0


if __name__ == "__main__":
    sys.exit(main())