"""Bit masks used as compact sets of letters."""

from __future__ import annotations

import argparse
import sys

_FIRST_LETTER = ord("a")
_LAST_LETTER = ord("z")


def _as_int(value: int | str) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return value


def contains_bits(repository: int | str, letter: int | str) -> bool:
    """Return True when every bit set in ``letter`` is also set in ``repository``."""
    repo = _as_int(repository)
    mask = _as_int(letter)
    return (repo & mask) == mask


def duplicated_letters(text: str) -> list[str]:
    """Return each repeated occurrence of a lower-case letter, in order of appearance.

    Every letter is tracked as one bit of an integer; a letter whose bit is
    already set when it is met again is reported.
    """
    seen = 0
    duplicates: list[str] = []
    for char in text:
        code = ord(char)
        if not _FIRST_LETTER <= code <= _LAST_LETTER:
            raise ValueError(f"only lower-case letters a-z are supported, got {char!r}")
        bit = 1 << (code - _FIRST_LETTER)
        if seen & bit:
            duplicates.append(char)
        seen |= bit
    return duplicates


def main(argv: list[str] | None = None) -> int:
    """Show the bitwise membership test, then report duplicated letters in words."""
    parser = argparse.ArgumentParser(description="Find duplicated letters with bit masks.")
    parser.add_argument("words", nargs="*", default=["finding"], help="words to inspect")
    args = parser.parse_args(argv)

    repository = 0 | ord("z")
    letter = ord("f")
    print(f"{repository & letter} ")
    if contains_bits(repository, letter):
        print("Letter duplicated!")
    else:
        print("Letter is not duplicated!")

    for word in args.words:
        try:
            found = duplicated_letters(word)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
        for char in found:
            print(f"Letter {char} is duplicated ")
    return 0


if __name__ == "__main__":
    sys.exit(main())