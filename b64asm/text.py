"""Character classes and word scanning for assembly source lines."""

from __future__ import annotations

_SEPARATORS = " \t,"
_BLANKS = " \t\n"


def next_word(line: str, index: int) -> tuple[str, int]:
    """Read the word that starts at or after ``index``.

    Spaces, tabs and commas before the word are skipped; the word ends at
    a separator, a newline or the end of the line. Returns the word (empty
    if none is left) and the index just past it.
    """
    end = len(line)
    position = index
    while position < end and line[position] in _SEPARATORS:
        position += 1
    start = position
    while position < end and line[position] not in _SEPARATORS and line[position] != "\n":
        position += 1
    return line[start:position], position


def is_blank(line: str) -> bool:
    """Tell whether ``line`` holds only spaces, tabs and newlines."""
    return all(char in _BLANKS for char in line)


def is_number_start(char: str) -> bool:
    """Tell whether ``char`` can begin a number: a digit or a sign."""
    return len(char) == 1 and (char in "+-" or "0" <= char <= "9")


def is_letter(char: str) -> bool:
    """Tell whether ``char`` is an ASCII letter."""
    return len(char) == 1 and ("a" <= char <= "z" or "A" <= char <= "Z")


def parse_unsigned(digits: str) -> int:
    """Fold a run of decimal digits into an int.

    Every character contributes its code offset from '0'; no sign is
    recognised.
    """
    value = 0
    for char in digits:
        value = value * 10 + ord(char) - ord("0")
    return value