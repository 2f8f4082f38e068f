"""Reading the command-line numbers and turning them into ranks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647


class ParseError(ValueError):
    """An argument is not a 32-bit integer, or the numbers repeat."""


def parse_int(text: str) -> int:
    """Parse a signed decimal 32-bit integer.

    An optional leading ``+`` or ``-`` is allowed, followed by digits only.
    A string with no digits at all reads as 0.
    """
    if text == str(INT_MIN):
        return INT_MIN
    sign = 1
    digits = text
    if text.startswith("-"):
        sign = -1
        digits = text[1:]
    elif text.startswith("+"):
        digits = text[1:]
    number = 0
    for char in digits:
        if not "0" <= char <= "9":
            raise ParseError(f"not a number: {text!r}")
        digit = ord(char) - ord("0")
        if number > (INT_MAX - digit) // 10:
            raise ParseError(f"out of range: {text!r}")
        number = number * 10 + digit
    return sign * number


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Parse every argument with :func:`parse_int`."""
    return [parse_int(arg) for arg in args]


def has_duplicates(values: Sequence[int]) -> bool:
    """True when some value occurs more than once."""
    ordered = sorted(values)
    return any(x == y for x, y in zip(ordered, ordered[1:]))


def to_ranks(values: Sequence[int]) -> list[int]:
    """Replace each value by its position in sorted order."""
    position: dict[int, int] = {}
    for index, value in enumerate(sorted(values)):
        position.setdefault(value, index)
    return [position[value] for value in values]