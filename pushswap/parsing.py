"""Reading the integers for stack a from command-line arguments."""

from __future__ import annotations

from typing import Sequence

INT_MAX = 2147483647
INT_MIN_MAGNITUDE = 2147483648
MAX_SIGNIFICANT_DIGITS = 10
_WHITESPACE = " \t\n\v\f\r"


class ParseError(ValueError):
    """Raised for any argument that cannot become a stack element."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def is_numeric(token: str) -> bool:
    """True if ``token`` is an optional sign followed by one or more ASCII digits."""
    body = token[1:] if token[:1] in ("+", "-") else token
    return bool(body) and all("0" <= ch <= "9" for ch in body)


def count_significant_digits(token: str) -> int:
    """Count the characters ``1`` to ``9`` in ``token``; zeros do not count."""
    return sum(1 for ch in token if "1" <= ch <= "9")


def parse_int(token: str) -> int:
    """Convert ``token`` to an integer within the 32-bit signed range.

    Leading whitespace and one sign are accepted; anything else that is not
    a digit, or a value out of range, raises ParseError.  A token with no
    digits at all reads as zero.
    """
    rest = token.lstrip(_WHITESPACE)
    sign = -1 if rest[:1] == "-" else 1
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    number = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            raise ParseError()
        number = number * 10 + (ord(ch) - ord("0"))
    limit = INT_MIN_MAGNITUDE if sign == -1 else INT_MAX
    if number > limit:
        raise ParseError()
    return sign * number


def split_args(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty pieces."""
    return [piece for piece in text.split(" ") if piece]


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the program's arguments into the values of stack a, top first.

    A single argument is split on spaces and every piece must be numeric;
    several arguments are each read as one integer.  Duplicates, values
    with more than ten significant digits and out-of-range values raise
    ParseError.  No arguments give an empty list.
    """
    if not args:
        return []
    if len(args) == 1:
        tokens = split_args(args[0])
        if not tokens or not all(is_numeric(token) for token in tokens):
            raise ParseError()
    else:
        tokens = list(args)

    values: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if count_significant_digits(token) > MAX_SIGNIFICANT_DIGITS:
            raise ParseError()
        value = parse_int(token)
        if value in seen:
            raise ParseError()
        seen.add(value)
        values.append(value)
    return values