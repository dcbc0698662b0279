"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_ATOI_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class InputError(ValueError):
    """Raised when the arguments do not describe a valid list of numbers.

    ``status`` is the exit status a command reports for this error.
    """

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.status = status


def is_valid_number(text: str) -> bool:
    """Return True if ``text`` is a signed decimal integer that fits in 32 bits.

    Leading spaces are allowed, then an optional sign, then at least one digit
    and nothing else.
    """
    rest = text.lstrip(" ")
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if not rest:
        return False
    magnitude = 0
    for char in rest:
        if char not in _DIGITS:
            return False
        magnitude = magnitude * 10 + int(char)
        value = -magnitude if negative else magnitude
        if not INT_MIN <= value <= INT_MAX:
            return False
    return True


def parse_int(text: str) -> int:
    """Convert the leading integer of ``text`` the lenient way, as a 32-bit int.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit, and an absent number gives 0.  Results wrap to 32 bits.
    """
    rest = text.lstrip(_ATOI_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    magnitude = 0
    for char in rest:
        if char not in _DIGITS:
            break
        magnitude = magnitude * 10 + int(char)
    value = (sign * magnitude) & 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty words."""
    return [word for word in text.split(" ") if word]


def has_blank_argument(args: Iterable[str]) -> bool:
    """Return True if any argument is empty or made only of spaces."""
    return any(not arg.strip(" ") for arg in args)


def read_input(args: Iterable[str]) -> list[int]:
    """Split every argument into words and convert each word to a number.

    Raises ``InputError`` on the first word that is not a valid number.
    """
    values: list[int] = []
    for arg in args:
        for word in split_words(arg):
            if not is_valid_number(word):
                raise InputError(f"not a valid integer: {word!r}")
            values.append(parse_int(word))
    return values


def has_duplicates(values: Sequence[int]) -> bool:
    """Return True if any number appears more than once."""
    return len(set(values)) != len(values)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate the command-line arguments and return the numbers they hold."""
    if has_blank_argument(args):
        raise InputError("empty argument", status=6)
    values = read_input(args)
    if has_duplicates(values):
        raise InputError("duplicate numbers")
    return values