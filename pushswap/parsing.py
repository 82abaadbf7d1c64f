"""Validation of command-line arguments into a list of distinct integers."""

from __future__ import annotations

from itertools import takewhile
from typing import Iterable, Sequence

from .stack import INT_MAX, INT_MIN

_DIGITS = "0123456789"
_WHITESPACE = "\t\n\v\f\r "
_ATOL_CEILING = 2147483648


class InputError(ValueError):
    """Raised when the arguments do not describe a valid stack."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _strip_prefix(text: str) -> tuple[int, str]:
    """Skip leading whitespace and an optional sign; return (sign, rest)."""
    rest = text.lstrip(_WHITESPACE)
    if rest.startswith("+") and not rest.startswith("+-"):
        rest = rest[1:]
    if rest.startswith("-"):
        return -1, rest[1:]
    return 1, rest


def atoi(text: str) -> int:
    """Read a leading integer the way C's atoi does, wrapping to 32 bits."""
    sign, rest = _strip_prefix(text)
    result = 0
    for ch in takewhile(lambda c: c in _DIGITS, rest):
        result = result * 10 + int(ch)
    result *= sign
    return (result - INT_MIN) % 2**32 + INT_MIN


def atol(text: str) -> int:
    """Read a leading integer, stopping once it grows past 2**31."""
    sign, rest = _strip_prefix(text)
    result = 0
    for ch in takewhile(lambda c: c in _DIGITS, rest):
        result = result * 10 + int(ch)
        if result > _ATOL_CEILING:
            break
    return sign * result


def only_numeric_chars(text: str) -> bool:
    """True when the text holds only digits, spaces and sign characters."""
    return all(ch in _DIGITS or ch in " -+" for ch in text)


def split_words(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    return [word for word in text.split(sep) if word]


def has_single_chunk(text: str) -> bool:
    """True when the text holds at most one space-separated word."""
    return len(split_words(text, " ")) <= 1


def sign_is_valid(text: str, sign_count: int) -> bool:
    """True when the number fits in 32 bits and a lone sign leads the text."""
    if not INT_MIN <= atol(text) <= INT_MAX:
        return False
    if sign_count == 1:
        return text[:1] in ("-", "+")
    return True


def is_valid_chunk(text: str) -> bool:
    """True when the text is one acceptable integer literal."""
    sign_count = sum(1 for ch in text if ch in "+-")
    if sign_count > 1:
        return False
    if not any(ch in _DIGITS for ch in text):
        return False
    return sign_is_valid(text, sign_count)


def has_duplicates(values: Sequence[int]) -> bool:
    """True when some value appears more than once."""
    return len(set(values)) != len(values)


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the program's arguments (without its name) into integers.

    A single argument is split on spaces; several arguments must each hold
    one number. A single argument made only of spaces yields an empty list.
    Raises InputError for anything else that is not a set of distinct
    32-bit integers.
    """
    args = list(args)
    if not args:
        raise InputError()
    if not all(only_numeric_chars(arg) for arg in args):
        raise InputError()
    if len(args) > 1:
        if not all(is_valid_chunk(arg) and has_single_chunk(arg) for arg in args):
            raise InputError()
        words = args
    else:
        if args[0] == "":
            raise InputError()
        words = split_words(args[0], " ")
        if not all(is_valid_chunk(word) for word in words):
            raise InputError()
    values = [atoi(word) for word in words]
    if has_duplicates(values):
        raise InputError()
    return values