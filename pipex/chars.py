"""ASCII character classification, case mapping and integer/text conversion."""

from __future__ import annotations

import operator
from itertools import takewhile
from typing import Union

Char = Union[int, str]

_WHITESPACE = " \t\n\v\f\r"


def _code(c: Char) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_lower(c: Char) -> Char:
    """Map an upper-case ASCII letter to lower case; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += ord("a") - ord("A")
    return _same_kind(c, code)


def to_upper(c: Char) -> Char:
    """Map a lower-case ASCII letter to upper case; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code += ord("A") - ord("a")
    return _same_kind(c, code)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; text with no digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = "".join(takewhile(is_digit, rest))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading minus when negative."""
    value = operator.index(n)
    magnitude = abs(value)
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
        if not magnitude:
            break
    if value < 0:
        digits.append("-")
    return "".join(reversed(digits))