"""Small text helpers used when reading height maps."""

from __future__ import annotations

import re
from itertools import groupby

INT_MAX = 2147483647
INT_MIN = -2147483648

_LEADING_SPACE = " \t\n\v\f\r"
_NUMBER = re.compile(r"([+-](?=.))?([0-9]*)", re.DOTALL)


def parse_int(text: str) -> int:
    """Parse a 32-bit signed decimal integer.

    Leading whitespace and a single sign are accepted; anything after the
    digits, or a value outside the 32-bit range, raises ValueError.
    A string with no digits at all yields 0.
    """
    stripped = text.lstrip(_LEADING_SPACE)
    match = _NUMBER.match(stripped)
    sign_text, digits = match.group(1), match.group(2)
    if stripped[match.end():]:
        raise ValueError(f"invalid integer: {text!r}")
    sign = -1 if sign_text == "-" else 1
    value = sign * int(digits or "0")
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def split_words(text: str, charset: str) -> list[str]:
    """Split ``text`` into the maximal runs of characters not in ``charset``."""
    return [
        "".join(chars)
        for is_separator, chars in groupby(text, key=lambda c: c in charset)
        if not is_separator
    ]


def count_words(text: str, charset: str) -> int:
    """Count the words :func:`split_words` would return."""
    return len(split_words(text, charset))