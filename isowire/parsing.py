"""Reading height maps into coloured grid dots."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .colors import get_b, get_g, get_r, increment_color
from .dot import Dot
from .textutil import count_words, parse_int, split_words

SEPARATORS = " \n"
LOW_COLOR = 0x00FB335B
HIGH_COLOR = 0x003585CD


class MapFormatError(ValueError):
    """The map file is empty, ragged, or holds something other than integers."""

    def __init__(self, message: str = "Parsing: Map format error") -> None:
        super().__init__(message)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def read_map_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the map's lines without their line endings.

    Empty lines at the end of the file are ignored; an empty file, or an
    empty line before the last row, raises MapFormatError. A file that
    cannot be opened raises OSError.
    """
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        lines = handle.read().split("\n")
    while lines and not lines[-1]:
        lines.pop()
    if not lines or "" in lines:
        raise MapFormatError()
    return lines


def parse_lines(lines: Iterable[str]) -> list[Dot]:
    """Turn map rows into dots, one per height value, with colours filled in.

    Every row must hold the same number of values, each a 32-bit integer.
    """
    rows = list(lines)
    if not rows:
        raise MapFormatError()
    width = count_words(rows[0], SEPARATORS)
    if any(count_words(row, SEPARATORS) != width for row in rows):
        raise MapFormatError()
    dots = []
    for y, row in enumerate(rows):
        for x, word in enumerate(split_words(row, SEPARATORS)):
            try:
                z = parse_int(word)
            except ValueError as exc:
                raise MapFormatError() from exc
            dots.append(Dot(x=x, y=y, z=z, index_x=x, index_y=y))
    if not dots:
        raise MapFormatError()
    fill_colors(dots)
    return dots


def parse_map(path: str | os.PathLike[str]) -> list[Dot]:
    """Read and parse the map file at ``path``."""
    return parse_lines(read_map_lines(path))


def _palette(floors: int, low: int, high: int) -> list[int]:
    dr = _trunc_div(get_r(high) - get_r(low), floors)
    dg = _trunc_div(get_g(high) - get_g(low), floors)
    db = _trunc_div(get_b(high) - get_b(low), floors)
    colors = []
    color = low
    for _ in range(floors):
        colors.append(color)
        color = increment_color(color, dr, dg, db)
    return colors


def fill_colors(dots: list[Dot]) -> None:
    """Rank each dot's height among the distinct heights and colour it.

    The lowest height gets ``LOW_COLOR``; each higher one steps towards
    ``HIGH_COLOR``. Dots are updated in place.
    """
    if not dots:
        raise MapFormatError()
    floors = sorted({dot.z for dot in dots})
    rank = {z: index for index, z in enumerate(floors)}
    palette = _palette(len(floors), LOW_COLOR, HIGH_COLOR)
    for dot in dots:
        dot.index_z = rank[dot.z]
        dot.color = palette[dot.index_z]