"""Scaling, isometric projection and centring of map dots."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from .canvas import HEIGHT, WIDTH
from .dot import Dot

SQRT_2 = 1.414214
SQRT_6 = 2.449490
SQRT_2_PER_3 = 0.816497


class Extreme(IntEnum):
    """Which bound of the dots' screen positions to look up."""

    X_MAX = 0
    X_MIN = 1
    Y_MAX = 2
    Y_MIN = 3


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def get_extreme(which: Extreme | int, dots: Sequence[Dot]) -> int:
    """Largest or smallest ``x`` or ``y`` among ``dots``."""
    which = Extreme(which)
    if which is Extreme.X_MAX:
        return max(dot.x for dot in dots)
    if which is Extreme.X_MIN:
        return min(dot.x for dot in dots)
    if which is Extreme.Y_MAX:
        return max(dot.y for dot in dots)
    return min(dot.y for dot in dots)


def _scale(dots: Sequence[Dot]) -> None:
    x_step = (WIDTH * 85 // 100) // get_extreme(Extreme.X_MAX, dots)
    y_step = (HEIGHT * 85 // 100) // get_extreme(Extreme.Y_MAX, dots)
    z_max = max(dot.z for dot in dots)
    z_min = min(dots[0].x, min(dot.z for dot in dots))
    span = z_max - z_min
    for dot in dots:
        if span >= HEIGHT * 5 // 100:
            dot.z = _trunc_div(dot.z, span * 5 // 100)
        elif span <= x_step:
            dot.z *= 5
        dot.x *= x_step
        dot.y *= y_step


def _isometric(dots: Sequence[Dot]) -> None:
    z0 = dots[0].z
    _scale(dots)
    for dot in dots:
        x, y, z = dot.x, dot.y, dot.z - z0
        dot.x = int((SQRT_2 / 2.0) * (x - y))
        dot.y = abs(int(SQRT_2_PER_3 * z - 1 / SQRT_6 * (x + y)))


def compute_dots(dots: Sequence[Dot]) -> None:
    """Scale the grid to the window, project it isometrically and centre it.

    Dots are updated in place. A map of a single row or a single column
    raises ZeroDivisionError.
    """
    _isometric(dots)
    x_max = get_extreme(Extreme.X_MAX, dots)
    x_min = get_extreme(Extreme.X_MIN, dots)
    y_max = get_extreme(Extreme.Y_MAX, dots)
    y_min = get_extreme(Extreme.Y_MIN, dots)
    x_shift = (WIDTH - x_min) + _trunc_div(WIDTH - (x_max - x_min), 2)
    y_shift = _trunc_div(HEIGHT - (y_max - y_min), 2)
    for dot in dots:
        dot.x += x_shift
        dot.y += y_shift