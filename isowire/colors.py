"""Colour channel access and gradient steps on packed TRGB integers."""

from __future__ import annotations

from .dot import Dot, Rgb


def _to_int32(value: int) -> int:
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def get_t(trgb: int) -> int:
    """Transparency byte."""
    return (trgb >> 24) & 0xFF


def get_r(trgb: int) -> int:
    """Red byte."""
    return (trgb >> 16) & 0xFF


def get_g(trgb: int) -> int:
    """Green byte."""
    return (trgb >> 8) & 0xFF


def get_b(trgb: int) -> int:
    """Blue byte."""
    return trgb & 0xFF


def _pack(t: int, r: int, g: int, b: int) -> int:
    return _to_int32(t << 24 | r << 16 | g << 8 | b)


def increment_color(color: int, dr: int, dg: int, db: int) -> int:
    """Add the given steps to each channel, keeping transparency."""
    return _pack(get_t(color), get_r(color) + dr, get_g(color) + dg, get_b(color) + db)


def decrease_color(color: int, dr: int, dg: int, db: int) -> int:
    """Subtract the given steps from each channel, keeping transparency."""
    return _pack(get_t(color), get_r(color) - dr, get_g(color) - dg, get_b(color) - db)


def compute_gradient(dot: Dot, next_dot: Dot) -> Rgb:
    """Per-pixel colour step for a segment between two dots.

    The channel differences are divided by the longer of the two axis spans.
    Two dots at the same position raise ZeroDivisionError.
    """
    span = max(abs(dot.x - next_dot.x), abs(dot.y - next_dot.y))
    a, b = dot.color, next_dot.color
    return Rgb(
        abs(get_r(a) - get_r(b)) // span,
        abs(get_g(a) - get_g(b)) // span,
        abs(get_b(a) - get_b(b)) // span,
    )


def compute_color(dot: Dot, next_dot: Dot, d_color: Rgb, color: int) -> int:
    """Next colour along a segment, stepping according to the height change."""
    if dot.z == next_dot.z:
        return color
    if dot.z < next_dot.z:
        return decrease_color(color, d_color.r, d_color.g, d_color.b)
    return increment_color(color, d_color.r, d_color.g, d_color.b)