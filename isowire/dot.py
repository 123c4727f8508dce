"""Map points and colour deltas."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Dot:
    """A map point: its screen position, height, grid indices and colour."""

    x: int
    y: int
    z: int
    index_x: int = 0
    index_y: int = 0
    index_z: int = 0
    color: int = 0


@dataclass(frozen=True)
class Rgb:
    """Per-channel colour step."""

    r: int
    g: int
    b: int