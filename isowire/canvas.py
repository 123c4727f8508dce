"""An in-memory 32-bit pixel buffer."""

from __future__ import annotations

from array import array

WIDTH = 1280
HEIGHT = 720


class Canvas:
    """A row-major buffer of 32-bit colours.

    Pixels are addressed linearly as ``y * width + x``, so an ``x`` past the
    right edge lands on the following row. Writes outside the buffer are
    dropped.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self._pixels = array("I", bytes(4 * width * height))

    def _offset(self, x: int, y: int) -> int:
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (as an unsigned 32-bit value) at ``(x, y)``."""
        offset = self._offset(x, y)
        if 0 <= offset < len(self._pixels):
            self._pixels[offset] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at ``(x, y)``; raise IndexError outside the buffer."""
        offset = self._offset(x, y)
        if not 0 <= offset < len(self._pixels):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self._pixels[offset]