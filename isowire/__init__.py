"""Height-map parsing, colouring and isometric projection, with a pixel buffer."""

__version__ = "0.1.0"
__all__ = ["__version__"]