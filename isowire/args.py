"""Command-line argument checks."""

from __future__ import annotations

from collections.abc import Sequence


class ArgumentError(Exception):
    """The command line does not name exactly one ``.fdf`` map."""


def check_args(argv: Sequence[str]) -> str:
    """Validate the arguments (program name excluded) and return the map path.

    Exactly one argument is required; its first dot after the first character
    must start a ``.fdf`` suffix that ends the name.
    """
    if len(argv) < 1:
        raise ArgumentError("Args: Too few arguments")
    if len(argv) > 1:
        raise ArgumentError("Args: Too many arguments")
    path = argv[0]
    dot = path.find(".", 1)
    if dot == -1 or path[dot:] != ".fdf":
        raise ArgumentError("Args: Invalid filename")
    return path