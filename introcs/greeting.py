"""Greet a person named on the command line."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def greet(name: str) -> str:
    """Return the greeting for ``name``."""
    return f"Hi, {name}. How are you?"


def main(argv: Sequence[str] | None = None) -> int:
    """Print a greeting for the first argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: ./gauss <name>")
        return 1
    print(greet(args[0]))
    return 0