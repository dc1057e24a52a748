"""Recursive classics: Euclid's algorithm, Towers of Hanoi and Beckett's play."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence


def _c_remainder(p: int, q: int) -> int:
    remainder = abs(p) % abs(q)
    return -remainder if p < 0 else remainder


def gcd(p: int, q: int) -> int:
    """Greatest common divisor by Euclid's algorithm (truncating remainder)."""
    while q != 0:
        p, q = q, _c_remainder(p, q)
    return p


def hanoi_moves(n: int, left: bool = True) -> Iterator[tuple[int, bool]]:
    """Yield (disk, moves_left) steps that shift ``n`` disks one peg over."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    if n == 0:
        return
    yield from hanoi_moves(n - 1, not left)
    yield n, left
    yield from hanoi_moves(n - 1, not left)


def beckett_moves(n: int, enter: bool = True) -> Iterator[tuple[int, bool]]:
    """Yield (actor, enters) stage directions for ``n`` actors in Gray-code order."""
    if n < 0:
        raise ValueError("number of actors must not be negative")
    if n == 0:
        return
    yield from beckett_moves(n - 1, True)
    yield n, enter
    yield from beckett_moves(n - 1, False)


def _parse_ints(argv: Sequence[str] | None, count: int) -> list[int] | None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != count:
        return None
    try:
        return [int(arg) for arg in args]
    except ValueError:
        return None


def euclid_main(argv: Sequence[str] | None = None) -> int:
    """Print the greatest common divisor of ``<p> <q>``."""
    values = _parse_ints(argv, 2)
    if values is None:
        print("Usage: euclid <p> <q>")
        return 1
    print(gcd(*values))
    return 0


def hanoi_main(argv: Sequence[str] | None = None) -> int:
    """Print the moves that shift ``<n>`` disks to the left."""
    values = _parse_ints(argv, 1)
    if values is None or values[0] < 0:
        print("Usage: towersofhanoi <n>")
        return 1
    for disk, left in hanoi_moves(values[0], True):
        print(f"{disk} {'left' if left else 'right'}")
    return 0


def beckett_main(argv: Sequence[str] | None = None) -> int:
    """Print the stage directions for ``<n>`` actors."""
    values = _parse_ints(argv, 1)
    if values is None or values[0] < 0:
        print("Usage: beckett <n>")
        return 1
    for actor, enter in beckett_moves(values[0], True):
        print(f"enter {actor}" if enter else f"exit  {actor}")
    return 0