"""Coupon collector simulation."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence


def get_coupon(n: int, rng: random.Random | None = None) -> int:
    """Return a random coupon between 0 and ``n - 1``."""
    return (rng or random).randrange(n)


def collect(n: int, rng: random.Random | None = None) -> int:
    """Draw coupons until every value below ``n`` has been seen; return the draws."""
    if n < 0:
        raise ValueError("number of coupon values must not be negative")
    rng = rng or random.Random()
    seen: set[int] = set()
    count = 0
    while len(seen) < n:
        seen.add(get_coupon(n, rng))
        count += 1
    return count


def main(argv: Sequence[str] | None = None) -> int:
    """Print the number of coupons drawn to collect all ``<n>`` values."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 1:
            raise ValueError
        n = int(args[0])
        count = collect(n)
    except ValueError:
        print("Usage: coupon <n>")
        return 1
    print(count)
    return 0