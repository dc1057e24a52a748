"""Gaussian probability density and cumulative distribution functions."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence

SAT_SCORES = range(400, 1601, 100)
_CUTOFF = 8.0


def standard_pdf(x: float) -> float:
    """Density of the standard normal distribution at ``x``."""
    return math.exp(-x * x / 2.0) / math.sqrt(2.0 * math.pi)


def pdf(x: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Density of the normal distribution with mean ``mu`` and deviation ``sigma``."""
    return standard_pdf((x - mu) / sigma) / sigma


def standard_cdf(z: float) -> float:
    """Cumulative standard normal distribution, summed as a Taylor series."""
    if z < -_CUTOFF:
        return 0.0
    if z > _CUTOFF:
        return 1.0
    total = 0.0
    term = z
    denominator = 3
    while total != total + term:
        total += term
        term *= z * z / denominator
        denominator += 2
    return 0.5 + standard_pdf(z) * total


def cdf(z: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Cumulative normal distribution with mean ``mu`` and deviation ``sigma``."""
    return standard_cdf((z - mu) / sigma)


def sat_table(mu: float, sigma: float) -> list[tuple[int, float]]:
    """Pairs of (score, cumulative fraction) for scores 400 to 1600 in steps of 100."""
    return [(score, cdf(score, mu, sigma)) for score in SAT_SCORES]


def _parse_floats(args: Sequence[str], count: int) -> list[float] | None:
    if len(args) != count:
        return None
    try:
        return [float(arg) for arg in args]
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Print the cumulative probability for ``<z> <mu> <sigma>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    values = _parse_floats(args, 3)
    if values is None:
        print("Usage: gaussian <z> <mu> <sigma>")
        return 1
    z, mu, sigma = values
    try:
        result = cdf(z, mu, sigma)
    except ZeroDivisionError:
        print("sigma must be non-zero", file=sys.stderr)
        return 1
    print(f"{result:.6f}")
    return 0


def table_main(argv: Sequence[str] | None = None) -> int:
    """Print a table of cumulative fractions of SAT scores for ``<mu> <sigma>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    values = _parse_floats(args, 2)
    if values is None:
        print("Usage: gaussiantable <mu> <sigma>")
        return 1
    mu, sigma = values
    try:
        rows = sat_table(mu, sigma)
    except ZeroDivisionError:
        print("sigma must be non-zero", file=sys.stderr)
        return 1
    for score, fraction in rows:
        print(f"{score:4d}  {fraction:.4f}")
    return 0