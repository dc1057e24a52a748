"""Compare coin-flip counts with the normal approximation."""

from __future__ import annotations

import math
import random
import sys
from collections import Counter
from collections.abc import Sequence

import matplotlib.pyplot as plt

from introcs.display import plot_bars, plot_curve
from introcs.gaussian import pdf


def binomial(n: int, p: float = 0.5, rng: random.Random | None = None) -> int:
    """Count the successes in ``n`` trials that each succeed with probability ``p``."""
    rng = rng if rng is not None else random.Random()
    return sum(1 for _ in range(n) if rng.random() < p)


def frequencies(n: int, trials: int, rng: random.Random | None = None) -> list[float]:
    """Fraction of ``trials`` runs of ``n`` fair flips giving each head count 0..n."""
    if n < 0:
        raise ValueError("number of flips must not be negative")
    if trials <= 0:
        raise ValueError("number of trials must be positive")
    rng = rng if rng is not None else random.Random()
    counts = Counter(binomial(n, 0.5, rng) for _ in range(trials))
    return [counts[heads] / trials for heads in range(n + 1)]


def normal_curve(n: int) -> list[float]:
    """Normal density with mean n/2 and deviation sqrt(n)/2 at 0..n."""
    if n <= 0:
        raise ValueError("number of flips must be positive")
    stddev = math.sqrt(n) / 2.0
    return [pdf(float(i), n / 2.0, stddev) for i in range(n + 1)]


def main(argv: Sequence[str] | None = None) -> int:
    """Plot head-count frequencies for ``<n> <trials>`` against the normal curve."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 2:
            raise ValueError
        n, trials = (int(arg) for arg in args)
        observed = frequencies(n, trials)
        expected = normal_curve(n)
    except ValueError:
        print("Usage: bernoulli <n> <trials>")
        return 1
    fig, ax = plt.subplots(figsize=(10, 4))
    ax.set_title("Bernoulli Distribution")
    ax.set_facecolor("white")
    ax.set_xlim(0.0, 1.0)
    ax.set_ylim(0.0, 1.1)
    plot_bars(ax, observed, 1.0 / n, "blue")
    plot_curve(ax, expected, 1.0 / n, "red")
    plt.show()
    return 0