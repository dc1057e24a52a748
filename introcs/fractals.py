"""Chaos-game fractals, H-trees and Brownian bridges."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass

import matplotlib.pyplot as plt

from introcs.display import Point, Segment, plot_points, plot_segments

SIERPINSKI_VERTICES: tuple[Point, ...] = ((0.000, 0.000), (1.000, 0.000), (0.500, 0.866))
MAX_TRANSFORMATIONS = 10


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def sierpinski_points(n: int, rng: random.Random | None = None) -> list[Point]:
    """Play the chaos game on the triangle's vertices for ``n`` steps from the origin."""
    rng = _rng(rng)
    x = y = 0.0
    points = []
    for _ in range(n):
        cx, cy = rng.choice(SIERPINSKI_VERTICES)
        x = (x + cx) / 2.0
        y = (y + cy) / 2.0
        points.append((x, y))
    return points


def discrete(dist: Sequence[float], rng: random.Random | None = None) -> int:
    """Return an index drawn with the probabilities in ``dist``."""
    if not dist:
        raise ValueError("distribution must not be empty")
    r = _rng(rng).random()
    total = 0.0
    for index, probability in enumerate(dist):
        total += probability
        if r < total:
            return index
    return len(dist) - 1


@dataclass(frozen=True)
class Ifs:
    """An iterated function system of affine maps chosen with given probabilities."""

    dist: tuple[float, ...]
    cx: tuple[tuple[float, float, float], ...]
    cy: tuple[tuple[float, float, float], ...]

    def __post_init__(self) -> None:
        count = len(self.dist)
        if not 1 <= count <= MAX_TRANSFORMATIONS:
            raise ValueError(
                f"number of transformations must be between 1 and {MAX_TRANSFORMATIONS}"
            )
        if len(self.cx) != count or len(self.cy) != count:
            raise ValueError("every transformation needs one row of cx and one of cy")
        if any(len(row) != 3 for row in (*self.cx, *self.cy)):
            raise ValueError("coefficient rows must have three entries")

    @classmethod
    def from_text(cls, text: str) -> Ifs:
        """Parse a count m, then m probabilities, m rows of cx and m rows of cy."""
        tokens = text.split()
        if not tokens:
            raise ValueError("missing number of transformations")
        count = int(tokens[0])
        if not 1 <= count <= MAX_TRANSFORMATIONS:
            raise ValueError(
                f"number of transformations must be between 1 and {MAX_TRANSFORMATIONS}"
            )
        numbers = [float(token) for token in tokens[1:]]
        needed = count * 7
        if len(numbers) < needed:
            raise ValueError(f"expected {needed} numbers after the count, got {len(numbers)}")
        dist = tuple(numbers[:count])
        coefficients = numbers[count:needed]
        rows = [tuple(coefficients[k : k + 3]) for k in range(0, len(coefficients), 3)]
        return cls(dist, tuple(rows[:count]), tuple(rows[count:]))

    def points(self, n: int, rng: random.Random | None = None) -> list[Point]:
        """Iterate randomly chosen maps ``n`` times from the origin."""
        rng = _rng(rng)
        x = y = 0.0
        points = []
        for _ in range(n):
            r = discrete(self.dist, rng)
            ax_, bx, cx = self.cx[r]
            ay, by, cy = self.cy[r]
            x, y = ax_ * x + bx * y + cx, ay * x + by * y + cy
            points.append((x, y))
        return points


def htree_segments(n: int, line_length: float, x: float, y: float) -> list[Segment]:
    """Return the lines of an order-``n`` H-tree centred at (x, y)."""
    if n <= 0:
        return []
    half = line_length / 2
    x0, x1 = x - half, x + half
    y0, y1 = y - half, y + half
    segments: list[Segment] = [
        ((x0, y), (x1, y)),
        ((x0, y0), (x0, y1)),
        ((x1, y0), (x1, y1)),
    ]
    for cx, cy in ((x0, y0), (x0, y1), (x1, y0), (x1, y1)):
        segments.extend(htree_segments(n - 1, half, cx, cy))
    return segments


def gaussian(rng: random.Random | None = None) -> float:
    """Return a standard normal sample by the Box-Muller transform."""
    rng = _rng(rng)
    u = 1.0 - rng.random()
    v = rng.random()
    return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)


def brownian_segments(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    variance: float,
    scale_factor: float,
    rng: random.Random | None = None,
) -> list[Segment]:
    """Return the pieces of a Brownian bridge from (x0, y0) to (x1, y1)."""
    rng = _rng(rng)
    if x1 - x0 < 0.01:
        return [((x0, y0), (x1, y1))]
    xm = (x0 + x1) / 2.0
    ym = (y0 + y1) / 2.0 + gaussian(rng) * math.sqrt(variance)
    next_variance = variance / scale_factor
    return brownian_segments(
        x0, y0, xm, ym, next_variance, scale_factor, rng
    ) + brownian_segments(xm, ym, x1, y1, next_variance, scale_factor, rng)


def _args(argv: Sequence[str] | None) -> list[str]:
    return sys.argv[1:] if argv is None else list(argv)


def _unit_axes(title: str, facecolor: str):
    fig, ax = plt.subplots(figsize=(8, 8))
    ax.set_title(title)
    ax.set_facecolor(facecolor)
    ax.set_xlim(0.0, 1.0)
    ax.set_ylim(0.0, 1.0)
    return fig, ax


def sierpinski_main(argv: Sequence[str] | None = None) -> int:
    """Plot ``<n>`` points of the Sierpinski triangle."""
    args = _args(argv)
    try:
        if len(args) != 1:
            raise ValueError
        n = int(args[0])
    except ValueError:
        print("Usage: sierpinski <n>")
        return 1
    _, ax = _unit_axes("Sierpinski Triangle", "black")
    plot_points(ax, sierpinski_points(n))
    plt.show()
    return 0


def ifs_main(argv: Sequence[str] | None = None) -> int:
    """Plot ``<n>`` points of the iterated function system read from standard input."""
    args = _args(argv)
    try:
        if len(args) != 1:
            raise ValueError
        n = int(args[0])
    except ValueError:
        print("Usage: ifs <n>")
        return 1
    try:
        system = Ifs.from_text(sys.stdin.read())
    except ValueError as error:
        print(f"invalid transformation data: {error}", file=sys.stderr)
        return 1
    _, ax = _unit_axes("Iterated Function System", "black")
    plot_points(ax, system.points(n))
    plt.show()
    return 0


def htree_main(argv: Sequence[str] | None = None) -> int:
    """Draw an H-tree of order ``<n>``."""
    args = _args(argv)
    try:
        if len(args) != 1:
            raise ValueError
        n = int(args[0])
    except ValueError:
        print("Usage: htree <n>")
        return 1
    _, ax = _unit_axes("H-Tree", "white")
    plot_segments(ax, htree_segments(n, 0.5, 0.5, 0.5), "black")
    plt.show()
    return 0


def brownian_main(argv: Sequence[str] | None = None) -> int:
    """Draw a Brownian bridge with the Hurst exponent ``<hurstExponent>``."""
    args = _args(argv)
    try:
        if len(args) != 1:
            raise ValueError
        hurst = float(args[0])
    except ValueError:
        print("Usage: brownian <hurstExponent>")
        return 1
    scale_factor = 2.0 ** (2.0 * hurst)
    _, ax = _unit_axes("Brownian Bridge", "0.9")
    plot_segments(ax, brownian_segments(0.0, 0.5, 1.0, 0.5, 0.01, scale_factor), "blue")
    plt.show()
    return 0