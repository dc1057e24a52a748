"""Drawing helpers that put points, lines and cells onto matplotlib axes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from matplotlib.collections import LineCollection
from matplotlib.colors import to_rgb

Point = tuple[float, float]
Segment = tuple[Point, Point]


def plot_points(ax: Any, points: Iterable[Point]) -> Any:
    """Plot each point as a single white pixel and return the line artist."""
    points = list(points)
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    (line,) = ax.plot(xs, ys, linestyle="none", marker=",", color="white")
    return line


def plot_segments(ax: Any, segments: Iterable[Segment], color: Any) -> LineCollection:
    """Draw straight line segments in one colour and return the collection."""
    collection = LineCollection([list(segment) for segment in segments], colors=color)
    ax.add_collection(collection)
    return collection


def plot_bars(ax: Any, values: Sequence[float], scale: float, color: Any) -> Any:
    """Draw a vertical bar from zero to each value at x = index * scale."""
    xs = [i * scale for i in range(len(values))]
    return ax.vlines(xs, 0.0, list(values), colors=color)


def plot_curve(ax: Any, values: Sequence[float], scale: float, color: Any) -> Any:
    """Join the values, placed at x = index * scale, by a line strip."""
    xs = [i * scale for i in range(len(values))]
    (line,) = ax.plot(xs, list(values), color=color)
    return line


def plot_cells(ax: Any, cells: Iterable[Iterable[Any]], colors: Mapping[Any, Any]) -> Any:
    """Fill one unit square per cell, row 0 at the top, coloured by ``colors[cell]``."""
    rows = [list(row) for row in cells]
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    image = [[to_rgb(colors[cell]) for cell in row] for row in rows]
    return ax.imshow(
        image,
        origin="upper",
        extent=(-0.5, width - 0.5, -0.5, len(rows) - 0.5),
        interpolation="nearest",
    )