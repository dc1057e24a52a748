"""Draw percolation grids and their full sites."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

import matplotlib.pyplot as plt

from introcs.display import plot_cells
from introcs.percolation import flow, flow_vertical, random_grid

PAUSE_SECONDS = 1.0


def render_grid(ax: Any, grid: Sequence[Sequence[bool]], which: bool) -> Any:
    """Draw cells equal to ``which`` in black and the others in white."""
    cells = [[bool(site) == which for site in row] for row in grid]
    return plot_cells(ax, cells, {True: "black", False: "white"})


def render_flow(ax: Any, is_full: Sequence[Sequence[bool]]) -> Any:
    """Draw full sites in blue and every other site in black."""
    cells = [[bool(site) for site in row] for row in is_full]
    return plot_cells(ax, cells, {True: "blue", False: "black"})


def _parse(argv: Sequence[str] | None, count: int) -> tuple[int, float, int] | None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != count:
        return None
    try:
        n = int(args[0])
        p = float(args[1])
        trials = int(args[2]) if count == 3 else 1
    except ValueError:
        return None
    if n <= 0 or trials < 0:
        return None
    return n, p, trials


def io_main(argv: Sequence[str] | None = None) -> int:
    """Draw a random ``<n>`` grid with vacancy ``<p>``, blocked sites in black."""
    parsed = _parse(argv, 2)
    if parsed is None:
        print("Usage: percolationio <n> <p>")
        return 1
    n, p, _ = parsed
    try:
        grid = random_grid(n, p)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    _, ax = plt.subplots(figsize=(8, 8))
    ax.set_title("Percolation IO")
    render_grid(ax, grid, False)
    plt.show()
    return 0


def _animate(argv: Sequence[str] | None, name: str, title: str, vertical: bool) -> int:
    parsed = _parse(argv, 3)
    if parsed is None:
        print(f"Usage: {name} <n> <p> <trials>")
        return 1
    n, p, trials = parsed
    fill = flow_vertical if vertical else flow
    _, ax = plt.subplots(figsize=(8, 8))
    for _ in range(trials):
        try:
            grid = random_grid(n, p)
        except ValueError as error:
            print(error, file=sys.stderr)
            return 1
        ax.clear()
        ax.set_title(title)
        render_flow(ax, fill(grid))
        plt.pause(PAUSE_SECONDS)
    return 0


def visualize_vertical_main(argv: Sequence[str] | None = None) -> int:
    """Show ``<trials>`` random grids with their vertically full sites."""
    return _animate(argv, "visualizev", "Visualize Vertical Percolation", vertical=True)


def visualize_main(argv: Sequence[str] | None = None) -> int:
    """Show ``<trials>`` random grids with their full sites."""
    return _animate(argv, "visualize", "Visualize Percolation", vertical=False)