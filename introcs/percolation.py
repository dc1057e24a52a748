"""Site percolation on square grids: flow, percolation test and estimates."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence

MAX_N = 100

Grid = list[list[bool]]


def _check_size(n: int) -> None:
    if not 0 <= n <= MAX_N:
        raise ValueError(f"grid size must be between 0 and {MAX_N}")


def random_grid(n: int, p: float, rng: random.Random | None = None) -> Grid:
    """Return an n-by-n grid whose sites are open with probability ``p``."""
    _check_size(n)
    rng = rng if rng is not None else random.Random()
    return [[rng.random() < p for _ in range(n)] for _ in range(n)]


def flow_vertical(is_open: Sequence[Sequence[bool]]) -> Grid:
    """Return the sites filled by flow straight down from the top row."""
    is_full: Grid = []
    above: list[bool] | None = None
    for row in is_open:
        if above is None:
            current = [bool(site) for site in row]
        else:
            current = [bool(site) and full for site, full in zip(row, above)]
        is_full.append(current)
        above = current
    return is_full


def flow(is_open: Sequence[Sequence[bool]]) -> Grid:
    """Return the open sites reachable from the top row through open neighbours."""
    rows = len(is_open)
    is_full: Grid = [[False] * len(row) for row in is_open]
    if rows == 0:
        return is_full
    stack = [(0, j) for j in range(len(is_open[0]))]
    while stack:
        i, j = stack.pop()
        if not (0 <= i < rows and 0 <= j < len(is_open[i])):
            continue
        if not is_open[i][j] or is_full[i][j]:
            continue
        is_full[i][j] = True
        stack.extend(((i - 1, j), (i, j - 1), (i, j + 1), (i + 1, j)))
    return is_full


def percolates(is_full: Sequence[Sequence[bool]]) -> bool:
    """Return whether any site in the bottom row is full."""
    return bool(is_full) and any(is_full[-1])


def read_grid(text: str) -> Grid:
    """Parse a size n followed by n*n integers; a site is open where the value is 1."""
    tokens = text.split()
    if not tokens:
        raise ValueError("missing grid size")
    n = int(tokens[0])
    _check_size(n)
    values = [int(token) for token in tokens[1 : 1 + n * n]]
    if len(values) < n * n:
        raise ValueError(f"expected {n * n} values, got {len(values)}")
    return [[value == 1 for value in values[i * n : (i + 1) * n]] for i in range(n)]


def format_grid(grid: Sequence[Sequence[bool]]) -> str:
    """Render a grid as rows of 1s and 0s, each followed by a space."""
    return "".join("".join(f"{int(bool(site))} " for site in row) + "\n" for row in grid)


def evaluate(
    n: int,
    p: float,
    trials: int,
    rng: random.Random | None = None,
    vertical: bool = False,
) -> float:
    """Fraction of ``trials`` random n-by-n grids with vacancy ``p`` that percolate."""
    if trials <= 0:
        raise ValueError("number of trials must be positive")
    rng = rng if rng is not None else random.Random()
    fill = flow_vertical if vertical else flow
    count = sum(1 for _ in range(trials) if percolates(fill(random_grid(n, p, rng))))
    return count / trials


def _run_from_stdin(vertical: bool) -> int:
    try:
        is_open = read_grid(sys.stdin.read())
    except ValueError as error:
        print(f"invalid grid: {error}", file=sys.stderr)
        return 1
    is_full = flow_vertical(is_open) if vertical else flow(is_open)
    print(format_grid(is_full), end="")
    print("True" if percolates(is_full) else "False")
    return 0


def vertical_main(argv: Sequence[str] | None = None) -> int:
    """Read open sites from standard input and print the vertically full sites."""
    return _run_from_stdin(vertical=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Read open sites from standard input and print the full sites."""
    return _run_from_stdin(vertical=False)


def _run_estimate(argv: Sequence[str] | None, name: str, vertical: bool) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 3:
            raise ValueError
        n = int(args[0])
        p = float(args[1])
        trials = int(args[2])
        q = evaluate(n, p, trials, vertical=vertical)
    except ValueError:
        print(f"Usage: {name} <n> <p> <trials>")
        return 1
    print(f"{q:.6f}")
    return 0


def estimate_vertical_main(argv: Sequence[str] | None = None) -> int:
    """Print the estimated vertical percolation probability for ``<n> <p> <trials>``."""
    return _run_estimate(argv, "estimatev", vertical=True)


def estimate_main(argv: Sequence[str] | None = None) -> int:
    """Print the estimated percolation probability for ``<n> <p> <trials>``."""
    return _run_estimate(argv, "estimate", vertical=False)