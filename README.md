# introcs

A collection of small, classic computing programs as a Python library with
matching command-line tools:

- `introcs.gaussian`: Gaussian density (`pdf`, `standard_pdf`) and cumulative
  distribution (`cdf`, `standard_cdf`) functions, and `sat_table` for scores
  400 to 1600
- `introcs.greeting`: a one-line greeting (`greet`)
- `introcs.coupon`: the coupon collector simulation (`collect`)
- `introcs.tune`: a note synthesizer (`tone`, `note`, `superpose`, `read_notes`)
- `introcs.recursion`: Euclid's algorithm (`gcd`), Towers of Hanoi
  (`hanoi_moves`) and Beckett's stage directions (`beckett_moves`)
- `introcs.fractals`: the Sierpinski triangle, iterated function systems
  (`Ifs`), H-trees and Brownian bridges
- `introcs.bernoulli`: coin-flip counts (`binomial`, `frequencies`) against the
  normal approximation (`normal_curve`)
- `introcs.percolation`: site percolation on an n-by-n grid, vertical-only
  (`flow_vertical`) and full (`flow`), with Monte Carlo estimates (`evaluate`)
- `introcs.display` and `introcs.percolation_view`: matplotlib drawing helpers

Pictures are drawn with matplotlib.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

### Gaussian distribution

```
$ introcs-gaussian 820 1019 209
0.170510
```

Prints the cumulative normal distribution at `z` for mean `mu` and standard
deviation `sigma`, to six decimal places.

```
$ introcs-gaussian-table 1019 209
```

Prints, for each score from 400 to 1600 in steps of 100, the cumulative
fraction of the distribution at that score, to four decimal places.

### Greeting and coupons

```
$ introcs-greet Alice
Hi, Alice. How are you?

$ introcs-coupon 1000
```

`introcs-coupon` draws random coupons from `0..n-1` until it has seen every
value and prints how many it drew.

### Synthesizing a tune

```
$ introcs-tune < notes.txt
```

Reads whitespace-separated pairs of `pitch duration` (pitch in half-steps from
concert A, duration in seconds) from standard input and prints one sample per
line, 44,100 samples per second, each note mixed with the octaves above and
below it. The samples are printed as text; the tool does not play sound or
write audio files.

### Recursion

```
$ introcs-euclid 1440 408
24

$ introcs-hanoi 2
1 right
2 left
1 right

$ introcs-beckett 2
enter 1
enter 2
exit  1
```

### Fractals

```
$ introcs-sierpinski 10000
$ introcs-ifs 10000 < sierpinski.txt
$ introcs-htree 3
$ introcs-brownian 0.5
```

`introcs-ifs` reads an iterated function system from standard input: the
number of transformations `m` (1 to 10), then `m` probabilities, then `m` rows
of three x coefficients, then `m` rows of three y coefficients.
`introcs-brownian` takes a Hurst exponent.

### Bernoulli trials

```
$ introcs-bernoulli 20 100000
```

Plots the observed distribution of heads in `n` coin flips over `trials`
experiments together with the matching normal curve.

### Percolation

```
$ introcs-percolation-vertical < grid.txt
$ introcs-percolation < grid.txt
```

Both read a grid size `n` (at most 100) followed by `n*n` values (`1` for an
open site), print the grid of full sites and then `True` or `False` for whether
the system percolates. The vertical variant lets water flow straight down only.

```
$ introcs-estimate-vertical 20 0.85 1000
$ introcs-estimate 20 0.65 100
```

Estimate the probability that a random `n`-by-`n` grid with site vacancy
probability `p` percolates, over `trials` random grids.

```
$ introcs-percolation-io 10 0.8
$ introcs-visualize-vertical 20 0.65 3
$ introcs-visualize 20 0.65 3
```

`introcs-percolation-io` draws a random grid with its blocked sites in black.
The visualize tools show a series of random grids, one per second, with full
sites in blue.

## Library use

```python
from introcs.gaussian import cdf
from introcs.recursion import gcd, hanoi_moves
from introcs.percolation import flow, percolates, read_grid

cdf(820, 1019, 209)          # about 0.170510
gcd(1440, 408)               # 24
list(hanoi_moves(2, True))   # [(1, False), (2, True), (1, False)]

grid = read_grid("2\n1 0\n1 1\n")
percolates(flow(grid))       # True
```

Functions that use randomness accept a `random.Random` instance, so results
can be reproduced by seeding it.