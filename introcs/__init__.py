"""Classic introductory computing programs: probability, recursion, fractals and percolation."""

__version__ = "0.1.0"