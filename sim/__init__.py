"""Simulation studies for quantile dotplots.

Provides seeded comparisons of random-draw dotplots against quantile
dotplots. Randomness lives here only; the quantdots package itself is
deterministic.
"""

from sim.random_vs_quantile import (
    compare_random_and_quantile,
    draw_random_dots,
    quantile_error,
)

__all__ = [
    "compare_random_and_quantile",
    "draw_random_dots",
    "quantile_error",
]
