#!/usr/bin/env python3
"""
Random Draws vs Quantile Dots

Compares two ways of turning a predictive distribution into n dots:

1. n random draws (what a naive dotplot of posterior samples shows)
2. n quantiles at probability levels (i - 0.5) / n (a quantile dotplot)

For each n the script reports how far the sorted dots sit from the
distribution's own quantiles, averaged over seeded replications. Random
draws wobble from seed to seed; the quantile dots are identical every time.

Scenario: bus arrival time, log-normal with median 11.4 min, sigma 0.2.
"""

from __future__ import annotations

import math
import sys
import time
from pathlib import Path

import numpy as np

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from quantdots import LogNormal, compute_quantiles, probability_at_most  # noqa: E402


def draw_random_dots(dist: LogNormal, n: int, seed: int) -> np.ndarray:
    """Sorted n random draws from a log-normal, seeded."""
    rng = np.random.default_rng(seed)
    return np.sort(rng.lognormal(dist.mu, dist.sigma, size=n))


def quantile_error(dots: np.ndarray, dist: LogNormal) -> float:
    """Largest |cdf(dot_k) - (k - 0.5) / n| over all dots."""
    n = len(dots)
    target = (np.arange(1, n + 1) - 0.5) / n
    return float(np.max(np.abs(dist.cdf(dots) - target)))


class SimulationResults:
    """Container for comparison results."""

    def __init__(self, name: str):
        self.name = name
        self.rows: list[tuple[int, float, float, float]] = []

    def record(self, n: int, random_mean: float, random_sd: float, quantile: float):
        self.rows.append((n, random_mean, random_sd, quantile))

    def summary(self) -> bool:
        print(f"\n{self.name}")
        print(f"  {'n':>6}  {'random (mean)':>14}  {'random (sd)':>12}  {'quantile':>10}")
        for n, mean, sd, q in self.rows:
            print(f"  {n:>6}  {mean:>14.4f}  {sd:>12.4f}  {q:>10.4f}")
        # Quantile dots are exact up to the (k - 0.5) / n placement
        return all(q < 1e-9 and q < mean for _, mean, _, q in self.rows)


def compare_random_and_quantile(
    n_values: tuple[int, ...] = (10, 20, 50, 100),
    replications: int = 200,
    base_seed: int = 5000,
) -> SimulationResults:
    """Average cdf error of random and quantile dots for each n."""
    dist = LogNormal(mu=math.log(11.4), sigma=0.2)
    results = SimulationResults("Random draws vs quantile dots: max cdf error")

    for n in n_values:
        errors = [
            quantile_error(draw_random_dots(dist, n, base_seed + r), dist)
            for r in range(replications)
        ]
        quantile_dots = compute_quantiles(dist, n=n).quantiles
        results.record(
            n,
            float(np.mean(errors)),
            float(np.std(errors)),
            quantile_error(quantile_dots, dist),
        )

    return results


def reading_nine_minutes(n: int = 20, seeds: range = range(5)) -> None:
    """Print how a reader would answer P(arrival <= 9 min) from each dotplot."""
    dist = LogNormal(mu=math.log(11.4), sigma=0.2)
    exact = float(dist.cdf(9.0))
    quantile_dots = compute_quantiles(dist, n=n)

    print(f"\nP(arrival <= 9 min): exact {exact:.3f}")
    print(f"  quantile dots: {probability_at_most(quantile_dots, 9.0):.3f}")
    for seed in seeds:
        draws = draw_random_dots(dist, n, seed)
        fraction = np.searchsorted(draws, 9.0, side="right") / n
        print(f"  random dots (seed {seed}): {fraction:.3f}")


def main() -> bool:
    print("=" * 80)
    print(" RANDOM DRAWS VS QUANTILE DOTS")
    print("=" * 80)

    start_time = time.time()
    results = compare_random_and_quantile()
    passed = results.summary()
    reading_nine_minutes()

    print(f"\nTotal time: {time.time() - start_time:.2f}s")
    print("PASS" if passed else "FAIL")
    return passed


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
