"""Reading probabilities off a finished dotplot by counting dots.

These are the questions a reader answers by eye ("is there at least a
90% chance the bus comes after 10 minutes?"). Each answer is exact only
up to the dotplot's resolution: with n dots, probabilities are resolved
to within +-1/(2n), and the answers converge to the distribution's own
quantiles only as n grows.
"""

from __future__ import annotations

import math

import numpy as np

from quantdots.core.exceptions import NaNInfError, ValueRangeError
from quantdots.core.result import DotInterval, DotplotResult, QuantileResult
from quantdots.core.types import FloatArray


def approximate_quantile(result: QuantileResult | DotplotResult, p: float) -> float:
    """
    Approximate the p-quantile by counting k = round(p * n) dots from the left.

    Counting up to and including the k-th dot covers k / n of the dots,
    which is within 1/(2n) of p. k is clamped to [1, n], so p = 0 reads
    the first dot and p = 1 the last. Halves round up.

    Args:
        result: QuantileResult or DotplotResult
        p: Cumulative probability in [0, 1]

    Returns:
        Quantile value of the k-th dot

    Example:
        >>> # 2nd of 20 dots: a point with about 10% of arrivals before it
        >>> approximate_quantile(dotplot, 0.10)
        8.547...
    """
    p = _check_probability(p)
    x = _points(result)
    n = len(x)
    k = min(max(math.floor(p * n + 0.5), 1), n)
    return float(x[k - 1])


def probability_at_most(result: QuantileResult | DotplotResult, x: float) -> float:
    """
    Fraction of dots at or below x.

    At the value of the k-th dot this is k / n (more if later dots tie
    with it). Non-decreasing in x.

    Args:
        result: QuantileResult or DotplotResult
        x: Threshold value

    Returns:
        Fraction in [0, 1]

    Raises:
        NaNInfError: If x is NaN or infinite
    """
    x = float(x)
    if not math.isfinite(x):
        raise NaNInfError(f"x must be finite, got {x}.")
    points = _points(result)
    return int(np.searchsorted(points, x, side="right")) / len(points)


def dot_interval(result: QuantileResult | DotplotResult, coverage: float = 0.9) -> DotInterval:
    """
    Central interval obtained by dropping equal numbers of dots from each tail.

    floor(n * (1 - coverage) / 2) dots are removed from each side, so the
    interval holds at least the requested fraction of dots and never
    fewer than one dot.

    Args:
        result: QuantileResult or DotplotResult
        coverage: Requested fraction of dots inside, in (0, 1]

    Returns:
        DotInterval with the lowest and highest included dot
    """
    coverage = float(coverage)
    if not 0.0 < coverage <= 1.0:
        raise ValueRangeError(f"coverage must be in (0, 1], got {coverage}.")

    points = _points(result)
    n = len(points)
    # 1 - 0.9 is 0.0999..., nudge so 20 dots at 90% still drop one per tail
    drop = math.floor(n * (1.0 - coverage) / 2.0 + 1e-9)
    # at least one dot stays inside
    drop = min(drop, (n - 1) // 2)
    return DotInterval(
        lower=float(points[drop]),
        upper=float(points[n - 1 - drop]),
        coverage=coverage,
        dots_included=n - 2 * drop,
        num_dots=n,
    )


def _points(result: QuantileResult | DotplotResult) -> FloatArray:
    if not isinstance(result, (QuantileResult, DotplotResult)):
        raise TypeError(
            f"Expected a QuantileResult or DotplotResult, got {type(result).__name__}."
        )
    return result.quantiles


def _check_probability(p: float) -> float:
    p = float(p)
    if math.isnan(p) or not 0.0 <= p <= 1.0:
        raise ValueRangeError(f"p must be in [0, 1], got {p}.")
    return p
