"""Quantile generation: distribution -> n evenly-probability-spaced points."""

from __future__ import annotations

import numbers
import time
import warnings
from typing import Any, Callable

import numpy as np

from quantdots.config import DEFAULT_N_DOTS, MONOTONICITY_RTOL
from quantdots.core.exceptions import (
    DomainError,
    InvalidSampleCountError,
    NumericalInstabilityWarning,
)
from quantdots.core.result import QuantileResult
from quantdots.core.types import FloatArray


def probability_levels(n: int) -> FloatArray:
    """
    Return the n probability levels of a quantile dotplot.

    Level i (1-indexed) is (i - 0.5) / n. The levels are strictly
    increasing, symmetric around 0.5 and never include 0 or 1, so
    distributions with unbounded support still give finite quantiles.

    Args:
        n: Number of levels, >= 1

    Returns:
        Array of n probabilities in (0, 1)

    Example:
        >>> probability_levels(4)
        array([0.125, 0.375, 0.625, 0.875])
    """
    n = _validate_sample_count(n)
    return (np.arange(1, n + 1, dtype=np.float64) - 0.5) / n


def compute_quantiles(
    distribution: Any,
    n: int = DEFAULT_N_DOTS,
    rtol: float = MONOTONICITY_RTOL,
) -> QuantileResult:
    """
    Evaluate a quantile function at n evenly spaced probability levels.

    quantile[i] = distribution.ppf((i - 0.5) / n) for i = 1..n

    Unlike drawing n random samples, this is deterministic: the same
    distribution and n always give bit-identical output, and even small n
    gives a faithful picture of the distribution's shape.

    Args:
        distribution: Object with a vectorised ``ppf`` method (any
            quantdots Distribution or frozen scipy.stats distribution),
            or a plain callable mapping one probability to one value
        n: Number of quantile points (default: 20)
        rtol: Relative size of a decrease in the sequence that is
            repaired as floating-point noise instead of raising

    Returns:
        QuantileResult with n non-decreasing quantile points

    Raises:
        InvalidSampleCountError: If n is not an integer >= 1
        DomainError: If the quantile function is non-finite or undefined
            at a level, or is clearly not monotone
        TypeError: If distribution has no quantile function

    Example:
        >>> import math
        >>> from quantdots import LogNormal, compute_quantiles
        >>> result = compute_quantiles(LogNormal(math.log(11.4), 0.2), n=20)
        >>> result.n
        20
    """
    start_time = time.perf_counter()

    quantile_function = _resolve_quantile_function(distribution)
    probabilities = probability_levels(n)

    quantiles = quantile_function(probabilities)
    _check_finite_quantiles(quantiles, probabilities)
    quantiles = _enforce_monotone(quantiles, probabilities, rtol)

    quantiles.setflags(write=False)
    probabilities.setflags(write=False)

    computation_time = (time.perf_counter() - start_time) * 1000

    return QuantileResult(
        quantiles=quantiles,
        probabilities=probabilities,
        computation_time_ms=computation_time,
    )


def _validate_sample_count(n: Any) -> int:
    """Return n as int, raising InvalidSampleCountError unless n >= 1."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidSampleCountError(
            f"n must be an integer >= 1, got {n!r} ({type(n).__name__})."
        )
    if n < 1:
        raise InvalidSampleCountError(
            f"n must be an integer >= 1, got {n}. "
            f"Hint: Quantile dotplots typically use 10 to 100 dots."
        )
    return int(n)


def _resolve_quantile_function(distribution: Any) -> Callable[[FloatArray], FloatArray]:
    """Return a vectorised quantile function for the given distribution."""
    ppf = getattr(distribution, "ppf", None)
    if callable(ppf):
        return lambda probabilities: _evaluate_vectorised(ppf, probabilities)
    if callable(distribution):
        return lambda probabilities: _evaluate_pointwise(distribution, probabilities)
    raise TypeError(
        f"Expected a distribution with a ppf method or a quantile function, "
        f"got {type(distribution).__name__}."
    )


def _evaluate_vectorised(ppf: Callable, probabilities: FloatArray) -> FloatArray:
    try:
        with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
            values = np.asarray(ppf(probabilities), dtype=np.float64)
    except DomainError:
        raise
    except (ValueError, ArithmeticError) as e:
        raise DomainError(
            f"Quantile function is undefined on the probability levels "
            f"[{probabilities[0]:.6g}, ..., {probabilities[-1]:.6g}]: {e}",
            probability=None,
        ) from e
    if values.shape != probabilities.shape:
        raise DomainError(
            f"Quantile function returned shape {values.shape} for "
            f"{len(probabilities)} probability levels."
        )
    return values.copy()


def _evaluate_pointwise(quantile_function: Callable, probabilities: FloatArray) -> FloatArray:
    values = np.empty_like(probabilities)
    for i, p in enumerate(probabilities):
        try:
            values[i] = float(quantile_function(float(p)))
        except (ValueError, ArithmeticError) as e:
            raise DomainError(
                f"Quantile function is undefined at probability level {p:.6g}: {e}",
                probability=float(p),
            ) from e
    return values


def _check_finite_quantiles(quantiles: FloatArray, probabilities: FloatArray) -> None:
    invalid = ~np.isfinite(quantiles)
    if not np.any(invalid):
        return
    first = int(np.argmax(invalid))
    p = float(probabilities[first])
    raise DomainError(
        f"Quantile function returned {quantiles[first]} at probability level "
        f"{p:.6g} ({int(invalid.sum())} of {len(quantiles)} levels non-finite). "
        f"Hint: The distribution parameters may push the quantile function "
        f"outside its valid domain.",
        probability=p,
    )


def _enforce_monotone(
    quantiles: FloatArray, probabilities: FloatArray, rtol: float
) -> FloatArray:
    """Repair floating-point-sized decreases, raise on real ones."""
    steps = np.diff(quantiles)
    if len(steps) == 0 or np.all(steps >= 0):
        return quantiles

    scale = max(float(np.max(np.abs(quantiles))), float(np.ptp(quantiles)))
    worst = int(np.argmin(steps))
    if -steps[worst] > rtol * scale:
        p = float(probabilities[worst + 1])
        raise DomainError(
            f"Quantile function is not monotone: value at level {p:.6g} "
            f"({quantiles[worst + 1]:.6g}) is below the value at the previous "
            f"level ({quantiles[worst]:.6g}).",
            probability=p,
        )

    warnings.warn(
        f"Quantile sequence decreased by up to {-steps[worst]:.3e}; "
        f"repaired with a running maximum.",
        NumericalInstabilityWarning,
        stacklevel=3,
    )
    return np.maximum.accumulate(quantiles)
