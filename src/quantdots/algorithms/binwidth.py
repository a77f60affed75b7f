"""Bin-width strategies for dotplot layout.

The right bin width depends on where the dotplot is shown, so the width
is a replaceable policy rather than a fixed formula. A strategy is any
callable taking the sorted quantile points and returning a positive
float. Strategies can be passed directly to layout_dots, or registered
under a name.

Built-in strategies:
    - 'iqr': Freedman-Diaconis style, 2 * IQR / n^(1/3) (default)
    - 'range': range / ceil(sqrt(n))
    - 'fit': largest width whose tallest column fits an aspect ratio
"""

from __future__ import annotations

import math
import numbers
import warnings
from typing import Any

import numpy as np

from quantdots._kernels import max_stack_height_numba
from quantdots.config import (
    DEFAULT_BIN_WIDTH,
    DEGENERATE_BIN_WIDTH,
    FIT_ASPECT_RATIO,
    FIT_MAX_ITERATIONS,
    FIT_TOLERANCE,
)
from quantdots.core.exceptions import (
    InvalidBinWidthError,
    NumericalInstabilityWarning,
    ValueRangeError,
)
from quantdots.core.types import BinWidthSpec, BinWidthStrategy, FloatArray


def iqr_bin_width(values: FloatArray) -> float:
    """
    Freedman-Diaconis style width: 2 * IQR / n^(1/3).

    With n around 20 this gives roughly eight columns for a unimodal
    distribution. Falls back to range / n when the IQR is zero, and to
    DEGENERATE_BIN_WIDTH when all points coincide.

    Args:
        values: Sorted quantile points

    Returns:
        Positive bin width
    """
    values = np.asarray(values, dtype=np.float64)
    n = len(values)
    q75, q25 = np.percentile(values, [75, 25])
    iqr = float(q75 - q25)
    if iqr > 0:
        return 2.0 * iqr / n ** (1.0 / 3.0)
    return _fallback_width(values)


def range_bin_width(values: FloatArray) -> float:
    """Width giving about sqrt(n) columns across the range of the points."""
    values = np.asarray(values, dtype=np.float64)
    span = float(np.ptp(values))
    if span > 0:
        return span / math.ceil(math.sqrt(len(values)))
    return DEGENERATE_BIN_WIDTH


def fit_bin_width(
    values: FloatArray,
    aspect_ratio: float = FIT_ASPECT_RATIO,
    tolerance: float = FIT_TOLERANCE,
    max_iterations: int = FIT_MAX_ITERATIONS,
) -> float:
    """
    Largest width whose tallest column fits the given aspect ratio.

    Dots have diameter equal to the bin width, so the tallest column is
    max_stack(w) * w high and the plot is about (range + w) wide. The
    constraint

        max_stack(w) * w <= aspect_ratio * (range + w)

    holds for small widths and fails once columns merge, so a binary
    search finds the largest width satisfying it.

    Columns are counted on a grid that starts at the smallest point. A
    grid layout with an explicit x_range starts at x_range[0] instead,
    which can shift points between columns. Each shifted column overlaps
    at most two searched columns, so the tallest one can be up to twice
    the height the search allowed for.

    Args:
        values: Sorted quantile points
        aspect_ratio: Allowed height/width ratio of the dotplot
        tolerance: Convergence tolerance, relative to the range
        max_iterations: Maximum binary search iterations

    Returns:
        Positive bin width
    """
    if not aspect_ratio > 0:
        raise ValueRangeError(f"aspect_ratio must be positive, got {aspect_ratio}.")

    values = np.ascontiguousarray(values, dtype=np.float64)
    span = float(np.ptp(values))
    if span == 0:
        return DEGENERATE_BIN_WIDTH

    origin = float(values[0])

    def fits(width: float) -> bool:
        height = max_stack_height_numba(values, origin, width)
        return height * width <= aspect_ratio * (span + width)

    if fits(span):
        return span

    w_low = 0.0
    w_high = span
    iterations = 0
    while (w_high - w_low > tolerance * span) and (iterations < max_iterations):
        w_mid = (w_low + w_high) / 2
        if fits(w_mid):
            w_low = w_mid
        else:
            w_high = w_mid
        iterations += 1

    if w_high - w_low > tolerance * span:
        warnings.warn(
            f"Bin-width search stopped after {iterations} iterations "
            f"without reaching tolerance {tolerance}.",
            NumericalInstabilityWarning,
            stacklevel=2,
        )

    return w_low if w_low > 0 else _fallback_width(values)


def _fallback_width(values: FloatArray) -> float:
    span = float(np.ptp(values))
    if span > 0:
        return span / len(values)
    return DEGENERATE_BIN_WIDTH


_STRATEGIES: dict[str, BinWidthStrategy] = {
    "iqr": iqr_bin_width,
    "range": range_bin_width,
    "fit": fit_bin_width,
}


def register_bin_width_strategy(name: str, strategy: BinWidthStrategy) -> None:
    """
    Register a bin-width strategy under a name usable in layout_dots.

    Args:
        name: Name to register; replaces any existing strategy of that name
        strategy: Callable mapping sorted points to a positive width

    Example:
        >>> register_bin_width_strategy("tenth", lambda x: np.ptp(x) / 10)
        >>> layout_dots(points, bin_width="tenth")
    """
    if not callable(strategy):
        raise TypeError(f"strategy must be callable, got {type(strategy).__name__}.")
    _STRATEGIES[name] = strategy


def available_bin_width_strategies() -> list[str]:
    """Names of all registered bin-width strategies."""
    return sorted(_STRATEGIES)


def resolve_bin_width(bin_width: BinWidthSpec | None, values: FloatArray) -> float:
    """
    Turn a bin-width setting into a validated positive width.

    Args:
        bin_width: A number, a registered strategy name, a strategy callable,
            or None for the default strategy
        values: Sorted quantile points the strategy is applied to

    Returns:
        Positive finite bin width

    Raises:
        InvalidBinWidthError: If the width is not positive and finite, or
            the strategy name is unknown
        TypeError: If bin_width is of an unsupported type
    """
    if bin_width is None:
        bin_width = DEFAULT_BIN_WIDTH

    if isinstance(bin_width, str):
        width: Any = _lookup_strategy(bin_width)(values)
        source = f"strategy {bin_width!r}"
    elif isinstance(bin_width, numbers.Real) and not isinstance(bin_width, bool):
        width = bin_width
        source = "bin_width"
    elif callable(bin_width):
        width = bin_width(values)
        source = f"strategy {getattr(bin_width, '__name__', type(bin_width).__name__)!r}"
    else:
        raise _unsupported_type(bin_width)

    return _validate_bin_width(width, source)


def check_bin_width_setting(bin_width: BinWidthSpec | None) -> None:
    """
    Check a bin-width setting before any points are available.

    Numbers must be positive and finite and names must be registered.
    Callables can only be checked once they are applied to points.

    Raises:
        InvalidBinWidthError: If a number is not positive and finite, or
            the strategy name is unknown
        TypeError: If bin_width is of an unsupported type
    """
    if bin_width is None:
        return
    if isinstance(bin_width, str):
        _lookup_strategy(bin_width)
    elif isinstance(bin_width, numbers.Real) and not isinstance(bin_width, bool):
        _validate_bin_width(bin_width, "bin_width")
    elif not callable(bin_width):
        raise _unsupported_type(bin_width)


def _lookup_strategy(name: str) -> BinWidthStrategy:
    strategy = _STRATEGIES.get(name)
    if strategy is None:
        raise InvalidBinWidthError(
            f"Unknown bin-width strategy {name!r}. "
            f"Available: {available_bin_width_strategies()}."
        )
    return strategy


def _unsupported_type(bin_width: Any) -> TypeError:
    return TypeError(
        f"bin_width must be a number, a strategy name or a callable, "
        f"got {type(bin_width).__name__}."
    )


def _validate_bin_width(width: Any, source: str) -> float:
    try:
        width = float(width)
    except (TypeError, ValueError) as e:
        raise InvalidBinWidthError(
            f"{source} produced a non-numeric bin width {width!r}."
        ) from e
    if not math.isfinite(width) or width <= 0:
        raise InvalidBinWidthError(
            f"bin_width must be positive and finite, got {width} from {source}. "
            f"Hint: Pass a strategy name such as 'iqr' to choose a width "
            f"from the data."
        )
    return width
