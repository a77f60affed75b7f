"""Dot layout: sorted quantile points -> stacked, non-overlapping dots."""

from __future__ import annotations

import math
import time
import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from quantdots._kernels import grid_stack_numba, wilkinson_stack_numba
from quantdots.algorithms.binwidth import resolve_bin_width
from quantdots.algorithms.quantiles import probability_levels
from quantdots.config import DEFAULT_METHOD, MAX_GRID_INDEX
from quantdots.core.exceptions import (
    DataQualityWarning,
    InsufficientDataError,
    InvalidBinWidthError,
    NaNInfError,
    ValueRangeError,
)
from quantdots.core.result import DotplotResult, QuantileResult
from quantdots.core.types import BinWidthSpec, FloatArray, XRange

LAYOUT_METHODS = ("grid", "wilkinson")


def layout_dots(
    quantiles: QuantileResult | ArrayLike,
    bin_width: BinWidthSpec | None = None,
    x_range: XRange | None = None,
    method: str = DEFAULT_METHOD,
    probabilities: ArrayLike | None = None,
) -> DotplotResult:
    """
    Lay out sorted quantile points as a one-dimensional stacked dotplot.

    Two binning methods are available:

    - 'grid': the x-axis is cut into bins of width bin_width starting at
      origin (x_range[0] if given, else the smallest point). A point goes
      to bin floor((x - origin) / bin_width) and is stacked on top of the
      points already in that bin. Columns are drawn at bin midpoints.
    - 'wilkinson': Wilkinson's dot-density pass. A column opens at the
      first unplaced point and takes every following point less than
      bin_width to its right; it is drawn at the midpoint of its first
      and last point.

    Either way, input point i maps to output dot i, every dot keeps its
    true quantile, and each column centre lies within one bin width of
    the quantiles stacked in it.

    Args:
        quantiles: QuantileResult, or 1D array of points sorted ascending
        bin_width: Positive width, strategy name ('iqr', 'range', 'fit'
            or any registered name), strategy callable, or None for the
            default strategy
        x_range: Optional (lower, upper) bounds of the x-axis; all points
            must lie inside it. With 'grid' the lower bound is the origin,
            and width strategies (which see only the points) do not account
            for that shift.
        method: 'grid' (default) or 'wilkinson'
        probabilities: Probability level of each point. Taken from the
            QuantileResult when one is given, otherwise defaults to
            (i - 0.5) / n.

    Returns:
        DotplotResult with one dot per input point

    Raises:
        InvalidBinWidthError: If the width is not positive and finite, or
            so narrow that grid bin indices lose precision
        InsufficientDataError: If there are no points
        NaNInfError: If any point is NaN or Inf
        ValueRangeError: If points are unsorted or outside x_range, or the
            method is unknown

    Example:
        >>> result = compute_quantiles(LogNormal(math.log(11.4), 0.2), n=20)
        >>> dotplot = layout_dots(result, bin_width=1.25)
        >>> dotplot.n
        20
    """
    result = _build_layout(quantiles, bin_width, x_range, method, probabilities)
    _warn_degenerate_layout(result)
    return result


def _build_layout(
    quantiles: QuantileResult | ArrayLike,
    bin_width: BinWidthSpec | None,
    x_range: XRange | None,
    method: str,
    probabilities: ArrayLike | None = None,
) -> DotplotResult:
    """Layout without the degenerate-layout warnings, for callers that warn themselves."""
    start_time = time.perf_counter()

    if method not in LAYOUT_METHODS:
        raise ValueRangeError(
            f"Unknown layout method {method!r}. Available: {list(LAYOUT_METHODS)}."
        )

    if isinstance(quantiles, QuantileResult):
        if probabilities is None:
            probabilities = quantiles.probabilities
        quantiles = quantiles.quantiles

    x = _validate_points(quantiles)
    n = len(x)
    levels = _validate_probabilities(probabilities, n)
    bounds = _validate_x_range(x_range, x)

    width = resolve_bin_width(bin_width, x)

    if method == "grid":
        origin = bounds[0] if bounds is not None else float(x[0])
        _check_grid_size(x, origin, width)
        max_index = -1
        if bounds is not None:
            max_index = max(0, math.ceil((bounds[1] - bounds[0]) / width) - 1)
        bin_indices, bin_centers, stacks = grid_stack_numba(x, origin, width, max_index)
    else:
        origin = float(x[0])
        bin_indices, bin_centers, stacks = wilkinson_stack_numba(x, width)

    for array in (x, levels, bin_indices, bin_centers, stacks):
        array.setflags(write=False)

    return DotplotResult(
        quantiles=x,
        probabilities=levels,
        bin_indices=bin_indices,
        bin_centers=bin_centers,
        stack_positions=stacks,
        bin_width=width,
        method=method,
        origin=origin,
        computation_time_ms=(time.perf_counter() - start_time) * 1000,
    )


def _validate_points(quantiles: Any) -> FloatArray:
    x = np.array(quantiles, dtype=np.float64)
    if x.ndim != 1:
        raise ValueRangeError(
            f"quantiles must be a 1D array, got {x.ndim}D with shape {x.shape}."
        )
    if x.size == 0:
        raise InsufficientDataError(
            "Need at least one quantile point to lay out. "
            "Hint: Check that the quantile sequence is not empty."
        )
    invalid = ~np.isfinite(x)
    if np.any(invalid):
        positions = np.flatnonzero(invalid)
        preview = positions[:5].tolist()
        raise NaNInfError(
            f"Found {len(positions)} NaN/Inf quantile points at positions: "
            f"{preview}{'...' if len(positions) > 5 else ''}."
        )
    decreasing = np.flatnonzero(np.diff(x) < 0)
    if len(decreasing) > 0:
        i = int(decreasing[0])
        raise ValueRangeError(
            f"quantiles must be sorted ascending; point {i + 1} ({x[i + 1]:.6g}) "
            f"is below point {i} ({x[i]:.6g}). "
            f"Hint: Sort the points, or generate them with compute_quantiles()."
        )
    return np.ascontiguousarray(x)


def _validate_probabilities(probabilities: ArrayLike | None, n: int) -> FloatArray:
    if probabilities is None:
        return probability_levels(n)
    levels = np.array(probabilities, dtype=np.float64)
    if levels.shape != (n,):
        raise ValueRangeError(
            f"probabilities must have shape ({n},) to match the quantiles, "
            f"got {levels.shape}."
        )
    if np.any(~np.isfinite(levels)) or np.any((levels < 0) | (levels > 1)):
        raise ValueRangeError("probabilities must all lie in [0, 1].")
    return levels


def check_x_range(x_range: XRange) -> tuple[float, float]:
    """Return x_range as finite (lower, upper) floats with lower < upper."""
    bounds = tuple(float(v) for v in x_range)
    if len(bounds) != 2:
        raise ValueRangeError(
            f"x_range must be a (lower, upper) pair, got {len(bounds)} values."
        )
    lower, upper = bounds
    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise NaNInfError(f"x_range must be finite, got ({lower}, {upper}).")
    if lower >= upper:
        raise ValueRangeError(
            f"x_range lower bound must be below upper bound, got ({lower}, {upper})."
        )
    return lower, upper


def _validate_x_range(x_range: XRange | None, x: FloatArray) -> tuple[float, float] | None:
    if x_range is None:
        return None
    lower, upper = check_x_range(x_range)
    if x[0] < lower or x[-1] > upper:
        raise ValueRangeError(
            f"Quantile points span [{x[0]:.6g}, {x[-1]:.6g}], outside "
            f"x_range ({lower:.6g}, {upper:.6g}). "
            f"Hint: Widen x_range or omit it."
        )
    return lower, upper


def _warn_degenerate_layout(result: DotplotResult, stacklevel: int = 3) -> None:
    """Warn about single-column or one-dot-per-column layouts.

    The default stacklevel points at the caller of a public function that
    calls this helper directly.
    """
    if result.n <= 2:
        return
    if result.num_bins == 1:
        warnings.warn(
            f"bin_width={result.bin_width:.4g} puts all {result.n} dots in one "
            f"column. Consider a smaller bin width.",
            DataQualityWarning,
            stacklevel=stacklevel,
        )
    elif result.num_bins == result.n:
        warnings.warn(
            f"bin_width={result.bin_width:.4g} gives every dot its own column, "
            f"so the layout carries no density information. "
            f"Consider a larger bin width.",
            DataQualityWarning,
            stacklevel=stacklevel,
        )


def _check_grid_size(x: FloatArray, origin: float, width: float) -> None:
    with np.errstate(over="ignore"):
        last_index = (x[-1] - origin) / width
    if not last_index <= MAX_GRID_INDEX:
        raise InvalidBinWidthError(
            f"bin_width={width:.4g} cuts the range [{origin:.6g}, {x[-1]:.6g}] "
            f"into more than {MAX_GRID_INDEX} bins. "
            f"Hint: Use method='wilkinson' or a wider bin."
        )
