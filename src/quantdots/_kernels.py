"""Numba JIT-compiled kernels for quantdots layout.

The stacking passes are sequential loops over sorted points, which is
exactly the shape of code Numba compiles well. All functions use
`@njit(cache=True)` to cache compiled code to disk, avoiding
recompilation overhead.
"""

from __future__ import annotations

import numpy as np
from numba import njit


# =============================================================================
# FIXED-GRID STACKING
# =============================================================================


@njit(cache=True)
def grid_stack_numba(
    x: np.ndarray, origin: float, bin_width: float, max_index: int
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Stack sorted points on a fixed grid of width bin_width.

    bin_index = floor((x - origin) / bin_width), clipped to max_index when
    max_index >= 0. Points sharing a bin are stacked in input order.

    Args:
        x: Sorted (ascending) float64 array of points
        origin: Left edge of bin 0
        bin_width: Positive bin width
        max_index: Largest allowed bin index, or -1 for no limit

    Returns:
        Tuple of (bin_indices, bin_centers, stacks)
    """
    n = x.shape[0]
    bin_indices = np.empty(n, dtype=np.int64)
    bin_centers = np.empty(n, dtype=np.float64)
    stacks = np.empty(n, dtype=np.int64)

    previous = -1
    count = 0
    for i in range(n):
        index = int(np.floor((x[i] - origin) / bin_width))
        if max_index >= 0 and index > max_index:
            index = max_index
        if i > 0 and index == previous:
            count += 1
        else:
            count = 0
        previous = index

        bin_indices[i] = index
        bin_centers[i] = origin + (index + 0.5) * bin_width
        stacks[i] = count

    return bin_indices, bin_centers, stacks


# =============================================================================
# WILKINSON DOT-DENSITY STACKING
# =============================================================================


@njit(cache=True)
def wilkinson_stack_numba(
    x: np.ndarray, bin_width: float
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Wilkinson's greedy dot-density stacking of sorted points.

    A column opens at the first unplaced point and takes every following
    point that lies less than bin_width to its right. The column is drawn
    at the midpoint of its first and last point.

    Args:
        x: Sorted (ascending) float64 array of points
        bin_width: Positive bin width

    Returns:
        Tuple of (bin_indices, bin_centers, stacks)
    """
    n = x.shape[0]
    bin_indices = np.empty(n, dtype=np.int64)
    bin_centers = np.empty(n, dtype=np.float64)
    stacks = np.empty(n, dtype=np.int64)

    column = -1
    first = 0
    start = 0.0
    count = 0
    for i in range(n):
        if i == 0 or x[i] >= start + bin_width:
            if i > 0:
                center = 0.5 * (x[first] + x[i - 1])
                for j in range(first, i):
                    bin_centers[j] = center
            column += 1
            first = i
            start = x[i]
            count = 0
        else:
            count += 1

        bin_indices[i] = column
        stacks[i] = count

    if n > 0:
        center = 0.5 * (x[first] + x[n - 1])
        for j in range(first, n):
            bin_centers[j] = center

    return bin_indices, bin_centers, stacks


# =============================================================================
# COLUMN HEIGHT
# =============================================================================


@njit(cache=True)
def max_stack_height_numba(x: np.ndarray, origin: float, bin_width: float) -> int:
    """Number of dots in the tallest fixed-grid column of sorted points."""
    n = x.shape[0]
    best = 0
    previous = -1
    count = 0
    for i in range(n):
        index = int(np.floor((x[i] - origin) / bin_width))
        if i > 0 and index == previous:
            count += 1
        else:
            count = 1
        previous = index
        if count > best:
            best = count
    return best
