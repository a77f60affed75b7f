"""Result dataclasses for quantile dotplot construction.

This module provides immutable result containers:
    - QuantileResult: Evenly-probability-spaced quantile points
    - DotplotResult: Quantile points laid out into stacked columns
    - Dot: A single rendering unit of a DotplotResult
    - DotInterval: A central interval read off a dotplot by counting dots
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from quantdots.core.mixins import ResultSummaryMixin
from quantdots.core.types import FloatArray, IntArray


@dataclass(frozen=True)
class QuantileResult:
    """
    Result of evaluating a quantile function at n evenly spaced levels.

    Level i (1-indexed) is (i - 0.5) / n, so the levels never touch 0 or 1
    and are symmetric around the median.

    Attributes:
        quantiles: Length-n non-decreasing array of quantile points
        probabilities: Length-n array of probability levels
        computation_time_ms: Time taken to compute result in milliseconds
    """

    quantiles: FloatArray
    probabilities: FloatArray
    computation_time_ms: float

    @property
    def n(self) -> int:
        """Number of quantile points."""
        return len(self.quantiles)

    @property
    def median(self) -> float:
        """Median of the quantile points."""
        return float(np.median(self.quantiles))

    @property
    def spread(self) -> float:
        """Distance between the smallest and largest quantile point."""
        return float(self.quantiles[-1] - self.quantiles[0])

    def summary(self) -> str:
        """Return human-readable summary report."""
        m = ResultSummaryMixin
        lines = [m._format_header("QUANTILE REPORT")]

        lines.append(m._format_section("Metrics"))
        lines.append(m._format_metric("Quantile Points", self.n))
        lines.append(m._format_metric("Lowest Level", float(self.probabilities[0])))
        lines.append(m._format_metric("Highest Level", float(self.probabilities[-1])))
        lines.append(m._format_metric("Minimum", float(self.quantiles[0])))
        lines.append(m._format_metric("Median", self.median))
        lines.append(m._format_metric("Maximum", float(self.quantiles[-1])))

        lines.append(m._format_footer(self.computation_time_ms))
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Return dictionary representation for serialization."""
        return {
            "n": self.n,
            "quantiles": self.quantiles.tolist(),
            "probabilities": self.probabilities.tolist(),
            "median": self.median,
            "computation_time_ms": self.computation_time_ms,
        }

    def __repr__(self) -> str:
        """Compact string representation."""
        return (
            f"QuantileResult(n={self.n}, "
            f"range=[{self.quantiles[0]:.4g}, {self.quantiles[-1]:.4g}], "
            f"{self.computation_time_ms:.2f}ms)"
        )


@dataclass(frozen=True)
class Dot:
    """
    One dot of a quantile dotplot.

    Attributes:
        quantile: True quantile value the dot represents
        probability: Probability level of that quantile
        bin_index: Index of the column the dot was placed in
        bin_center: x-coordinate of the column centre (for drawing)
        stack: Vertical position within the column, 0 at the bottom
    """

    quantile: float
    probability: float
    bin_index: int
    bin_center: float
    stack: int


@dataclass(frozen=True)
class DotplotResult:
    """
    Result of laying out quantile points into a one-dimensional dotplot.

    Input point i maps to output dot i. Every dot keeps its original
    quantile, so counting dots from the left still reads off quantiles of
    the source distribution; bin_centers are only for drawing.

    Attributes:
        quantiles: Length-n array of quantile points (ascending)
        probabilities: Length-n array of probability levels
        bin_indices: Column index of each dot
        bin_centers: Column centre of each dot
        stack_positions: Stack layer of each dot (0 = bottom)
        bin_width: Width of every column
        method: Binning method used ("grid" or "wilkinson")
        origin: Left edge of the binning grid
        computation_time_ms: Time taken to compute result in milliseconds
    """

    quantiles: FloatArray
    probabilities: FloatArray
    bin_indices: IntArray
    bin_centers: FloatArray
    stack_positions: IntArray
    bin_width: float
    method: str
    origin: float
    computation_time_ms: float

    @property
    def n(self) -> int:
        """Number of dots."""
        return len(self.quantiles)

    @property
    def num_bins(self) -> int:
        """Number of non-empty columns."""
        return len(np.unique(self.bin_indices))

    @property
    def max_stack_height(self) -> int:
        """Number of dots in the tallest column."""
        return int(self.stack_positions.max()) + 1

    @property
    def bin_counts(self) -> dict[int, int]:
        """Mapping of column index to number of dots in that column."""
        indices, counts = np.unique(self.bin_indices, return_counts=True)
        return {int(i): int(c) for i, c in zip(indices, counts)}

    @property
    def dots(self) -> tuple[Dot, ...]:
        """All dots, in input order."""
        return tuple(
            Dot(
                quantile=float(q),
                probability=float(p),
                bin_index=int(b),
                bin_center=float(c),
                stack=int(s),
            )
            for q, p, b, c, s in zip(
                self.quantiles,
                self.probabilities,
                self.bin_indices,
                self.bin_centers,
                self.stack_positions,
            )
        )

    def positions(self) -> tuple[FloatArray, IntArray]:
        """Return (x, stack) arrays for a renderer."""
        return self.bin_centers, self.stack_positions

    def summary(self) -> str:
        """Return human-readable summary report."""
        m = ResultSummaryMixin
        lines = [m._format_header("QUANTILE DOTPLOT REPORT")]

        lines.append(m._format_section("Layout"))
        lines.append(m._format_metric("Dots", self.n))
        lines.append(m._format_metric("Method", self.method))
        lines.append(m._format_metric("Bin Width", self.bin_width))
        lines.append(m._format_metric("Origin", self.origin))
        lines.append(m._format_metric("Columns", self.num_bins))
        lines.append(m._format_metric("Tallest Column", self.max_stack_height))

        lines.append(m._format_section("Quantiles"))
        lines.append(m._format_metric("Minimum", float(self.quantiles[0])))
        lines.append(m._format_metric("Median", float(np.median(self.quantiles))))
        lines.append(m._format_metric("Maximum", float(self.quantiles[-1])))

        lines.append(m._format_section("Columns"))
        columns = _column_centers(self.bin_indices, self.bin_centers)
        counts = self.bin_counts
        lines.append(
            m._format_columns(
                [center for _, center in columns],
                [counts[index] for index, _ in columns],
            )
        )

        lines.append(m._format_footer(self.computation_time_ms))
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Return dictionary representation for serialization."""
        return {
            "n": self.n,
            "bin_width": self.bin_width,
            "method": self.method,
            "origin": self.origin,
            "num_bins": self.num_bins,
            "max_stack_height": self.max_stack_height,
            "dots": [
                {
                    "quantile": d.quantile,
                    "probability": d.probability,
                    "bin_index": d.bin_index,
                    "x": d.bin_center,
                    "stack": d.stack,
                }
                for d in self.dots
            ],
            "computation_time_ms": self.computation_time_ms,
        }

    def __repr__(self) -> str:
        """Compact string representation."""
        return (
            f"DotplotResult(n={self.n}, bin_width={self.bin_width:.4g}, "
            f"bins={self.num_bins}, method={self.method!r}, "
            f"{self.computation_time_ms:.2f}ms)"
        )


@dataclass(frozen=True)
class DotInterval:
    """
    Central interval read off a dotplot by counting dots in from each tail.

    Attributes:
        lower: Quantile value of the lowest included dot
        upper: Quantile value of the highest included dot
        coverage: Requested coverage in (0, 1]
        dots_included: Number of dots between lower and upper inclusive
        num_dots: Total number of dots
    """

    lower: float
    upper: float
    coverage: float
    dots_included: int
    num_dots: int

    @property
    def width(self) -> float:
        """Length of the interval."""
        return self.upper - self.lower

    @property
    def achieved_coverage(self) -> float:
        """Fraction of dots inside the interval."""
        return self.dots_included / self.num_dots

    def to_dict(self) -> dict[str, Any]:
        """Return dictionary representation for serialization."""
        return {
            "lower": self.lower,
            "upper": self.upper,
            "coverage": self.coverage,
            "achieved_coverage": self.achieved_coverage,
            "dots_included": self.dots_included,
            "num_dots": self.num_dots,
        }

    def __repr__(self) -> str:
        """Compact string representation."""
        return (
            f"DotInterval([{self.lower:.4g}, {self.upper:.4g}], "
            f"{self.dots_included}/{self.num_dots} dots)"
        )


def _column_centers(
    bin_indices: IntArray, bin_centers: FloatArray
) -> list[tuple[int, float]]:
    """Return (index, centre) for each distinct column, left to right."""
    _, first = np.unique(bin_indices, return_index=True)
    return [(int(bin_indices[i]), float(bin_centers[i])) for i in sorted(first)]
