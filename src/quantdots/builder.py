"""QuantileDotplotBuilder: High-level API for quantile dotplot construction.

The builder bundles the three steps of a quantile dotplot:

    distribution -> probability levels -> quantiles -> stacked dots

behind one configured object, so a study can build one dotplot per
condition with identical settings.
"""

from __future__ import annotations

from typing import Any

from quantdots.algorithms.binwidth import check_bin_width_setting
from quantdots.algorithms.layout import (
    LAYOUT_METHODS,
    _build_layout,
    _warn_degenerate_layout,
    check_x_range,
)
from quantdots.algorithms.quantiles import _validate_sample_count, compute_quantiles
from quantdots.config import DEFAULT_BIN_WIDTH, DEFAULT_METHOD, DEFAULT_N_DOTS
from quantdots.core.exceptions import ValueRangeError
from quantdots.core.result import DotplotResult, QuantileResult
from quantdots.core.types import BinWidthSpec, XRange


class QuantileDotplotBuilder:
    """
    Builds quantile dotplots from any distribution with a quantile function.

    The builder holds only its configuration. Each call to build() is a
    pure function of the distribution, so one builder can be shared
    freely, including across threads.

    Example:
        >>> import math
        >>> from quantdots import LogNormal, QuantileDotplotBuilder
        >>> builder = QuantileDotplotBuilder(n_dots=20, bin_width=1.25)
        >>> dotplot = builder.build(LogNormal(math.log(11.4), 0.2))
        >>> dotplot.n
        20

    Attributes:
        n_dots: Number of dots per dotplot
        bin_width: Width, strategy name or strategy callable
        method: Layout method ('grid' or 'wilkinson')
        x_range: Optional fixed (lower, upper) x-axis bounds
    """

    def __init__(
        self,
        n_dots: int = DEFAULT_N_DOTS,
        bin_width: BinWidthSpec = DEFAULT_BIN_WIDTH,
        method: str = DEFAULT_METHOD,
        x_range: XRange | None = None,
    ) -> None:
        """
        Initialize the builder.

        Args:
            n_dots: Number of dots, >= 1 (default: 20)
            bin_width: Positive width, strategy name or callable
                (default: 'iqr')
            method: 'grid' (default) or 'wilkinson'
            x_range: Optional (lower, upper) bounds shared by all plots,
                so several dotplots line up on one axis

        Raises:
            InvalidSampleCountError: If n_dots is not an integer >= 1
            InvalidBinWidthError: If a numeric bin_width is not positive and
                finite, or a strategy name is not registered
            NaNInfError: If x_range has a non-finite bound
            ValueRangeError: If method is unknown or x_range is not an
                increasing (lower, upper) pair
            TypeError: If bin_width is of an unsupported type
        """
        if method not in LAYOUT_METHODS:
            raise ValueRangeError(
                f"Unknown layout method {method!r}. Available: {list(LAYOUT_METHODS)}."
            )
        check_bin_width_setting(bin_width)
        self.n_dots = _validate_sample_count(n_dots)
        self.bin_width = bin_width
        self.method = method
        self.x_range = check_x_range(x_range) if x_range is not None else None

    def quantiles(self, distribution: Any) -> QuantileResult:
        """
        Compute the quantile points without laying them out.

        Args:
            distribution: Object with a ppf method, or a quantile function

        Returns:
            QuantileResult with n_dots points
        """
        return compute_quantiles(distribution, n=self.n_dots)

    def build(self, distribution: Any) -> DotplotResult:
        """
        Build a laid-out quantile dotplot.

        Args:
            distribution: Object with a ppf method, or a quantile function

        Returns:
            DotplotResult ready for an external renderer

        Raises:
            DomainError: If the quantile function fails at a level
            InvalidBinWidthError: If the configured width is invalid
        """
        result = self._layout(distribution)
        _warn_degenerate_layout(result)
        return result

    def _layout(self, distribution: Any) -> DotplotResult:
        return _build_layout(
            self.quantiles(distribution),
            bin_width=self.bin_width,
            x_range=self.x_range,
            method=self.method,
        )

    def __repr__(self) -> str:
        return (
            f"QuantileDotplotBuilder(n_dots={self.n_dots}, "
            f"bin_width={self.bin_width!r}, method={self.method!r})"
        )


def quantile_dotplot(
    distribution: Any,
    n_dots: int = DEFAULT_N_DOTS,
    bin_width: BinWidthSpec = DEFAULT_BIN_WIDTH,
    method: str = DEFAULT_METHOD,
    x_range: XRange | None = None,
) -> DotplotResult:
    """
    Convenience function: build a quantile dotplot in one call.

    Equivalent to QuantileDotplotBuilder(...).build(distribution).

    Args:
        distribution: Object with a ppf method, or a quantile function
        n_dots: Number of dots (default: 20)
        bin_width: Width, strategy name or callable (default: 'iqr')
        method: 'grid' (default) or 'wilkinson'
        x_range: Optional (lower, upper) x-axis bounds

    Returns:
        DotplotResult
    """
    builder = QuantileDotplotBuilder(
        n_dots=n_dots, bin_width=bin_width, method=method, x_range=x_range
    )
    result = builder._layout(distribution)
    _warn_degenerate_layout(result)
    return result
