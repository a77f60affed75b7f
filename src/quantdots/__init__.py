"""
quantdots: Quantile dotplots for communicating uncertainty.

Turns any continuous distribution into a small set of evenly
probability-spaced points and stacks them into a dotplot that readers
can count, e.g. "2 of 20 buses arrive before 9 minutes".
"""

from quantdots.core.result import QuantileResult, DotplotResult, Dot, DotInterval
from quantdots.core.exceptions import (
    QuantDotsError,
    DataValidationError,
    ValueRangeError,
    NaNInfError,
    InsufficientDataError,
    InvalidSampleCountError,
    InvalidBinWidthError,
    DomainError,
    DataQualityWarning,
    NumericalInstabilityWarning,
)
from quantdots.distributions import (
    Distribution,
    SupportsPPF,
    ScipyDistribution,
    LogNormal,
    Normal,
    BoxCoxT,
    Empirical,
)
from quantdots.algorithms.quantiles import compute_quantiles, probability_levels
from quantdots.algorithms.binwidth import (
    iqr_bin_width,
    range_bin_width,
    fit_bin_width,
    register_bin_width_strategy,
    available_bin_width_strategies,
)
from quantdots.algorithms.layout import layout_dots
from quantdots.algorithms.query import (
    approximate_quantile,
    probability_at_most,
    dot_interval,
)
from quantdots.builder import QuantileDotplotBuilder, quantile_dotplot

__version__ = "0.1.0"

__all__ = [
    # Builder
    "QuantileDotplotBuilder",
    "quantile_dotplot",
    # Result types
    "QuantileResult",
    "DotplotResult",
    "Dot",
    "DotInterval",
    # Distributions
    "Distribution",
    "SupportsPPF",
    "ScipyDistribution",
    "LogNormal",
    "Normal",
    "BoxCoxT",
    "Empirical",
    # Quantile generation
    "compute_quantiles",
    "probability_levels",
    # Layout
    "layout_dots",
    "iqr_bin_width",
    "range_bin_width",
    "fit_bin_width",
    "register_bin_width_strategy",
    "available_bin_width_strategies",
    # Queries
    "approximate_quantile",
    "probability_at_most",
    "dot_interval",
    # Exceptions
    "QuantDotsError",
    "DataValidationError",
    "ValueRangeError",
    "NaNInfError",
    "InsufficientDataError",
    "InvalidSampleCountError",
    "InvalidBinWidthError",
    "DomainError",
    # Warnings
    "DataQualityWarning",
    "NumericalInstabilityWarning",
]
