"""Quantile dotplot algorithms."""

from quantdots.algorithms.quantiles import compute_quantiles, probability_levels
from quantdots.algorithms.binwidth import (
    iqr_bin_width,
    range_bin_width,
    fit_bin_width,
    register_bin_width_strategy,
    available_bin_width_strategies,
    resolve_bin_width,
)
from quantdots.algorithms.layout import LAYOUT_METHODS, layout_dots
from quantdots.algorithms.query import (
    approximate_quantile,
    probability_at_most,
    dot_interval,
)

__all__ = [
    # Quantile generation
    "compute_quantiles",
    "probability_levels",
    # Bin-width strategies
    "iqr_bin_width",
    "range_bin_width",
    "fit_bin_width",
    "register_bin_width_strategy",
    "available_bin_width_strategies",
    "resolve_bin_width",
    # Layout
    "LAYOUT_METHODS",
    "layout_dots",
    # Queries
    "approximate_quantile",
    "probability_at_most",
    "dot_interval",
]
