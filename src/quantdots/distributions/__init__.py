"""Distribution families exposing an inverse CDF for dotplot construction."""

from quantdots.distributions.base import Distribution, ScipyDistribution, SupportsPPF
from quantdots.distributions.families import BoxCoxT, LogNormal, Normal
from quantdots.distributions.empirical import Empirical

__all__ = [
    "Distribution",
    "SupportsPPF",
    "ScipyDistribution",
    "LogNormal",
    "Normal",
    "BoxCoxT",
    "Empirical",
]
