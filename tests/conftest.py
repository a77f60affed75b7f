"""Pytest fixtures for quantdots tests."""

import math

import numpy as np
import pytest

from quantdots import (
    BoxCoxT,
    LogNormal,
    Normal,
    compute_quantiles,
    layout_dots,
)


@pytest.fixture
def bus_arrival_distribution() -> LogNormal:
    """
    Predicted bus arrival time in minutes.

    Log-normal with median 11.4 minutes and log-scale sigma 0.2, the
    running example of the quantile dotplot study.
    """
    return LogNormal(mu=math.log(11.4), sigma=0.2)


@pytest.fixture
def standard_normal() -> Normal:
    """Symmetric distribution for antisymmetry checks."""
    return Normal(mu=0.0, sigma=1.0)


@pytest.fixture
def skewed_bct() -> BoxCoxT:
    """
    Right-skewed, heavy-tailed Box-Cox-t arrival model.

    nu < 1 skews right after the power transform, tau = 5 gives heavier
    tails than the normal, and the shift moves the support to (2, inf).
    """
    return BoxCoxT(mu=9.0, sigma=0.25, nu=0.5, tau=5.0, shift=2.0)


@pytest.fixture
def bus_quantiles(bus_arrival_distribution):
    """20 quantile points of the bus arrival distribution."""
    return compute_quantiles(bus_arrival_distribution, n=20)


@pytest.fixture
def bus_dotplot(bus_quantiles):
    """Bus arrival dotplot with the 1.25 minute bins used in the study."""
    return layout_dots(bus_quantiles, bin_width=1.25)


@pytest.fixture
def clustered_points() -> np.ndarray:
    """
    Six sorted points in three clusters.

    With bin width 0.5 and origin 0 the grid bins are 0, 2 and 6.
    """
    return np.array([0.0, 0.1, 0.2, 1.0, 1.05, 3.0])
