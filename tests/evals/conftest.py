"""
Pathological fixtures for EVALs - designed to break algorithms.

Each fixture creates a distribution or point set that targets a specific
numerical or layout weakness.
"""

import math

import numpy as np
import pytest

from quantdots import BoxCoxT, Empirical, LogNormal


# =============================================================================
# MINIMAL DATA FIXTURES (n=1, n=2)
# =============================================================================


@pytest.fixture
def single_point():
    """n=1 - zero range, every strategy must fall back."""
    return np.array([4.2])


@pytest.fixture
def two_points():
    """n=2 - smallest input with a non-zero range."""
    return np.array([1.0, 3.0])


# =============================================================================
# TIES AND CLUSTERS
# =============================================================================


@pytest.fixture
def all_tied_points():
    """Every point identical - IQR and range are both zero."""
    return np.full(10, 7.5)


@pytest.fixture
def tied_block_points():
    """A block of ties in the middle of spread points."""
    return np.array([0.0, 1.0, 2.0, 2.0, 2.0, 2.0, 3.0, 4.0])


@pytest.fixture
def discrete_empirical():
    """Posterior draws on a handful of integer values."""
    rng = np.random.default_rng(7)
    return Empirical(rng.integers(0, 4, size=400).astype(float))


# =============================================================================
# EXTREME DISTRIBUTION PARAMETERS
# =============================================================================


@pytest.fixture
def overflowing_bct():
    """sigma=100 with a Cauchy kernel - exp(sigma * z) overflows in the upper tail."""
    return BoxCoxT(mu=1.0, sigma=100.0, nu=0.0, tau=1.0)


@pytest.fixture
def heavy_tailed_bct():
    """tau=1 Cauchy kernel with moderate sigma - long but finite tails."""
    return BoxCoxT(mu=10.0, sigma=0.3, nu=0.0, tau=1.0)


@pytest.fixture
def near_zero_skew_bct():
    """nu=1e-12 - power transform close to the log limit."""
    return BoxCoxT(mu=11.4, sigma=0.2, nu=1e-12, tau=math.inf)


@pytest.fixture
def tiny_scale_lognormal():
    """sigma=1e-12 - every quantile equal up to rounding."""
    return LogNormal(mu=math.log(11.4), sigma=1e-12)


@pytest.fixture
def huge_values_lognormal():
    """Quantiles around 1e300."""
    return LogNormal(mu=690.0, sigma=0.1)
