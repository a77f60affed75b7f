"""Tests for distribution family adapters."""

import math

import numpy as np
import pytest
from scipy import integrate, stats

from quantdots import (
    BoxCoxT,
    Distribution,
    Empirical,
    InsufficientDataError,
    LogNormal,
    NaNInfError,
    Normal,
    ScipyDistribution,
    SupportsPPF,
    ValueRangeError,
    compute_quantiles,
    probability_levels,
)

LEVELS = probability_levels(20)


class TestLogNormal:
    """Tests for the log-normal family."""

    def test_matches_scipy(self, bus_arrival_distribution):
        """ppf, cdf and pdf agree with scipy.stats.lognorm."""
        reference = stats.lognorm(s=0.2, scale=11.4)
        x = np.linspace(5.0, 20.0, 7)

        np.testing.assert_allclose(bus_arrival_distribution.ppf(LEVELS), reference.ppf(LEVELS))
        np.testing.assert_allclose(bus_arrival_distribution.cdf(x), reference.cdf(x))
        np.testing.assert_allclose(bus_arrival_distribution.pdf(x), reference.pdf(x))

    def test_median(self, bus_arrival_distribution):
        """The median is exp(mu)."""
        assert bus_arrival_distribution.median() == pytest.approx(11.4)

    def test_from_median(self, bus_arrival_distribution):
        """from_median builds the same distribution."""
        assert LogNormal.from_median(11.4, 0.2) == bus_arrival_distribution

    def test_cdf_inverts_ppf(self, bus_arrival_distribution):
        """cdf(ppf(p)) = p."""
        np.testing.assert_allclose(
            bus_arrival_distribution.cdf(bus_arrival_distribution.ppf(LEVELS)), LEVELS
        )

    @pytest.mark.parametrize("sigma", [0.0, -0.2])
    def test_non_positive_sigma(self, sigma):
        """sigma must be strictly positive."""
        with pytest.raises(ValueRangeError):
            LogNormal(mu=0.0, sigma=sigma)

    def test_nan_mu(self):
        """mu must be finite."""
        with pytest.raises(NaNInfError):
            LogNormal(mu=np.nan, sigma=0.2)

    def test_immutable(self, bus_arrival_distribution):
        """Parameters cannot be reassigned."""
        with pytest.raises(AttributeError):
            bus_arrival_distribution.sigma = 0.5


class TestNormal:
    """Tests for the normal family."""

    def test_interval(self, standard_normal):
        """95% interval is +-1.96."""
        lower, upper = standard_normal.interval(0.95)

        assert lower == pytest.approx(-1.959964, abs=1e-6)
        assert upper == pytest.approx(1.959964, abs=1e-6)

    @pytest.mark.parametrize("coverage", [0.0, 1.0, 1.5])
    def test_interval_coverage_bounds(self, standard_normal, coverage):
        """coverage must be strictly between 0 and 1."""
        with pytest.raises(ValueRangeError):
            standard_normal.interval(coverage)

    def test_location_scale(self):
        """ppf is mu + sigma * z."""
        dist = Normal(mu=10.0, sigma=2.0)
        np.testing.assert_allclose(dist.ppf(LEVELS), 10.0 + 2.0 * stats.norm.ppf(LEVELS))


class TestBoxCoxT:
    """Tests for the GAMLSS Box-Cox-t family."""

    def test_reduces_to_lognormal(self, bus_arrival_distribution):
        """nu = 0 and tau = inf is exactly the log-normal."""
        bct = BoxCoxT(mu=11.4, sigma=0.2, nu=0.0, tau=math.inf)

        np.testing.assert_allclose(
            bct.ppf(LEVELS), bus_arrival_distribution.ppf(LEVELS), rtol=1e-12
        )

    def test_approaches_lognormal_in_the_limit(self, bus_arrival_distribution):
        """Tiny skewness and huge tau match the log-normal closely."""
        bct = BoxCoxT(mu=11.4, sigma=0.2, nu=1e-8, tau=1e7)
        expected = compute_quantiles(bus_arrival_distribution, n=20).quantiles

        np.testing.assert_allclose(compute_quantiles(bct, n=20).quantiles, expected, rtol=1e-4)

    @pytest.mark.parametrize("nu", [-1.0, -0.3, 0.0, 0.5, 2.0])
    @pytest.mark.parametrize("tau", [3.0, 10.0, math.inf])
    def test_cdf_inverts_ppf(self, nu, tau):
        """cdf(ppf(p)) = p for skewness on both sides of zero."""
        dist = BoxCoxT(mu=10.0, sigma=0.3, nu=nu, tau=tau)

        np.testing.assert_allclose(dist.cdf(dist.ppf(LEVELS)), LEVELS, atol=1e-9)

    @pytest.mark.parametrize("nu", [-0.5, 0.0, 0.5])
    def test_pdf_integrates_to_cdf(self, nu):
        """The density integrates to the cdf increment between two quantiles."""
        dist = BoxCoxT(mu=10.0, sigma=0.3, nu=nu, tau=5.0)
        lower, upper = dist.interval(0.98)
        total, _ = integrate.quad(lambda y: float(dist.pdf(y)), lower, upper, limit=200)

        assert total == pytest.approx(0.98, abs=1e-7)

    def test_pdf_matches_cdf_slope(self, skewed_bct):
        """pdf is the derivative of cdf."""
        x, h = 12.0, 1e-5
        slope = (skewed_bct.cdf(x + h) - skewed_bct.cdf(x - h)) / (2 * h)

        assert float(skewed_bct.pdf(x)) == pytest.approx(float(slope), rel=1e-6)

    def test_shift(self):
        """The shift moves every quantile by a constant."""
        base = BoxCoxT(mu=9.0, sigma=0.25, nu=0.5, tau=5.0)
        shifted = BoxCoxT(mu=9.0, sigma=0.25, nu=0.5, tau=5.0, shift=2.0)

        np.testing.assert_allclose(shifted.ppf(LEVELS), base.ppf(LEVELS) + 2.0)

    def test_no_mass_below_shift(self, skewed_bct):
        """Values at or below the shift have zero cdf and pdf."""
        x = np.array([-5.0, 0.0, 2.0])

        assert np.all(skewed_bct.cdf(x) == 0.0)
        assert np.all(skewed_bct.pdf(x) == 0.0)

    def test_median_is_mu_without_skew(self):
        """With nu = 0 the median is mu plus the shift."""
        dist = BoxCoxT(mu=9.0, sigma=0.25, nu=0.0, tau=5.0, shift=2.0)
        assert dist.median() == pytest.approx(11.0)

    def test_right_skew(self, skewed_bct):
        """nu < 1 puts the upper tail further from the median."""
        lower, upper = skewed_bct.interval(0.9)
        median = skewed_bct.median()

        assert upper - median > median - lower

    @pytest.mark.parametrize(
        "params, error",
        [
            (dict(mu=0.0, sigma=0.2, nu=0.0, tau=5.0), ValueRangeError),
            (dict(mu=10.0, sigma=-0.2, nu=0.0, tau=5.0), ValueRangeError),
            (dict(mu=10.0, sigma=0.2, nu=0.0, tau=0.0), ValueRangeError),
            (dict(mu=10.0, sigma=0.2, nu=np.nan, tau=5.0), NaNInfError),
            (dict(mu=10.0, sigma=0.2, nu=0.0, tau=np.nan), NaNInfError),
            (dict(mu=10.0, sigma=0.2, nu=0.0, tau=5.0, shift=np.inf), NaNInfError),
        ],
    )
    def test_invalid_parameters(self, params, error):
        """Parameters are validated at construction."""
        with pytest.raises(error):
            BoxCoxT(**params)


class TestEmpirical:
    """Tests for the sample-based distribution."""

    def test_large_sample_approaches_analytic(self, bus_arrival_distribution):
        """Quantiles of many draws approach the analytic quantiles."""
        draws = np.random.default_rng(42).lognormal(math.log(11.4), 0.2, size=200_000)

        np.testing.assert_allclose(
            compute_quantiles(Empirical(draws), n=20).quantiles,
            compute_quantiles(bus_arrival_distribution, n=20).quantiles,
            rtol=0.01,
        )

    def test_ppf_interpolates(self):
        """Linear interpolation between order statistics."""
        dist = Empirical([3.0, 1.0, 2.0, 4.0])

        assert float(dist.ppf(0.5)) == pytest.approx(2.5)
        np.testing.assert_allclose(dist.ppf([0.0, 1.0]), [1.0, 4.0])

    def test_ppf_outside_unit_interval(self):
        """Levels outside [0, 1] give NaN."""
        dist = Empirical([1.0, 2.0])
        assert np.all(np.isnan(dist.ppf([-0.1, 1.1])))

    def test_cdf_counts(self):
        """cdf is the fraction of samples at or below x."""
        dist = Empirical([1.0, 2.0, 2.0, 4.0])
        np.testing.assert_allclose(dist.cdf([0.0, 2.0, 3.0, 4.0]), [0.0, 0.75, 0.75, 1.0])

    def test_pdf_is_kde(self):
        """pdf uses a Gaussian KDE of the sample."""
        draws = np.random.default_rng(1).normal(size=5000)
        density = Empirical(draws).pdf([0.0])

        assert density[0] == pytest.approx(stats.norm.pdf(0.0), rel=0.1)

    def test_pdf_needs_spread(self):
        """A constant sample has no density estimate."""
        with pytest.raises(InsufficientDataError):
            Empirical([2.0, 2.0]).pdf(2.0)

    def test_samples_sorted_and_read_only(self):
        """The stored sample is a sorted, read-only copy."""
        raw = np.array([3.0, 1.0, 2.0])
        dist = Empirical(raw)

        assert dist.samples.tolist() == [1.0, 2.0, 3.0]
        assert raw.tolist() == [3.0, 1.0, 2.0]
        with pytest.raises(ValueError):
            dist.samples[0] = 0.0

    def test_invalid_samples(self):
        """Empty, non-finite or 2D samples are rejected."""
        with pytest.raises(InsufficientDataError):
            Empirical([])
        with pytest.raises(NaNInfError):
            Empirical([1.0, np.nan])
        with pytest.raises(ValueRangeError):
            Empirical(np.ones((3, 2)))


class TestScipyAdapter:
    """Tests for wrapping frozen scipy distributions."""

    def test_delegates(self):
        """ppf, cdf and pdf come from the frozen distribution."""
        frozen = stats.gamma(a=2.0, scale=3.0)
        dist = ScipyDistribution(frozen)

        np.testing.assert_allclose(dist.ppf(LEVELS), frozen.ppf(LEVELS))
        assert float(dist.cdf(6.0)) == pytest.approx(frozen.cdf(6.0))
        assert float(dist.pdf(6.0)) == pytest.approx(frozen.pdf(6.0))
        assert dist.frozen is frozen
        assert "gamma" in repr(dist)

    def test_rejects_objects_without_ppf(self):
        """Only distributions with a ppf can be wrapped."""
        with pytest.raises(TypeError):
            ScipyDistribution([1.0, 2.0])


class TestCapability:
    """Tests for the ppf capability protocol."""

    def test_families_are_distributions(self, bus_arrival_distribution, skewed_bct):
        """Built-in families share the base class."""
        assert isinstance(bus_arrival_distribution, Distribution)
        assert isinstance(skewed_bct, Distribution)
        assert isinstance(Empirical([1.0]), Distribution)

    def test_scipy_satisfies_protocol(self):
        """Frozen scipy distributions satisfy SupportsPPF."""
        assert isinstance(stats.norm(), SupportsPPF)
        assert not isinstance(3.0, SupportsPPF)

    def test_optional_methods_default_to_not_implemented(self):
        """A minimal subclass only needs ppf."""

        class Uniform(Distribution):
            def ppf(self, q):
                return np.asarray(q, dtype=np.float64)

        dist = Uniform()
        assert dist.median() == 0.5
        with pytest.raises(NotImplementedError):
            dist.cdf(0.5)
        with pytest.raises(NotImplementedError):
            dist.pdf(0.5)
