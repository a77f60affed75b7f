"""Tests for QuantileDotplotBuilder and quantile_dotplot."""

import numpy as np
import pytest
from scipy import stats

from quantdots import (
    DataQualityWarning,
    DotplotResult,
    InvalidBinWidthError,
    InvalidSampleCountError,
    NaNInfError,
    QuantileDotplotBuilder,
    QuantileResult,
    ValueRangeError,
    compute_quantiles,
    layout_dots,
    quantile_dotplot,
)


class TestQuantileDotplotBuilder:
    """Tests for the configured builder."""

    def test_defaults(self):
        """20 dots, iqr width, grid layout."""
        builder = QuantileDotplotBuilder()

        assert builder.n_dots == 20
        assert builder.bin_width == "iqr"
        assert builder.method == "grid"
        assert builder.x_range is None

    def test_build_matches_manual_pipeline(self, bus_arrival_distribution):
        """build() is compute_quantiles followed by layout_dots."""
        builder = QuantileDotplotBuilder(n_dots=20, bin_width=1.25)
        built = builder.build(bus_arrival_distribution)
        manual = layout_dots(compute_quantiles(bus_arrival_distribution, 20), bin_width=1.25)

        assert isinstance(built, DotplotResult)
        assert np.array_equal(built.quantiles, manual.quantiles)
        assert np.array_equal(built.bin_indices, manual.bin_indices)
        assert np.array_equal(built.stack_positions, manual.stack_positions)

    def test_quantiles_only(self, bus_arrival_distribution):
        """quantiles() skips the layout step."""
        result = QuantileDotplotBuilder(n_dots=5).quantiles(bus_arrival_distribution)

        assert isinstance(result, QuantileResult)
        assert result.n == 5

    def test_builder_is_reusable(self, bus_arrival_distribution, skewed_bct):
        """One builder serves several distributions."""
        builder = QuantileDotplotBuilder(n_dots=50, method="wilkinson", bin_width="fit")

        first = builder.build(bus_arrival_distribution)
        second = builder.build(skewed_bct)
        again = builder.build(bus_arrival_distribution)

        assert first.n == second.n == 50
        assert np.array_equal(first.bin_centers, again.bin_centers)

    def test_shared_x_range_aligns_plots(self, bus_arrival_distribution):
        """Dotplots built with one x_range share their grid origin."""
        builder = QuantileDotplotBuilder(bin_width=1.0, x_range=(0.0, 30.0))
        narrow = builder.build(bus_arrival_distribution)
        wide = builder.build(stats.lognorm(s=0.4, scale=11.4))

        assert narrow.origin == wide.origin == 0.0
        assert np.allclose(np.mod(narrow.bin_centers - 0.5, 1.0), 0.0)
        assert np.allclose(np.mod(wide.bin_centers - 0.5, 1.0), 0.0)

    def test_invalid_method(self):
        """Unknown layout methods fail at construction."""
        with pytest.raises(ValueRangeError):
            QuantileDotplotBuilder(method="swarm")

    def test_invalid_count(self):
        """Invalid dot counts fail at construction."""
        with pytest.raises(InvalidSampleCountError):
            QuantileDotplotBuilder(n_dots=0)

    @pytest.mark.parametrize("bin_width", [-1.0, 0.0, np.inf, np.nan, "bogus"])
    def test_invalid_bin_width(self, bin_width):
        """Bad numeric widths and unknown strategy names fail at construction."""
        with pytest.raises(InvalidBinWidthError):
            QuantileDotplotBuilder(bin_width=bin_width)

    @pytest.mark.parametrize("bin_width", [[1.0], True])
    def test_unsupported_bin_width_type(self, bin_width):
        """Lists and booleans are not bin widths."""
        with pytest.raises(TypeError):
            QuantileDotplotBuilder(bin_width=bin_width)

    def test_callable_bin_width_accepted(self):
        """Callables are checked when they are applied to points."""
        builder = QuantileDotplotBuilder(bin_width=lambda x: 0.5)
        assert callable(builder.bin_width)

    @pytest.mark.parametrize("x_range", [(10.0, 0.0), (5.0, 5.0), (0.0, 1.0, 2.0)])
    def test_invalid_x_range(self, x_range):
        """Inverted, empty or malformed ranges fail at construction."""
        with pytest.raises(ValueRangeError):
            QuantileDotplotBuilder(x_range=x_range)

    @pytest.mark.parametrize("x_range", [(0.0, np.inf), (np.nan, 10.0)])
    def test_non_finite_x_range(self, x_range):
        """Non-finite bounds fail at construction."""
        with pytest.raises(NaNInfError):
            QuantileDotplotBuilder(x_range=x_range)

    def test_x_range_stored_as_floats(self):
        """x_range is normalised to a pair of floats."""
        builder = QuantileDotplotBuilder(x_range=[0, 30])
        assert builder.x_range == (0.0, 30.0)

    def test_layout_warning_points_at_caller(self, bus_arrival_distribution):
        """Degenerate-layout warnings are attributed to the calling code."""
        builder = QuantileDotplotBuilder(bin_width=100.0)

        with pytest.warns(DataQualityWarning) as record:
            builder.build(bus_arrival_distribution)

        assert record[0].filename == __file__


    def test_repr(self):
        """repr shows the configuration."""
        text = repr(QuantileDotplotBuilder(n_dots=10, bin_width=0.5))

        assert "n_dots=10" in text
        assert "bin_width=0.5" in text
        assert "method='grid'" in text


class TestQuantileDotplot:
    """Tests for the one-call convenience function."""

    def test_bus_arrival(self, bus_arrival_distribution):
        """One call produces the 20-dot bus dotplot."""
        result = quantile_dotplot(bus_arrival_distribution, bin_width=1.25)

        assert result.n == 20
        assert result.bin_width == 1.25
        assert result.method == "grid"

    def test_accepts_quantile_function(self):
        """A plain quantile function is enough."""
        result = quantile_dotplot(
            lambda p: 10.0 * p, n_dots=10, bin_width=2.0, x_range=(0.0, 10.0)
        )

        np.testing.assert_allclose(result.quantiles, np.arange(0.5, 10.0, 1.0))
        assert list(result.bin_counts.values()) == [2, 2, 2, 2, 2]

    def test_same_as_builder(self, skewed_bct):
        """Equivalent to building with a fresh builder."""
        direct = quantile_dotplot(skewed_bct, n_dots=30, method="wilkinson")
        built = QuantileDotplotBuilder(n_dots=30, method="wilkinson").build(skewed_bct)

        assert np.array_equal(direct.bin_centers, built.bin_centers)
        assert direct.bin_width == built.bin_width

    def test_layout_warning_points_at_caller(self, bus_arrival_distribution):
        """Degenerate-layout warnings are attributed to the calling code."""
        with pytest.warns(DataQualityWarning) as record:
            quantile_dotplot(bus_arrival_distribution, bin_width=100.0)

        assert record[0].filename == __file__
