"""Distribution defined by a finite sample (e.g. posterior draws)."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike
from scipy import stats

from quantdots.core.exceptions import InsufficientDataError, NaNInfError, ValueRangeError
from quantdots.core.types import FloatArray
from quantdots.distributions.base import Distribution


class Empirical(Distribution):
    """
    Empirical distribution of a one-dimensional sample.

    The quantile function interpolates between order statistics using
    ``numpy.quantile``. Use it to build a dotplot directly from posterior
    draws or from historical observations without fitting a parametric
    family first.

    Args:
        samples: 1D array-like of finite values
        method: Interpolation method passed to numpy.quantile
            (default: 'linear')

    Example:
        >>> draws = np.random.default_rng(0).lognormal(2.4, 0.2, size=4000)
        >>> dist = Empirical(draws)
        >>> result = compute_quantiles(dist, n=20)
    """

    def __init__(self, samples: ArrayLike, method: str = "linear") -> None:
        values = np.asarray(samples, dtype=np.float64)
        if values.ndim != 1:
            raise ValueRangeError(
                f"samples must be 1D, got {values.ndim}D with shape {values.shape}. "
                f"Hint: Use .ravel() to flatten posterior draws."
            )
        if values.size == 0:
            raise InsufficientDataError("samples must contain at least one value.")
        invalid = ~np.isfinite(values)
        if np.any(invalid):
            raise NaNInfError(
                f"Found {int(invalid.sum())} NaN/Inf values in samples. "
                f"Hint: Drop missing draws before building the distribution."
            )

        self._samples = np.sort(values)
        self._samples.setflags(write=False)
        self._method = method
        self._kde: Any = None

    @property
    def samples(self) -> FloatArray:
        """Sorted, read-only copy of the sample."""
        return self._samples

    @property
    def size(self) -> int:
        """Number of sample values."""
        return len(self._samples)

    def ppf(self, q: ArrayLike) -> FloatArray:
        q = np.asarray(q, dtype=np.float64)
        levels = np.atleast_1d(q)
        out = np.full(levels.shape, np.nan)
        # Levels outside [0, 1] map to NaN, as in scipy.stats
        valid = (levels >= 0.0) & (levels <= 1.0)
        if np.any(valid):
            out[valid] = np.quantile(self._samples, levels[valid], method=self._method)
        return out.reshape(q.shape)

    def cdf(self, x: ArrayLike) -> FloatArray:
        x = np.asarray(x, dtype=np.float64)
        return np.searchsorted(self._samples, x, side="right") / self.size

    def pdf(self, x: ArrayLike) -> FloatArray:
        """Gaussian kernel density estimate of the sample."""
        if self._kde is None:
            if self.size < 2 or np.ptp(self._samples) == 0:
                raise InsufficientDataError(
                    "A density estimate needs at least two distinct sample values."
                )
            self._kde = stats.gaussian_kde(self._samples)
        return np.asarray(self._kde(np.atleast_1d(x)), dtype=np.float64)

    def __repr__(self) -> str:
        return f"Empirical(size={self.size}, method={self._method!r})"
