"""Parametric distribution families.

Tech-Friendly Names:
    - LogNormal: log-normal with log-scale location and scale
    - Normal: Gaussian, mainly for symmetric cross-checks
    - BoxCoxT: GAMLSS Box-Cox-t, used for skewed heavy-tailed arrival times
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import ArrayLike
from scipy import stats

from quantdots.core.types import FloatArray
from quantdots.distributions.base import Distribution, _check_finite, _check_positive


@dataclass(frozen=True)
class LogNormal(Distribution):
    """
    Log-normal distribution: log(X) ~ Normal(mu, sigma).

    Attributes:
        mu: Mean of log(X); the median is exp(mu)
        sigma: Standard deviation of log(X), > 0

    Example:
        >>> dist = LogNormal(mu=math.log(11.4), sigma=0.2)
        >>> round(dist.median(), 4)
        11.4
    """

    mu: float
    sigma: float
    _dist: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mu", _check_finite("mu", self.mu))
        object.__setattr__(self, "sigma", _check_positive("sigma", self.sigma))
        object.__setattr__(
            self, "_dist", stats.lognorm(s=self.sigma, scale=math.exp(self.mu))
        )

    @classmethod
    def from_median(cls, median: float, sigma: float) -> LogNormal:
        """Construct from the median on the natural scale."""
        return cls(mu=math.log(_check_positive("median", median)), sigma=sigma)

    def ppf(self, q: ArrayLike) -> FloatArray:
        return np.asarray(self._dist.ppf(q), dtype=np.float64)

    def cdf(self, x: ArrayLike) -> FloatArray:
        return np.asarray(self._dist.cdf(x), dtype=np.float64)

    def pdf(self, x: ArrayLike) -> FloatArray:
        return np.asarray(self._dist.pdf(x), dtype=np.float64)


@dataclass(frozen=True)
class Normal(Distribution):
    """Normal distribution with mean mu and standard deviation sigma."""

    mu: float = 0.0
    sigma: float = 1.0
    _dist: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mu", _check_finite("mu", self.mu))
        object.__setattr__(self, "sigma", _check_positive("sigma", self.sigma))
        object.__setattr__(self, "_dist", stats.norm(loc=self.mu, scale=self.sigma))

    def ppf(self, q: ArrayLike) -> FloatArray:
        return np.asarray(self._dist.ppf(q), dtype=np.float64)

    def cdf(self, x: ArrayLike) -> FloatArray:
        return np.asarray(self._dist.cdf(x), dtype=np.float64)

    def pdf(self, x: ArrayLike) -> FloatArray:
        return np.asarray(self._dist.pdf(x), dtype=np.float64)


@dataclass(frozen=True)
class BoxCoxT(Distribution):
    """
    Box-Cox-t distribution (Rigby & Stasinopoulos), as used by GAMLSS.

    For Y > 0 the transformed variable

        z = ((Y / mu) ** nu - 1) / (nu * sigma)    if nu != 0
        z = log(Y / mu) / sigma                    if nu == 0

    follows a Student-t with tau degrees of freedom, truncated to the
    range where Y stays positive. The returned variable is Y + shift, so
    a fitted arrival-time model can be moved onto its original axis.

    Special cases:
        - nu = 0, tau = inf: log-normal with median mu and log-scale sigma
        - tau = inf: Box-Cox normal (BCCG)

    Attributes:
        mu: Median of Y, > 0
        sigma: Approximate coefficient of variation, > 0
        nu: Skewness (Box-Cox power)
        tau: Degrees of freedom of the t kernel, > 0 (inf allowed)
        shift: Constant added to Y

    Example:
        >>> dist = BoxCoxT(mu=11.4, sigma=0.2, nu=0.0, tau=float("inf"))
        >>> round(dist.median(), 4)
        11.4
    """

    mu: float
    sigma: float
    nu: float
    tau: float
    shift: float = 0.0
    _kernel: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mu", _check_positive("mu", self.mu))
        object.__setattr__(self, "sigma", _check_positive("sigma", self.sigma))
        object.__setattr__(self, "nu", _check_finite("nu", self.nu))
        object.__setattr__(self, "tau", _check_positive("tau", self.tau, allow_inf=True))
        object.__setattr__(self, "shift", _check_finite("shift", self.shift))

        kernel = stats.norm() if math.isinf(self.tau) else stats.t(df=self.tau)
        object.__setattr__(self, "_kernel", kernel)

    @property
    def _truncation_mass(self) -> float:
        """Kernel mass on the side of the truncation point that is kept."""
        if self.nu == 0:
            return 1.0
        return float(self._kernel.cdf(1.0 / (self.sigma * abs(self.nu))))

    # expm1/log1p keep the power transform accurate as nu approaches 0
    def _to_z(self, y: FloatArray) -> FloatArray:
        log_ratio = np.log(y / self.mu)
        if self.nu == 0:
            return log_ratio / self.sigma
        return np.expm1(self.nu * log_ratio) / (self.nu * self.sigma)

    def _from_z(self, z: FloatArray) -> FloatArray:
        if self.nu == 0:
            return self.mu * np.exp(self.sigma * z)
        arg = self.nu * self.sigma * z
        with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
            y = self.mu * np.exp(np.log1p(arg) / self.nu)
        return np.where(arg > -1.0, y, np.nan)

    def ppf(self, q: ArrayLike) -> FloatArray:
        q = np.asarray(q, dtype=np.float64)
        mass = self._truncation_mass
        if self.nu <= 0:
            z = self._kernel.ppf(q * mass)
        else:
            z = self._kernel.ppf(1.0 - (1.0 - q) * mass)
        return self._from_z(np.asarray(z, dtype=np.float64)) + self.shift

    def cdf(self, x: ArrayLike) -> FloatArray:
        y = np.asarray(x, dtype=np.float64) - self.shift
        positive = y > 0
        safe_y = np.where(positive, y, self.mu)

        lower = 0.0
        if self.nu > 0:
            lower = float(self._kernel.cdf(-1.0 / (self.sigma * abs(self.nu))))
        F = (self._kernel.cdf(self._to_z(safe_y)) - lower) / self._truncation_mass
        return np.where(positive, np.clip(F, 0.0, 1.0), 0.0)

    def pdf(self, x: ArrayLike) -> FloatArray:
        y = np.asarray(x, dtype=np.float64) - self.shift
        positive = y > 0
        safe_y = np.where(positive, y, self.mu)

        log_density = (
            (self.nu - 1.0) * np.log(safe_y)
            - self.nu * math.log(self.mu)
            - math.log(self.sigma)
            + self._kernel.logpdf(self._to_z(safe_y))
            - math.log(self._truncation_mass)
        )
        return np.where(positive, np.exp(log_density), 0.0)
