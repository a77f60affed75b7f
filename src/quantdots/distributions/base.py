"""Distribution capability shared by all families.

A distribution only has to expose a vectorised inverse CDF, ``ppf``, to
be turned into a quantile dotplot. ``cdf`` and ``pdf`` are optional and
only used for diagnostics. The naming follows scipy.stats, so frozen
scipy distributions satisfy the capability as they are.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import ArrayLike

from quantdots.core.exceptions import NaNInfError, ValueRangeError
from quantdots.core.types import FloatArray


@runtime_checkable
class SupportsPPF(Protocol):
    """Anything with an inverse cumulative distribution function."""

    def ppf(self, q: ArrayLike) -> Any: ...


class Distribution(ABC):
    """
    Base class for the distribution families shipped with quantdots.

    Subclasses implement ``ppf`` and may override ``cdf`` and ``pdf``.
    Instances are immutable once constructed.
    """

    @abstractmethod
    def ppf(self, q: ArrayLike) -> FloatArray:
        """
        Inverse cumulative distribution function (quantile function).

        Args:
            q: Probability level(s) in (0, 1)

        Returns:
            Array of values x with P(X <= x) = q
        """

    def cdf(self, x: ArrayLike) -> FloatArray:
        """Cumulative distribution function."""
        raise NotImplementedError(f"{type(self).__name__} does not provide a cdf")

    def pdf(self, x: ArrayLike) -> FloatArray:
        """Probability density function."""
        raise NotImplementedError(f"{type(self).__name__} does not provide a pdf")

    def median(self) -> float:
        """Value at probability level 0.5."""
        return float(self.ppf(0.5))

    def interval(self, coverage: float) -> tuple[float, float]:
        """
        Equal-tailed interval containing ``coverage`` of the probability mass.

        Args:
            coverage: Mass inside the interval, in (0, 1)

        Returns:
            Tuple of (lower, upper)
        """
        if not 0.0 < coverage < 1.0:
            raise ValueRangeError(
                f"coverage must be in (0, 1), got {coverage}."
            )
        tail = (1.0 - coverage) / 2.0
        lower, upper = self.ppf(np.array([tail, 1.0 - tail]))
        return float(lower), float(upper)


class ScipyDistribution(Distribution):
    """
    Adapter around a frozen ``scipy.stats`` continuous distribution.

    Frozen scipy distributions already satisfy ``SupportsPPF``; wrap one in
    this class when the quantdots ``Distribution`` API (``median``,
    ``interval``) is wanted as well.

    Example:
        >>> from scipy import stats
        >>> dist = ScipyDistribution(stats.gamma(a=2.0, scale=3.0))
        >>> dist.median()
        5.0350...
    """

    def __init__(self, frozen: Any) -> None:
        if not callable(getattr(frozen, "ppf", None)):
            raise TypeError(
                f"Expected a frozen scipy.stats distribution with a ppf method, "
                f"got {type(frozen).__name__}."
            )
        self._frozen = frozen

    @property
    def frozen(self) -> Any:
        """The wrapped scipy distribution."""
        return self._frozen

    def ppf(self, q: ArrayLike) -> FloatArray:
        return np.asarray(self._frozen.ppf(q), dtype=np.float64)

    def cdf(self, x: ArrayLike) -> FloatArray:
        return np.asarray(self._frozen.cdf(x), dtype=np.float64)

    def pdf(self, x: ArrayLike) -> FloatArray:
        return np.asarray(self._frozen.pdf(x), dtype=np.float64)

    def __repr__(self) -> str:
        name = getattr(getattr(self._frozen, "dist", None), "name", "unknown")
        return f"ScipyDistribution({name})"


def _check_finite(name: str, value: float) -> float:
    """Return value as float, raising NaNInfError if it is NaN or Inf."""
    value = float(value)
    if not math.isfinite(value):
        raise NaNInfError(
            f"{name} must be finite, got {value}. "
            f"Hint: Check the parameters produced by the fitted model."
        )
    return value


def _check_positive(name: str, value: float, allow_inf: bool = False) -> float:
    """Return value as float, raising unless it is strictly positive."""
    value = float(value)
    if math.isnan(value) or (math.isinf(value) and not allow_inf):
        raise NaNInfError(f"{name} must be finite, got {value}.")
    if value <= 0:
        raise ValueRangeError(
            f"{name} must be strictly positive, got {value}."
        )
    return value
