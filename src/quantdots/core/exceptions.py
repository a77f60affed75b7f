"""Custom exceptions and warnings for quantdots.

All exceptions inherit from ValueError, so callers that already catch
ValueError around numeric code keep working.

Exception Hierarchy:
    QuantDotsError (ValueError)
    ├── DataValidationError
    │   ├── ValueRangeError
    │   ├── NaNInfError
    │   └── InsufficientDataError
    ├── InvalidSampleCountError
    ├── InvalidBinWidthError
    └── DomainError

Warning Classes:
    DataQualityWarning (UserWarning)
    NumericalInstabilityWarning (UserWarning)
"""

from __future__ import annotations


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class QuantDotsError(ValueError):
    """Base exception for all quantdots errors.

    Example:
        >>> try:
        ...     result = quantile_dotplot(dist, n_dots=0)
        ... except QuantDotsError as e:
        ...     print(f"quantdots error: {e}")
    """

    pass


# =============================================================================
# DATA VALIDATION EXCEPTIONS
# =============================================================================


class DataValidationError(QuantDotsError):
    """Raised when input data or parameters fail validation checks.

    Base class for the data-related errors below. Use the more specific
    subclasses when possible.
    """

    pass


class ValueRangeError(DataValidationError):
    """Raised when values are outside their allowed range.

    Common causes:
        - Non-positive scale parameters (sigma <= 0)
        - Probabilities outside [0, 1]
        - Quantile points that are not sorted ascending
        - Points outside an explicit x_range

    Example:
        >>> LogNormal(mu=0.0, sigma=-1.0)
        ValueRangeError: sigma must be strictly positive, got -1.0...
    """

    pass


class NaNInfError(DataValidationError):
    """Raised when NaN or Inf values are detected in input data.

    Common causes:
        - Missing posterior draws encoded as NaN
        - Overflow in upstream model predictions
    """

    pass


class InsufficientDataError(DataValidationError):
    """Raised when there is not enough data for the requested operation.

    Example:
        >>> layout_dots(np.array([]), bin_width=1.0)
        InsufficientDataError: Need at least one quantile point to lay out...
    """

    pass


# =============================================================================
# COMPUTATION EXCEPTIONS
# =============================================================================


class InvalidSampleCountError(QuantDotsError):
    """Raised when the requested number of dots is not a positive integer.

    This is a caller error and is never retried.

    Example:
        >>> compute_quantiles(LogNormal(0.0, 1.0), n=0)
        InvalidSampleCountError: n must be an integer >= 1, got 0...
    """

    pass


class InvalidBinWidthError(QuantDotsError):
    """Raised when a bin width is not a positive finite number.

    Raised both for caller-supplied widths and for widths returned by a
    bin-width strategy.

    Example:
        >>> layout_dots(points, bin_width=0.0)
        InvalidBinWidthError: bin_width must be positive and finite, got 0.0...
    """

    pass


class DomainError(QuantDotsError):
    """Raised when a quantile function is undefined at a required level.

    Happens when distribution parameters push the inverse CDF outside
    its valid domain, e.g. a Box-Cox-t with extreme skewness where
    (nu * sigma * z + 1) turns negative. Retrying with identical inputs
    reproduces the failure, so the offending probability level is
    attached to help the caller adjust parameters.

    Attributes:
        probability: The probability level at which evaluation failed,
            or None if the failure is not tied to a single level.
    """

    def __init__(self, message: str, probability: float | None = None) -> None:
        super().__init__(message)
        self.probability = probability


# =============================================================================
# WARNINGS
# =============================================================================


class DataQualityWarning(UserWarning):
    """Warning for layout issues that don't prevent computation.

    Emitted when:
        - The bin width puts every dot into a single column
        - The bin width gives every dot its own column

    Example:
        >>> import warnings
        >>> warnings.filterwarnings('ignore', category=DataQualityWarning)
    """

    pass


class NumericalInstabilityWarning(UserWarning):
    """Warning for potential numerical issues in computations.

    Emitted when:
        - A numeric inverse CDF returns a sequence that decreases by a
          floating-point-sized amount and has to be repaired
        - The bin-width search hits its iteration limit

    Results may be less reliable when this warning appears.
    """

    pass
