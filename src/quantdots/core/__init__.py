"""Core data structures for quantdots."""

from quantdots.core.result import (
    QuantileResult,
    DotplotResult,
    Dot,
    DotInterval,
)
from quantdots.core.exceptions import (
    QuantDotsError,
    DataValidationError,
    ValueRangeError,
    NaNInfError,
    InsufficientDataError,
    InvalidSampleCountError,
    InvalidBinWidthError,
    DomainError,
    DataQualityWarning,
    NumericalInstabilityWarning,
)

__all__ = [
    # Result types
    "QuantileResult",
    "DotplotResult",
    "Dot",
    "DotInterval",
    # Exceptions
    "QuantDotsError",
    "DataValidationError",
    "ValueRangeError",
    "NaNInfError",
    "InsufficientDataError",
    "InvalidSampleCountError",
    "InvalidBinWidthError",
    "DomainError",
    # Warnings
    "DataQualityWarning",
    "NumericalInstabilityWarning",
]
