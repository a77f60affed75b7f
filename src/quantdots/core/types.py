"""Type aliases for quantdots."""

from typing import Callable, TypeAlias, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Array types
FloatArray: TypeAlias = NDArray[np.float64]
IntArray: TypeAlias = NDArray[np.int64]

# A bin-width strategy maps sorted quantile points to a width
BinWidthStrategy: TypeAlias = Callable[[FloatArray], float]

# Accepted forms of a bin width: a number, a registered strategy name, or a strategy
BinWidthSpec: TypeAlias = Union[float, str, BinWidthStrategy]

# (lower, upper) bounds of the x-axis
XRange: TypeAlias = tuple[float, float]

__all__ = [
    "ArrayLike",
    "FloatArray",
    "IntArray",
    "BinWidthStrategy",
    "BinWidthSpec",
    "XRange",
]
