"""Default parameters for quantdots.

Every constant here is a default only; the functions that use them take
the same value as a keyword argument.
"""

# =============================================================================
# QUANTILE GENERATION
# =============================================================================

# Number of dots in a quantile dotplot. 20 dots gives 5% resolution,
# which is what the bus-arrival displays use.
DEFAULT_N_DOTS = 20

# Relative size of a decrease in the quantile sequence that is treated as
# floating-point noise (repaired with a warning) rather than a broken
# quantile function (DomainError). Scaled by the spread of the sequence.
MONOTONICITY_RTOL = 1e-9

# =============================================================================
# LAYOUT
# =============================================================================

# Binning method used when none is given ("grid" or "wilkinson")
DEFAULT_METHOD = "grid"

# Bin-width strategy used when none is given
DEFAULT_BIN_WIDTH = "iqr"

# Target height/width ratio of the tallest column for the "fit" strategy
FIT_ASPECT_RATIO = 1.0

# Binary search settings for the "fit" strategy
FIT_TOLERANCE = 1e-6
FIT_MAX_ITERATIONS = 60

# Width used when the points have zero spread (e.g. n=1)
DEGENERATE_BIN_WIDTH = 1.0

# Largest grid bin index. Above 2^53 consecutive bin indices are no longer
# distinct float64 values, so the bin arithmetic breaks down.
MAX_GRID_INDEX = 2**53
