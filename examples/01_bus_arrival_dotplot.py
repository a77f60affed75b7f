"""Example: Quantile dotplot of a predicted bus arrival time.

A transit app predicts the next bus arrives in about 11.4 minutes, with a
log-normal spread. Instead of showing a density curve, show 20 dots:
each dot is a 1-in-20 chance, so "is the bus likely before 9 minutes?"
becomes "how many dots are left of 9?".

This example shows how to:
- Build a 20-dot quantile dotplot with a fixed bin width
- Read probabilities and intervals off the dots
- Export the layout for an external renderer
"""

import json
import math

from quantdots import (
    LogNormal,
    QuantileDotplotBuilder,
    approximate_quantile,
    dot_interval,
    probability_at_most,
)

# =============================================================================
# Example 1: Build the dotplot
# =============================================================================

print("=" * 60)
print("Example 1: 20-dot bus arrival dotplot")
print("=" * 60)

arrival = LogNormal(mu=math.log(11.4), sigma=0.2)
builder = QuantileDotplotBuilder(n_dots=20, bin_width=1.25)
dotplot = builder.build(arrival)

print(dotplot.summary())
print()

# =============================================================================
# Example 2: Text rendering
# =============================================================================

print("=" * 60)
print("Example 2: Dots as text columns")
print("=" * 60)

for index, count in dotplot.bin_counts.items():
    center = dotplot.origin + (index + 0.5) * dotplot.bin_width
    print(f"  {center:6.2f} min | {'o ' * count}")
print()

# =============================================================================
# Example 3: Reading the dotplot
# =============================================================================

print("=" * 60)
print("Example 3: Questions a rider asks")
print("=" * 60)

print(f"  Chance the bus is here within 9 min: "
      f"{probability_at_most(dotplot, 9.0):.0%} (exact {float(arrival.cdf(9.0)):.1%})")
print(f"  Leave by the 10% dot and miss 1 bus in 10: "
      f"{approximate_quantile(dotplot, 0.10):.1f} min")

interval = dot_interval(dotplot, coverage=0.9)
print(f"  18 of 20 dots lie between {interval.lower:.1f} and {interval.upper:.1f} min")
print()

# =============================================================================
# Example 4: Export for a renderer
# =============================================================================

print("=" * 60)
print("Example 4: JSON export")
print("=" * 60)

payload = dotplot.to_dict()
print(json.dumps(payload["dots"][:3], indent=2))
print(f"  ... {payload['n']} dots total")
