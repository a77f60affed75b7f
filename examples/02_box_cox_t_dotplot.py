"""Example: Skewed, heavy-tailed arrival models.

Fitted arrival-time models (e.g. GAMLSS) often use the Box-Cox-t family:
the skewness nu and tail weight tau shape how late a bus can plausibly be.
This example compares dotplots of three such models on one shared axis,
and shows what happens when the parameters go too far.

This example shows how to:
- Build comparable dotplots with a shared x_range
- Use Wilkinson stacking and the 'fit' bin-width strategy
- Handle DomainError for parameters that break the quantile function
"""

import math

from quantdots import (
    BoxCoxT,
    DomainError,
    Empirical,
    QuantileDotplotBuilder,
    quantile_dotplot,
)

# =============================================================================
# Example 1: Three models on one axis
# =============================================================================

print("=" * 60)
print("Example 1: Skewness and tail weight")
print("=" * 60)

models = {
    "log-normal (nu=0, tau=inf)": BoxCoxT(mu=11.4, sigma=0.2, nu=0.0, tau=math.inf),
    "right-skewed (nu=-1, tau=10)": BoxCoxT(mu=11.4, sigma=0.2, nu=-1.0, tau=10.0),
    "heavy tails (nu=0, tau=3)": BoxCoxT(mu=11.4, sigma=0.2, nu=0.0, tau=3.0),
}

builder = QuantileDotplotBuilder(n_dots=20, bin_width=1.0, x_range=(0.0, 40.0))
for name, model in models.items():
    dotplot = builder.build(model)
    print(f"  {name}")
    print(f"    columns={dotplot.num_bins}, tallest={dotplot.max_stack_height}, "
          f"last dot={dotplot.quantiles[-1]:.1f} min")
print()

# =============================================================================
# Example 2: Wilkinson stacking with an automatic width
# =============================================================================

print("=" * 60)
print("Example 2: Wilkinson layout, 'fit' width")
print("=" * 60)

dotplot = quantile_dotplot(
    BoxCoxT(mu=9.0, sigma=0.25, nu=0.5, tau=5.0, shift=2.0),
    n_dots=50,
    bin_width="fit",
    method="wilkinson",
)
print(repr(dotplot))
print()

# =============================================================================
# Example 3: Dotplot straight from posterior draws
# =============================================================================

print("=" * 60)
print("Example 3: Empirical distribution of simulated draws")
print("=" * 60)

draws = models["heavy tails (nu=0, tau=3)"].ppf([i / 1000 for i in range(1, 1000)])
dotplot = quantile_dotplot(Empirical(draws), n_dots=20)
print(repr(dotplot))
print()

# =============================================================================
# Example 4: Parameters outside the usable domain
# =============================================================================

print("=" * 60)
print("Example 4: DomainError")
print("=" * 60)

try:
    quantile_dotplot(BoxCoxT(mu=1.0, sigma=100.0, nu=0.0, tau=1.0), n_dots=20)
except DomainError as e:
    print(f"  Failed at probability level {e.probability}")
    print(f"  {e}")
