"""Numerical helpers for quantile estimation."""

from hdquantile.util.beta import beta_cdf

__all__ = [
    "beta_cdf",
]
