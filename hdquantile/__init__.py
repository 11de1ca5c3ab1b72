"""hdquantile — Harrell-Davis quantile estimation for Python.

Provides the distribution-free Harrell-Davis quantile estimator for
(optionally weighted) samples, together with Maritz-Jarrett standard
errors and confidence intervals.

Quick start::

    from hdquantile import HarrellDavisQuantileEstimator, Sample
    hd = HarrellDavisQuantileEstimator()
    hd.quantile([1.2, 3.4, 2.2, 5.1], 0.9)
    hd.quantile(Sample([0.0, 10.0], weights=[1, 3]), 0.5)
    hd.quantile_confidence_interval([1, 2, 3, 4, 5], 0.5, 0.95)
"""

__version__ = "0.1.0"

from hdquantile._exceptions import DomainError, InvalidArgumentError, NumericWarning
from hdquantile._inference import ConfidenceInterval, ConfidenceIntervalEstimator
from hdquantile._sample import Sample
from hdquantile.estimators import (
    BaseQuantileEstimator,
    HarrellDavisQuantileEstimator,
    QuantileCIEstimatorMixin,
    WeightedQuantileEstimatorMixin,
    get_estimator,
    harrell_davis_ci_estimator,
    harrell_davis_quantile,
    list_estimators,
    register_estimator,
)
from hdquantile.util.beta import beta_cdf

__all__ = [
    "Sample",
    "BaseQuantileEstimator",
    "WeightedQuantileEstimatorMixin",
    "QuantileCIEstimatorMixin",
    "HarrellDavisQuantileEstimator",
    "ConfidenceInterval",
    "ConfidenceIntervalEstimator",
    "DomainError",
    "InvalidArgumentError",
    "NumericWarning",
    "harrell_davis_quantile",
    "harrell_davis_ci_estimator",
    "beta_cdf",
    "get_estimator",
    "list_estimators",
    "register_estimator",
]
