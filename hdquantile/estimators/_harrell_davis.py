r"""Harrell-Davis quantile estimator with Maritz-Jarrett standard errors.

The estimate of the p-quantile is a weighted sum of *all* order
statistics.  The weight of the j-th order statistic is the mass a
Beta((n+1)p, (n+1)(1-p)) distribution puts on the j-th step of the
empirical cumulative weight function:

.. math::

    W_j = I_{u_j}(a, b) - I_{u_{j-1}}(a, b), \qquad
    u_j = \frac{1}{W}\sum_{i \le j} w_i

With unit weights the breakpoints are ``j / n`` and the classical
estimator is recovered.  The first two kernel moments give the estimate
``C1`` and, following Maritz & Jarrett, its standard error
``sqrt(C2 - C1^2)``.

References
----------
.. [1] Harrell, F.E. and Davis, C.E. (1982). "A new distribution-free
       quantile estimator." *Biometrika* 69(3): 635–640.
.. [2] Maritz, J.S. and Jarrett, R.G. (1978). "A note on estimating the
       variance of the sample median." *JASA* 73(361): 194–196.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Optional

import numpy as np

from hdquantile._exceptions import NumericWarning
from hdquantile._inference import ConfidenceIntervalEstimator
from hdquantile._sample import Sample
from hdquantile._typing import ArrayLike, FloatArray
from hdquantile.estimators._base import (
    BaseQuantileEstimator,
    QuantileCIEstimatorMixin,
    WeightedQuantileEstimatorMixin,
)
from hdquantile.util.beta import beta_cdf

# Relative size of a negative variance still attributed to rounding.
_VARIANCE_RTOL = 1e-9


@dataclass(frozen=True)
class Moments:
    """First and (optionally) second moment of the beta-weighted sample.

    ``c2`` is ``None`` when the second moment was not requested.
    """

    c1: float
    c2: Optional[float] = None


def beta_weights(sample: Sample, probability: float) -> FloatArray:
    """Harrell-Davis weight of each order statistic of *sample*.

    Parameters
    ----------
    sample : Sample
        Validated sample.
    probability : float
        Quantile level in ``[0, 1]``.

    Returns
    -------
    ndarray, shape (n,)
        Non-negative weights aligned with ``sample.sorted_values``; they
        sum to 1 up to rounding.  At ``probability`` 0 or 1 (and for a
        single observation) all mass sits on the first or last order
        statistic.
    """
    n = sample.count
    weights = np.zeros(n, dtype=np.float64)
    if probability <= 0.0:
        weights[0] = 1.0
        return weights
    if probability >= 1.0 or n == 1:
        weights[-1] = 1.0
        return weights

    a = (n + 1) * probability
    b = (n + 1) * (1 - probability)
    cumulative = np.cumsum(np.asarray(sample.sorted_weights, dtype=np.float64))
    # normalise by the running total so the last breakpoint is exactly 1
    u = cumulative / cumulative[-1]
    cdf = beta_cdf(a, b, u)
    weights = np.diff(cdf, prepend=0.0)
    # betainc may be off by an ulp between neighbouring breakpoints
    return np.maximum(weights, 0.0)


def _moments(sample: Sample, probability: float, second_moment: bool) -> Moments:
    values = np.asarray(sample.sorted_values, dtype=np.float64)
    if values[0] == values[-1]:
        # all observations equal: exact point mass
        c = float(values[0])
        return Moments(c, c * c if second_moment else None)
    w = beta_weights(sample, probability)
    c1 = float(np.dot(w, values))
    # sum(w) is 1 only up to rounding
    c1 = min(max(c1, float(values[0])), float(values[-1]))
    if not second_moment:
        return Moments(c1)
    c2 = float(np.dot(w, values * values))
    return Moments(c1, c2)


def _standard_error(moments: Moments, stacklevel: int = 2) -> float:
    c1, c2 = moments.c1, moments.c2
    variance = c2 - c1 * c1
    if variance < 0:
        if -variance > _VARIANCE_RTOL * max(c2, c1 * c1):
            warnings.warn(
                f"Negative Maritz-Jarrett variance {variance:.3g} clamped to 0.",
                NumericWarning,
                stacklevel=stacklevel,
            )
        variance = 0.0
    return math.sqrt(variance)


class HarrellDavisQuantileEstimator(
    WeightedQuantileEstimatorMixin,
    QuantileCIEstimatorMixin,
    BaseQuantileEstimator,
):
    """Harrell-Davis quantile estimator.

    Supports weighted samples and Maritz-Jarrett confidence intervals.
    The estimator has no parameters and no state, so a single instance
    can be shared freely.

    Examples
    --------
    >>> hd = HarrellDavisQuantileEstimator()
    >>> round(hd.quantile([1, 2, 3, 4, 5], 0.5), 6)
    3.0
    >>> ci = hd.quantile_confidence_interval([1, 2, 3, 4, 5], 0.5)
    >>> ci.contains(3.0)
    True
    """

    def _quantile_impl(self, sample: Sample, probability: float) -> float:
        return _moments(sample, probability, second_moment=False).c1

    def _ci_estimator_impl(
        self, sample: Sample, probability: float, stacklevel: int = 2
    ) -> ConfidenceIntervalEstimator:
        moments = _moments(sample, probability, second_moment=True)
        return ConfidenceIntervalEstimator(
            n=sample.count,
            estimation=moments.c1,
            standard_error=_standard_error(moments, stacklevel=stacklevel + 1),
        )

    def __repr__(self) -> str:
        return "HarrellDavisQuantileEstimator()"


_DEFAULT = HarrellDavisQuantileEstimator()


def harrell_davis_quantile(
    sample: Sample | ArrayLike, probability: float
) -> float:
    """Harrell-Davis estimate of the *probability*-quantile of *sample*.

    See :meth:`HarrellDavisQuantileEstimator.quantile`.
    """
    return _DEFAULT.quantile(sample, probability)


def harrell_davis_ci_estimator(
    sample: Sample | ArrayLike, probability: float
) -> ConfidenceIntervalEstimator:
    """Harrell-Davis estimate with its Maritz-Jarrett standard error.

    See :meth:`HarrellDavisQuantileEstimator.quantile_ci_estimator`.
    """
    return _DEFAULT._ci_estimator(sample, probability, stacklevel=3)
