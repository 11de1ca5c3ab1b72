"""Capability base classes for sample quantile estimators.

Every estimator in ``hdquantile`` inherits from
:class:`BaseQuantileEstimator` and opts into further capabilities by
mixing in the matching class:

* :class:`BaseQuantileEstimator` — point quantiles of a :class:`Sample`.
* :class:`WeightedQuantileEstimatorMixin` — accepts weighted samples.
* :class:`QuantileCIEstimatorMixin` — standard errors and confidence
  intervals for the quantile estimate.

Design principles
-----------------
* **Interface Segregation** — each capability is a separate class, so an
  estimator advertises exactly what it can do.
* **Template method** — the public methods validate their arguments once
  and then call a ``_*_impl`` hook; subclasses never re-validate.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, Sequence

import numpy as np

from hdquantile._exceptions import DomainError, InvalidArgumentError
from hdquantile._inference import ConfidenceInterval, ConfidenceIntervalEstimator
from hdquantile._sample import Sample
from hdquantile._typing import ArrayLike, FloatArray

_SAMPLE_ATTRS = ("sorted_values", "sorted_weights", "total_weight", "count")


def _check_probability(probability: Any) -> float:
    if isinstance(probability, bool) or not isinstance(probability, Real):
        raise DomainError(
            f"probability must be a real number, got {type(probability).__name__}."
        )
    p = float(probability)
    if not (math.isfinite(p) and 0.0 <= p <= 1.0):
        raise DomainError(f"probability must be in [0, 1], got {probability}.")
    return p


def _check_duck_sample(sample: Any) -> None:
    """Checks for sample-like objects that bypassed :class:`Sample`."""
    if sample.count < 1:
        raise DomainError("Sample must contain at least one value.")
    weights = np.asarray(sample.sorted_weights, dtype=np.float64)
    if np.any(weights < 0):
        raise DomainError("weights must be non-negative.")
    if not sample.total_weight > 0:
        raise DomainError(
            f"Total weight must be positive, got {sample.total_weight}."
        )


class BaseQuantileEstimator(ABC):
    """Abstract base for all sample quantile estimators.

    Subclasses **must** implement :meth:`_quantile_impl`.  They **may**
    override :meth:`supports_weighted_samples` (usually by mixing in
    :class:`WeightedQuantileEstimatorMixin`).

    Estimators are stateless: the same instance may be shared between
    threads and reused for any number of samples.
    """

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def quantile(self, sample: Sample | ArrayLike, probability: float) -> float:
        """Estimate the *probability*-quantile of *sample*.

        Parameters
        ----------
        sample : Sample or array-like
            Observations.  Raw array-likes are wrapped in an unweighted
            :class:`Sample`.
        probability : float
            Quantile level in ``[0, 1]``.

        Returns
        -------
        float

        Raises
        ------
        InvalidArgumentError
            If *sample* is ``None``.
        DomainError
            If *probability* is outside ``[0, 1]``, the sample is empty or
            its weights are invalid.
        """
        sample, probability = self._validate_and_prepare(sample, probability)
        return self._quantile_impl(sample, probability)

    def quantiles(
        self,
        sample: Sample | ArrayLike,
        probabilities: Sequence[float],
    ) -> FloatArray:
        """Estimate several quantiles of the same sample.

        Returns
        -------
        ndarray, shape (len(probabilities),)
        """
        sample = self._check_sample(sample)
        probs = [_check_probability(p) for p in probabilities]
        return np.array(
            [self._quantile_impl(sample, p) for p in probs], dtype=np.float64
        )

    def median(self, sample: Sample | ArrayLike) -> float:
        """Shorthand for ``quantile(sample, 0.5)``."""
        return self.quantile(sample, 0.5)

    @staticmethod
    def supports_weighted_samples() -> bool:
        """Return ``True`` if the estimator honours sample weights."""
        return False

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------

    @abstractmethod
    def _quantile_impl(self, sample: Sample, probability: float) -> float:
        """Core estimation logic, called with validated arguments."""

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _check_sample(self, sample: Any) -> Sample:
        if sample is None:
            raise InvalidArgumentError("sample must not be None.")
        if isinstance(sample, Sample):
            weighted = sample.is_weighted
        elif all(hasattr(sample, attr) for attr in _SAMPLE_ATTRS):
            _check_duck_sample(sample)
            weights = np.asarray(sample.sorted_weights, dtype=np.float64)
            # unequal weights cannot be read as a plain sample
            weighted = bool(np.any(weights != weights[0]))
        else:
            sample = Sample(sample)
            weighted = False
        if weighted and not self.supports_weighted_samples():
            raise DomainError(
                f"{type(self).__name__} does not support weighted samples."
            )
        return sample

    def _validate_and_prepare(self, sample: Any, probability: Any) -> tuple:
        sample = self._check_sample(sample)
        return sample, _check_probability(probability)


class WeightedQuantileEstimatorMixin:
    """Capability: the estimator accepts weighted samples."""

    @staticmethod
    def supports_weighted_samples() -> bool:
        return True

    def weighted_quantile(
        self,
        values: ArrayLike,
        weights: ArrayLike,
        probability: float,
    ) -> float:
        """Estimate a quantile of *values* weighted by *weights*.

        Parameters
        ----------
        values : array-like, shape (n,)
        weights : array-like, shape (n,)
            Non-negative weights aligned with *values*.
        probability : float
            Quantile level in ``[0, 1]``.
        """
        if values is None or weights is None:
            raise InvalidArgumentError("values and weights must not be None.")
        return self.quantile(Sample(values, weights), probability)


class QuantileCIEstimatorMixin(ABC):
    """Capability: the estimator can quantify its own uncertainty.

    Subclasses **must** implement :meth:`_ci_estimator_impl`.
    """

    def quantile_ci_estimator(
        self,
        sample: Sample | ArrayLike,
        probability: float,
    ) -> ConfidenceIntervalEstimator:
        """Return ``(n, estimate, standard_error)`` for the quantile.

        Raises the same errors as :meth:`BaseQuantileEstimator.quantile`.
        """
        return self._ci_estimator(sample, probability, stacklevel=3)

    def quantile_confidence_interval(
        self,
        sample: Sample | ArrayLike,
        probability: float,
        confidence_level: float = 0.95,
    ) -> ConfidenceInterval:
        """Confidence interval for the *probability*-quantile."""
        estimator = self._ci_estimator(sample, probability, stacklevel=3)
        return estimator.confidence_interval(confidence_level)

    def _ci_estimator(
        self, sample: Any, probability: Any, stacklevel: int
    ) -> ConfidenceIntervalEstimator:
        """Validate, then run the CI hook.

        *stacklevel* is counted from this frame, as in ``warnings.warn``,
        and points at the public caller; each callee receives it plus one.
        """
        sample, probability = self._validate_and_prepare(sample, probability)
        return self._ci_estimator_impl(
            sample, probability, stacklevel=stacklevel + 1
        )

    @abstractmethod
    def _ci_estimator_impl(
        self, sample: Sample, probability: float, stacklevel: int = 2
    ) -> ConfidenceIntervalEstimator:
        """Core CI logic, called with validated arguments.

        Warnings should be issued with *stacklevel* (plus one per extra
        frame) so they point at the caller of the public method.
        """
