"""Confidence intervals built from a point estimate and its standard error.

A quantile estimator that can quantify its own uncertainty returns a
:class:`ConfidenceIntervalEstimator`, the triple ``(n, estimation,
standard_error)``.  Intervals for any confidence level are then derived
from Student's *t* distribution with ``n - 1`` degrees of freedom.
"""

from __future__ import annotations

from dataclasses import dataclass

from scipy.stats import norm, t as student_t

from hdquantile._exceptions import DomainError


@dataclass(frozen=True)
class ConfidenceInterval:
    """A two-sided confidence interval around an estimate.

    Attributes
    ----------
    estimation : float
        Point estimate.
    lower, upper : float
        Interval bounds.
    confidence_level : float
        Nominal coverage in (0, 1).
    """

    estimation: float
    lower: float
    upper: float
    confidence_level: float

    @property
    def margin(self) -> float:
        """Half-width of the interval."""
        return (self.upper - self.lower) / 2.0

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    def __repr__(self) -> str:
        return (
            f"{self.estimation:.4f} [{self.lower:.4f}; {self.upper:.4f}] "
            f"(CI {self.confidence_level * 100:g}%)"
        )


@dataclass(frozen=True)
class ConfidenceIntervalEstimator:
    """Point estimate plus standard error, ready to produce intervals.

    Attributes
    ----------
    n : int
        Sample size the estimate was computed from.
    estimation : float
        Point estimate (the interval centre).
    standard_error : float
        Standard error of *estimation*.
    """

    n: int
    estimation: float
    standard_error: float

    @property
    def degrees_of_freedom(self) -> int:
        return self.n - 1

    def critical_value(self, confidence_level: float = 0.95) -> float:
        """Two-sided critical value for *confidence_level*.

        Uses Student's t with ``n - 1`` degrees of freedom, or the normal
        quantile when ``n < 2``.
        """
        if not (0 < confidence_level < 1):
            raise DomainError(
                f"confidence_level must be in (0, 1), got {confidence_level}."
            )
        q = (1 + confidence_level) / 2
        df = self.degrees_of_freedom
        if df > 0:
            return float(student_t.ppf(q, df))
        return float(norm.ppf(q))

    def confidence_interval(
        self, confidence_level: float = 0.95
    ) -> ConfidenceInterval:
        """Return the interval ``estimation ± crit * standard_error``."""
        margin = self.critical_value(confidence_level) * self.standard_error
        return ConfidenceInterval(
            estimation=self.estimation,
            lower=self.estimation - margin,
            upper=self.estimation + margin,
            confidence_level=confidence_level,
        )
