"""Immutable (optionally weighted) sample of real-valued observations.

A :class:`Sample` sorts its observations once at construction and keeps
the weights index-aligned with the sorted values, which is the view the
quantile estimators walk over.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from sklearn.utils.validation import (
    assert_all_finite,
    check_consistent_length,
    column_or_1d,
)

from hdquantile._exceptions import DomainError
from hdquantile._typing import ArrayLike, FloatArray


def _as_float_vector(x: ArrayLike, name: str) -> FloatArray:
    x = column_or_1d(x, dtype=np.float64).copy()
    assert_all_finite(x, input_name=name)
    return x


def _check_weights(weights: FloatArray) -> float:
    if np.any(weights < 0):
        idx = int(np.argmax(weights < 0))
        raise DomainError(
            f"weights must be non-negative, got {weights[idx]} at index {idx}."
        )
    total = float(np.sum(weights))
    if not total > 0:
        raise DomainError(f"Total weight must be positive, got {total}.")
    return total


def _freeze(*arrays: np.ndarray) -> None:
    for a in arrays:
        a.setflags(write=False)


class Sample:
    """A finite sample of observations with optional non-negative weights.

    Parameters
    ----------
    values : array-like, shape (n,)
        Finite observations, in any order.  ``n >= 1``.
    weights : array-like, shape (n,), optional
        Non-negative weights aligned with *values*.  ``None`` means every
        observation has weight 1.

    Attributes
    ----------
    values, weights : ndarray, shape (n,)
        The observations and weights in their original order.
    sorted_values : ndarray, shape (n,)
        Observations in ascending order.
    sorted_weights : ndarray, shape (n,)
        ``sorted_weights[j]`` is the weight of ``sorted_values[j]``.
    total_weight : float
        Sum of the weights.
    count : int
        Number of observations.
    is_weighted : bool
        ``True`` when weights were supplied.

    Raises
    ------
    DomainError
        If the sample is empty, a weight is negative or the weights sum
        to zero.
    ValueError
        If the inputs are not 1-D, contain NaN/inf or differ in length.
    """

    __slots__ = (
        "_values",
        "_weights",
        "_sorted_values",
        "_sorted_weights",
        "_total_weight",
        "_is_weighted",
    )

    def __init__(self, values: ArrayLike, weights: Optional[ArrayLike] = None):
        values = _as_float_vector(values, "values")
        if values.size == 0:
            raise DomainError("Sample must contain at least one value.")

        if weights is None:
            weights = np.ones_like(values)
            total_weight = float(values.size)
            is_weighted = False
        else:
            weights = _as_float_vector(weights, "weights")
            check_consistent_length(values, weights)
            total_weight = _check_weights(weights)
            is_weighted = True

        order = np.argsort(values, kind="stable")
        sorted_values = values[order]
        sorted_weights = weights[order]
        _freeze(values, weights, sorted_values, sorted_weights)

        self._values = values
        self._weights = weights
        self._sorted_values = sorted_values
        self._sorted_weights = sorted_weights
        self._total_weight = total_weight
        self._is_weighted = is_weighted

    @classmethod
    def from_sorted(
        cls,
        sorted_values: ArrayLike,
        sorted_weights: Optional[ArrayLike] = None,
    ) -> "Sample":
        """Build a sample from values the caller has already sorted.

        Raises
        ------
        DomainError
            If *sorted_values* is not in ascending order.
        """
        values = _as_float_vector(sorted_values, "sorted_values")
        if np.any(np.diff(values) < 0):
            raise DomainError("sorted_values must be in ascending order.")
        return cls(values, sorted_weights)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def values(self) -> FloatArray:
        return self._values

    @property
    def weights(self) -> FloatArray:
        return self._weights

    @property
    def sorted_values(self) -> FloatArray:
        return self._sorted_values

    @property
    def sorted_weights(self) -> FloatArray:
        return self._sorted_weights

    @property
    def total_weight(self) -> float:
        return self._total_weight

    @property
    def count(self) -> int:
        return int(self._values.size)

    @property
    def is_weighted(self) -> bool:
        return self._is_weighted

    @property
    def min(self) -> float:
        return float(self._sorted_values[0])

    @property
    def max(self) -> float:
        return float(self._sorted_values[-1])

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        kind = "weighted" if self._is_weighted else "unweighted"
        return f"Sample(n={self.count}, {kind})"
