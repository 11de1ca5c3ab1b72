"""Estimator registry — maps short names to quantile estimator classes.

The registry implements the **Open / Closed Principle**: adding a new
estimator means calling :func:`register_estimator`; no existing code needs
to change.

Usage
-----
>>> from hdquantile.estimators import get_estimator
>>> hd = get_estimator("hd")       # a HarrellDavisQuantileEstimator
>>> q = hd.quantile([3.1, 1.2, 5.0, 2.2], 0.75)
"""

from __future__ import annotations

from hdquantile.estimators._base import (
    BaseQuantileEstimator,
    QuantileCIEstimatorMixin,
    WeightedQuantileEstimatorMixin,
)
from hdquantile.estimators._harrell_davis import (
    HarrellDavisQuantileEstimator,
    Moments,
    beta_weights,
    harrell_davis_ci_estimator,
    harrell_davis_quantile,
)

__all__ = [
    "BaseQuantileEstimator",
    "QuantileCIEstimatorMixin",
    "WeightedQuantileEstimatorMixin",
    "HarrellDavisQuantileEstimator",
    "Moments",
    "beta_weights",
    "harrell_davis_quantile",
    "harrell_davis_ci_estimator",
    "get_estimator",
    "register_estimator",
    "list_estimators",
]

# ──────────────────────────────────────────────────────────────────────
# Private registry
# ──────────────────────────────────────────────────────────────────────

_REGISTRY: dict[str, type[BaseQuantileEstimator]] = {}


# ──────────────────────────────────────────────────────────────────────
# Public helpers
# ──────────────────────────────────────────────────────────────────────

def register_estimator(name: str, cls: type[BaseQuantileEstimator]) -> None:
    """Register an estimator class under *name*.

    Parameters
    ----------
    name : str
        Short estimator name (e.g. ``"hd"``).
    cls : type
        A concrete subclass of :class:`BaseQuantileEstimator`.

    Raises
    ------
    TypeError
        If *cls* is not a subclass of ``BaseQuantileEstimator``.
    """
    if not (isinstance(cls, type) and issubclass(cls, BaseQuantileEstimator)):
        raise TypeError(f"{cls!r} is not a BaseQuantileEstimator subclass.")
    _REGISTRY[name] = cls


def get_estimator(name: str, **kwargs) -> BaseQuantileEstimator:
    """Return an **instance** of the estimator registered under *name*.

    Parameters
    ----------
    name : str
        A key previously passed to :func:`register_estimator`.
    **kwargs
        Forwarded to the estimator constructor.

    Raises
    ------
    KeyError
        If *name* is not in the registry.
    """
    try:
        cls = _REGISTRY[name]
    except KeyError:
        available = ", ".join(sorted(_REGISTRY)) or "(none)"
        raise KeyError(
            f"Unknown estimator {name!r}. Available estimators: {available}"
        ) from None
    return cls(**kwargs)


def list_estimators() -> list[str]:
    """Return the names of all registered estimators."""
    return sorted(_REGISTRY)


def _register_builtins() -> None:
    register_estimator("hd", HarrellDavisQuantileEstimator)
    register_estimator("harrell-davis", HarrellDavisQuantileEstimator)


_register_builtins()
