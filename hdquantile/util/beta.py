"""Beta distribution CDF used by the Harrell-Davis kernel.

References
----------
.. [1] Abramowitz, M. and Stegun, I. (1972). *Handbook of Mathematical
       Functions*, §26.5 "Incomplete Beta Function".
"""

from __future__ import annotations

from typing import Union

import numpy as np
from scipy.special import betainc

from hdquantile._exceptions import DomainError
from hdquantile._typing import FloatArray


def beta_cdf(
    a: float,
    b: float,
    x: Union[float, np.ndarray],
) -> Union[float, FloatArray]:
    """Regularized incomplete beta function :math:`I_x(a, b)`.

    Parameters
    ----------
    a, b : float
        Shape parameters, both strictly positive.
    x : float or ndarray
        Evaluation point(s).  Values outside ``[0, 1]`` are clipped, so
        ``I_0 = 0`` and ``I_1 = 1`` hold exactly.

    Returns
    -------
    float or ndarray
        Same shape as *x*.

    Raises
    ------
    DomainError
        If ``a <= 0`` or ``b <= 0``.
    """
    if not (a > 0 and b > 0):
        raise DomainError(
            f"Beta shape parameters must be positive, got a={a}, b={b}."
        )
    x_arr = np.clip(np.asarray(x, dtype=np.float64), 0.0, 1.0)
    cdf = betainc(a, b, x_arr)
    # I_0 = 0 and I_1 = 1 exactly
    cdf = np.where(x_arr <= 0.0, 0.0, np.where(x_arr >= 1.0, 1.0, cdf))
    if np.ndim(x) == 0:
        return float(cdf)
    return cdf
