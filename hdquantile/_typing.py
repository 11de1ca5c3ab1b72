"""Type aliases and common types for the hdquantile package."""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
import numpy.typing as npt

# Array-like types accepted as input
ArrayLike = Union[np.ndarray, Sequence[float]]

# Strict numpy array types returned from computations
FloatArray = npt.NDArray[np.float64]
