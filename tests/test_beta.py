"""Tests for the beta CDF helper.

Closed forms used as references:
  I_x(1, 1)     = x
  I_x(3, 3)     = 10 x^3 - 15 x^4 + 6 x^5
  I_x(1.5, 1.5) = (2θ - sin(4θ) / 2) / π,  x = sin²θ
"""

import math

import numpy as np
import pytest

from hdquantile import DomainError
from hdquantile.util.beta import beta_cdf


class TestBetaCdf:

    def test_uniform(self):
        x = np.linspace(0, 1, 11)
        np.testing.assert_allclose(beta_cdf(1.0, 1.0, x), x, atol=1e-15)

    def test_beta_3_3_polynomial(self):
        x = np.array([0.2, 0.4, 0.6, 0.8])
        expected = 10 * x**3 - 15 * x**4 + 6 * x**5
        np.testing.assert_allclose(beta_cdf(3.0, 3.0, x), expected, rtol=1e-12)

    def test_beta_half_integer(self):
        theta = math.pi / 6  # x = 0.25
        expected = (2 * theta - math.sin(4 * theta) / 2) / math.pi
        np.testing.assert_allclose(beta_cdf(1.5, 1.5, 0.25), expected, rtol=1e-12)

    def test_endpoints_exact(self):
        assert beta_cdf(2.5, 7.0, 0.0) == 0.0
        assert beta_cdf(2.5, 7.0, 1.0) == 1.0

    def test_clips_out_of_range(self):
        out = beta_cdf(2.0, 2.0, np.array([-0.5, 1.0 + 1e-12, 2.0]))
        np.testing.assert_array_equal(out, [0.0, 1.0, 1.0])

    def test_scalar_in_scalar_out(self):
        assert isinstance(beta_cdf(2.0, 3.0, 0.5), float)

    def test_array_in_array_out(self):
        out = beta_cdf(2.0, 3.0, np.array([0.1, 0.5]))
        assert isinstance(out, np.ndarray)
        assert out.shape == (2,)

    def test_monotone(self):
        x = np.linspace(0, 1, 1001)
        cdf = beta_cdf(0.7, 12.3, x)
        assert np.all(np.diff(cdf) >= 0)

    @pytest.mark.parametrize("a, b", [(0.0, 1.0), (1.0, 0.0), (-1.0, 2.0)])
    def test_nonpositive_shape_raises(self, a, b):
        with pytest.raises(DomainError, match="shape parameters"):
            beta_cdf(a, b, 0.5)
