"""Tests for the confidence-interval containers."""

import numpy as np
import pytest
from scipy.stats import norm, t as student_t

from hdquantile import (
    ConfidenceInterval,
    ConfidenceIntervalEstimator,
    DomainError,
    HarrellDavisQuantileEstimator,
)


class TestConfidenceInterval:

    def test_repr(self):
        ci = ConfidenceInterval(estimation=3.0, lower=1.5, upper=4.5, confidence_level=0.95)
        assert repr(ci) == "3.0000 [1.5000; 4.5000] (CI 95%)"

    def test_margin_and_contains(self):
        ci = ConfidenceInterval(estimation=3.0, lower=1.0, upper=5.0, confidence_level=0.9)
        assert ci.margin == 2.0
        assert ci.contains(1.0)
        assert ci.contains(5.0)
        assert not ci.contains(5.01)

    def test_frozen(self):
        ci = ConfidenceInterval(estimation=0.0, lower=-1.0, upper=1.0, confidence_level=0.95)
        with pytest.raises(AttributeError):
            ci.lower = 0.0


class TestConfidenceIntervalEstimator:

    def test_student_t_margin(self):
        est = ConfidenceIntervalEstimator(n=10, estimation=2.0, standard_error=0.5)
        ci = est.confidence_interval(0.95)
        crit = student_t.ppf(0.975, 9)
        np.testing.assert_allclose(ci.lower, 2.0 - crit * 0.5)
        np.testing.assert_allclose(ci.upper, 2.0 + crit * 0.5)
        assert ci.confidence_level == 0.95

    def test_degrees_of_freedom(self):
        assert ConfidenceIntervalEstimator(7, 0.0, 1.0).degrees_of_freedom == 6

    def test_single_observation_uses_normal(self):
        est = ConfidenceIntervalEstimator(n=1, estimation=0.0, standard_error=1.0)
        np.testing.assert_allclose(est.critical_value(0.9), norm.ppf(0.95))

    def test_wider_at_higher_level(self):
        est = ConfidenceIntervalEstimator(n=20, estimation=1.0, standard_error=0.3)
        ci90 = est.confidence_interval(0.90)
        ci99 = est.confidence_interval(0.99)
        assert ci99.margin > ci90.margin

    def test_zero_standard_error_is_degenerate(self):
        ci = ConfidenceIntervalEstimator(5, 4.0, 0.0).confidence_interval()
        assert ci.lower == ci.upper == 4.0

    @pytest.mark.parametrize("level", [0.0, 1.0, -0.5, 1.5])
    def test_invalid_level_raises(self, level):
        est = ConfidenceIntervalEstimator(n=5, estimation=0.0, standard_error=1.0)
        with pytest.raises(DomainError, match="confidence_level"):
            est.confidence_interval(level)


class TestMaritzJarrettIntervals:

    @pytest.fixture
    def sample(self):
        rng = np.random.RandomState(0)
        return rng.standard_normal(60)

    def test_interval_brackets_estimate(self, sample):
        hd = HarrellDavisQuantileEstimator()
        for p in (0.1, 0.5, 0.9):
            ci = hd.quantile_confidence_interval(sample, p)
            assert ci.lower < hd.quantile(sample, p) < ci.upper

    def test_tails_are_wider_than_median(self, sample):
        hd = HarrellDavisQuantileEstimator()
        se_mid = hd.quantile_ci_estimator(sample, 0.5).standard_error
        se_tail = hd.quantile_ci_estimator(sample, 0.98).standard_error
        assert se_tail > se_mid
