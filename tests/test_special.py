"""Validate the Gamma and incomplete Beta approximations behind p-values."""

import math
import warnings

import pytest

from savory.errors import ApproximationWarning, InvalidConfigurationError
from savory.stats.special import (
    f_test_p_value,
    gamma,
    log_gamma,
    regularized_incomplete_beta,
)


class TestGamma:
    """Check the Lanczos approximation against known values."""

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 10])
    def test_integer_arguments_match_factorial(self, n):
        assert math.isclose(gamma(n), math.factorial(n - 1), rel_tol=1e-12)

    def test_half_integer(self):
        assert math.isclose(gamma(0.5), math.sqrt(math.pi), rel_tol=1e-12)

    @pytest.mark.parametrize("z", [0.1, 0.3, -0.5, -1.5, -2.7])
    def test_reflection_branch(self, z, scipy_special):
        assert math.isclose(gamma(z), scipy_special.gamma(z), rel_tol=1e-10)

    @pytest.mark.parametrize("z", [0, -1, -3])
    def test_poles_raise(self, z):
        with pytest.raises(ValueError):
            gamma(z)

    @pytest.mark.parametrize("z", [0.2, 0.5, 3.5, 45.0, 300.0])
    def test_log_gamma_matches_lgamma(self, z):
        assert math.isclose(log_gamma(z), math.lgamma(z), rel_tol=1e-10, abs_tol=1e-12)

    def test_log_gamma_rejects_non_positive(self):
        with pytest.raises(ValueError):
            log_gamma(0.0)

    def test_reflection_identity_without_reference(self):
        for z in [0.25, -0.5, -1.5, -2.7]:
            product = gamma(z) * gamma(1.0 - z)
            assert math.isclose(product, math.pi / math.sin(math.pi * z), rel_tol=1e-10)

    def test_gamma_agrees_with_log_gamma(self):
        for z in [0.5, 1.7, 12.0, 150.0]:
            assert math.isclose(math.log(gamma(z)), log_gamma(z), rel_tol=1e-12, abs_tol=1e-12)

    def test_values_beyond_float_range_are_infinite(self):
        assert gamma(200.0) == math.inf
        assert gamma(171.0) == pytest.approx(math.factorial(170), rel=1e-10)

    def test_reflected_overflow_gives_signed_zero(self):
        assert gamma(-200.5) == 0.0
        assert math.copysign(1.0, gamma(-200.5)) == -1.0
        assert math.copysign(1.0, gamma(-201.5)) == 1.0


class TestIncompleteBeta:
    def test_boundaries_short_circuit(self):
        assert regularized_incomplete_beta(0.0, 3.0, 0.5) == 0.0
        assert regularized_incomplete_beta(1.0, 3.0, 0.5) == 1.0

    @pytest.mark.parametrize(
        "x,a,b", [(0.3, 2.0, 3.0), (0.1, 5.0, 0.5), (0.5, 4.5, 1.0), (0.2, 30.0, 2.5)]
    )
    def test_matches_reference_when_series_converges(self, x, a, b, scipy_special):
        expected = scipy_special.betainc(a, b, x)
        assert math.isclose(
            regularized_incomplete_beta(x, a, b), expected, rel_tol=1e-7, abs_tol=1e-9
        )

    def test_truncated_series_warns_and_stays_bounded(self):
        with pytest.warns(ApproximationWarning):
            value = regularized_incomplete_beta(0.999, 1.0, 1.0)
        assert 0.0 <= value <= 1.0

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            regularized_incomplete_beta(1.5, 1.0, 1.0)
        with pytest.raises(ValueError):
            regularized_incomplete_beta(0.5, 0.0, 1.0)


class TestFTestPValue:
    def test_matches_f_distribution_tail(self, scipy_stats):
        expected = scipy_stats.f.sf(5.0, 2, 9)
        assert math.isclose(f_test_p_value(5.0, 2, 9), expected, abs_tol=1e-8)

    def test_non_positive_f_gives_one(self):
        assert f_test_p_value(0.0, 2, 9) == 1.0
        assert f_test_p_value(-1.0, 2, 9) == 1.0

    def test_infinite_f_gives_zero(self):
        assert f_test_p_value(math.inf, 2, 9) == 0.0

    def test_always_within_unit_interval(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", ApproximationWarning)
            for f in [0.0, 0.01, 0.5, 1.0, 3.0, 10.0, 100.0, 1e6]:
                for df1 in [1, 2, 5, 9]:
                    for df2 in [2, 10, 60, 600]:
                        p = f_test_p_value(f, df1, df2)
                        assert 0.0 <= p <= 1.0

    def test_large_panels_do_not_overflow(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", ApproximationWarning)
            p = f_test_p_value(25.0, 4, 800)
        assert math.isfinite(p)
        assert p < 1e-6

    def test_invalid_degrees_of_freedom(self):
        with pytest.raises(InvalidConfigurationError):
            f_test_p_value(2.0, 0, 10)
        with pytest.raises(InvalidConfigurationError):
            f_test_p_value(math.nan, 1, 10)
