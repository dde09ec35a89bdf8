"""Validate Q10 and Arrhenius shelf-life extrapolation."""

import math

import pytest

from savory.errors import InsufficientData, InvalidConfigurationError
from savory.shelf_life.kinetics import (
    CURVE_MAX_DAYS,
    KineticTestPoint,
    arrhenius_predict,
    q10_predict,
    shelf_life_at,
)
from savory.units import GAS_CONSTANT, celsius_to_kelvin


class TestQ10:
    def test_ten_degree_drop_doubles_shelf_life(self):
        result = q10_predict(30, known_temp_c=35, target_temp_c=25, q10=2)
        assert result.predicted_days == pytest.approx(60.0)
        assert result.factor == pytest.approx(2.0)
        assert result.predicted_weeks == pytest.approx(60 / 7)
        assert result.predicted_months == pytest.approx(2.0)

    def test_same_temperature_returns_known_shelf_life_exactly(self):
        result = q10_predict(17.3, known_temp_c=22.5, target_temp_c=22.5, q10=3.1)
        assert result.factor == 1.0
        assert result.predicted_days == 17.3

    def test_warmer_storage_shortens_shelf_life(self):
        result = q10_predict(60, known_temp_c=25, target_temp_c=35, q10=2)
        assert result.predicted_days == pytest.approx(30.0)

    @pytest.mark.parametrize(
        "days,q10", [(0, 2), (-5, 2), (30, 0), (30, -1.5), (math.nan, 2)]
    )
    def test_invalid_inputs_rejected(self, days, q10):
        with pytest.raises(InvalidConfigurationError):
            q10_predict(days, known_temp_c=35, target_temp_c=25, q10=q10)


def _synthetic_points(ea_kj_mol, a, temperatures_c):
    return [
        KineticTestPoint(t, 1.0 / (a * math.exp(-ea_kj_mol * 1000 / (GAS_CONSTANT * celsius_to_kelvin(t)))))
        for t in temperatures_c
    ]


class TestArrhenius:
    def test_recovers_known_parameters(self):
        points = _synthetic_points(80.0, 1e13, [25.0, 35.0, 45.0, 55.0])
        result = arrhenius_predict(points, target_temp_c=20.0)
        assert result.ea_kj_mol == pytest.approx(80.0, rel=0.01)
        assert result.a == pytest.approx(1e13, rel=0.01)
        assert result.r_squared == pytest.approx(1.0, abs=1e-9)
        assert result.n_points == 4
        expected = 1.0 / (1e13 * math.exp(-80000 / (GAS_CONSTANT * 293.15)))
        assert result.predicted_days == pytest.approx(expected, rel=0.01)

    def test_typical_accelerated_test(self):
        points = [(45, 7), (35, 21), (25, 60)]
        result = arrhenius_predict(points, target_temp_c=25)
        assert 80 < result.ea_kj_mol < 90
        assert 0.95 < result.r_squared <= 1.0
        assert 50 < result.predicted_days < 70
        assert result.predicted_weeks == pytest.approx(result.predicted_days / 7)
        assert math.isfinite(result.ea_standard_error)

    def test_display_curve_is_clipped(self):
        result = arrhenius_predict([(45, 7), (35, 21), (25, 60)], target_temp_c=25)
        temps = [p.temperature_c for p in result.curve]
        assert temps == [5.0, 10.0, 15.0, 20.0, 25.0, 30.0, 35.0, 40.0, 45.0, 50.0]
        assert all(p.shelf_life_days <= CURVE_MAX_DAYS for p in result.curve)
        assert result.curve[0].shelf_life_days == CURVE_MAX_DAYS
        days = [p.shelf_life_days for p in result.curve]
        assert days == sorted(days, reverse=True)

    def test_two_points_fit_exactly(self):
        result = arrhenius_predict([(40, 10), (30, 30)], target_temp_c=30)
        assert result.predicted_days == pytest.approx(30.0)
        assert result.r_squared == pytest.approx(1.0)
        assert math.isnan(result.ea_standard_error)

    def test_fewer_than_two_points_is_insufficient(self):
        assert isinstance(arrhenius_predict([(40, 10)], 25), InsufficientData)
        assert isinstance(arrhenius_predict([], 25), InsufficientData)

    def test_single_temperature_is_insufficient(self):
        result = arrhenius_predict([(40, 10), (40, 12), (40, 11)], 25)
        assert isinstance(result, InsufficientData)
        assert "temperature" in result.reason

    def test_non_positive_shelf_life_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            arrhenius_predict([(40, 10), (30, 0)], 25)

    def test_temperature_below_absolute_zero_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            arrhenius_predict([(40, 10), (30, 20)], -300)


def test_shelf_life_at_zero_rate():
    assert shelf_life_at(0.0, 50.0, 25.0) == 0.0


def test_shelf_life_at_extreme_rates_do_not_overflow():
    assert shelf_life_at(1.0, -5000.0, 5.0) == 0.0
    assert shelf_life_at(1e-300, 5000.0, 5.0) == math.inf


class TestSteepArrheniusFits:
    def test_rate_rising_steeply_with_temperature(self):
        result = arrhenius_predict([(20.0, 1000.0), (21.0, 1.0)], target_temp_c=25.0)
        assert result.a == math.inf
        assert result.ea_kj_mol == pytest.approx(4952.29, rel=1e-3)
        assert 0.0 <= result.predicted_days < 1e-6
        assert result.curve[0].shelf_life_days == CURVE_MAX_DAYS
        assert all(0.0 <= p.shelf_life_days <= CURVE_MAX_DAYS for p in result.curve)

    def test_rate_falling_steeply_with_temperature(self):
        result = arrhenius_predict([(20.0, 1.0), (21.0, 1000.0)], target_temp_c=25.0)
        assert result.a == 0.0
        assert result.ea_kj_mol == pytest.approx(-4952.29, rel=1e-3)
        assert result.predicted_days > 1e6
        assert result.curve[-1].shelf_life_days == CURVE_MAX_DAYS
        assert all(0.0 <= p.shelf_life_days <= CURVE_MAX_DAYS for p in result.curve)


def test_q10_factor_beyond_float_range_is_infinite():
    result = q10_predict(30, known_temp_c=12000, target_temp_c=0, q10=2)
    assert result.factor == math.inf
    assert result.predicted_days == math.inf
