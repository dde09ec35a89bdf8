"""Kinetic shelf-life extrapolation from accelerated storage tests.

Two models are provided:

Q10 model:
    Shelf life changes by a factor ``Q10`` for every 10 °C change in storage
    temperature::

        t_target = t_known · Q10 ^ ((T_known - T_target) / 10)

Arrhenius model:
    The deterioration rate ``k = 1 / t`` follows ``k = A · exp(-Ea / (R T))``.
    Taking logarithms gives the straight line ``ln k = ln A - (Ea / R) · (1/T)``,
    which is fitted by ordinary least squares to the accelerated-test points
    and then evaluated at the target storage temperature.

Both models extrapolate; predictions far outside the tested temperatures
should be read as indications, which is why the display curve of the
Arrhenius model is clipped at one year.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

import numpy as np

from savory.errors import InsufficientData, InvalidConfigurationError
from savory.stats.regression import linear_regression
from savory.units import (
    GAS_CONSTANT,
    ZERO_CELSIUS_K,
    celsius_to_kelvin,
    days_to_months,
    days_to_weeks,
)

DEFAULT_Q10 = 2.0
CURVE_TEMPERATURES_C: Tuple[float, ...] = tuple(float(t) for t in range(5, 55, 5))
CURVE_MAX_DAYS = 365.0


@dataclass(frozen=True)
class KineticTestPoint:
    temperature_c: float
    shelf_life_days: float


@dataclass(frozen=True)
class CurvePoint:
    temperature_c: float
    shelf_life_days: float


@dataclass(frozen=True)
class Q10Result:
    predicted_days: float
    factor: float

    @property
    def predicted_weeks(self) -> float:
        return days_to_weeks(self.predicted_days)

    @property
    def predicted_months(self) -> float:
        return days_to_months(self.predicted_days)


@dataclass(frozen=True)
class ArrheniusResult:
    """Fitted Arrhenius parameters and the prediction at the target temperature.

    Attributes:
        ea_kj_mol: Activation energy in kJ mol^-1.
        a: Pre-exponential factor in day^-1; ``inf`` when ``exp(intercept)``
            overflows.
        r_squared: Coefficient of determination of the ``ln k`` vs ``1/T`` fit.
        predicted_days: Predicted shelf life at the target temperature.
        curve: Predicted shelf life from 5 to 50 °C, clipped at 365 days.
        slope: Fitted slope ``-Ea / R`` in kelvin.
        intercept: Fitted intercept ``ln A``.
        n_points: Number of test points used in the fit.
        ea_standard_error: Standard error of ``ea_kj_mol``; NaN with only two
            points.
    """

    ea_kj_mol: float
    a: float
    r_squared: float
    predicted_days: float
    curve: Tuple[CurvePoint, ...]
    slope: float
    intercept: float
    n_points: int
    ea_standard_error: float

    @property
    def predicted_weeks(self) -> float:
        return days_to_weeks(self.predicted_days)

    @property
    def predicted_months(self) -> float:
        return days_to_months(self.predicted_days)


def _require_finite(value: float, label: str) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise InvalidConfigurationError(f"{label} must be a finite number.")
    return value


def _require_above_absolute_zero(temperature_c: float, label: str) -> float:
    temperature_c = _require_finite(temperature_c, label)
    if temperature_c <= -ZERO_CELSIUS_K:
        raise InvalidConfigurationError(f"{label} must be above absolute zero.")
    return temperature_c


def q10_predict(
    known_shelf_life_days: float,
    known_temp_c: float,
    target_temp_c: float,
    q10: float = DEFAULT_Q10,
) -> Q10Result:
    """Extrapolate a known shelf life to another temperature with a Q10 factor.

    Args:
        known_shelf_life_days (float): Shelf life observed at
            ``known_temp_c``; must be positive.
        known_temp_c (float): Temperature of the known observation (°C).
        target_temp_c (float): Storage temperature to predict for (°C).
        q10 (float, optional): Rate change per 10 °C; must be positive.
            Defaults to ``2.0``.

    Returns:
        Q10Result: Predicted shelf life in days and the multiplicative factor
        applied to the known shelf life.

    Raises:
        InvalidConfigurationError: If the shelf life or ``q10`` is not
            positive, or any input is not finite.
    """
    known_days = _require_finite(known_shelf_life_days, "Known shelf life")
    q10 = _require_finite(q10, "Q10")
    known_temp_c = _require_finite(known_temp_c, "Known temperature")
    target_temp_c = _require_finite(target_temp_c, "Target temperature")
    if known_days <= 0:
        raise InvalidConfigurationError("Known shelf life must be positive.")
    if q10 <= 0:
        raise InvalidConfigurationError("Q10 must be positive.")

    try:
        factor = q10 ** ((known_temp_c - target_temp_c) / 10.0)
    except OverflowError:
        factor = math.inf
    return Q10Result(predicted_days=known_days * factor, factor=factor)


def _as_test_point(point) -> KineticTestPoint:
    if isinstance(point, KineticTestPoint):
        return point
    temperature_c, shelf_life_days = point
    return KineticTestPoint(float(temperature_c), float(shelf_life_days))


def _days_from_log_rate(log_rate: float) -> float:
    """Return ``1 / k`` for ``ln k``; ``inf`` when the rate underflows to zero."""
    try:
        return math.exp(-log_rate)
    except OverflowError:
        return math.inf


def shelf_life_at(a: float, ea_kj_mol: float, temperature_c: float) -> float:
    """Return ``1 / k`` at ``temperature_c`` for fitted Arrhenius parameters.

    The rate is combined in log space so that extreme fits give ``0`` or
    ``inf`` days instead of an overflow. A non-positive ``a`` yields ``0``
    days.
    """
    if a <= 0:
        return 0.0
    log_rate = math.log(a) - ea_kj_mol * 1000.0 / (
        GAS_CONSTANT * celsius_to_kelvin(temperature_c)
    )
    return _days_from_log_rate(log_rate)


def _fitted_shelf_life(slope: float, intercept: float, temperature_c: float) -> float:
    return _days_from_log_rate(intercept + slope / celsius_to_kelvin(temperature_c))


def arrhenius_predict(
    test_points: Iterable[Union[KineticTestPoint, Tuple[float, float]]],
    target_temp_c: float,
) -> Union[ArrheniusResult, InsufficientData]:
    """Fit the Arrhenius model to accelerated tests and predict shelf life.

    Args:
        test_points: Observations as ``KineticTestPoint`` or
            ``(temperature_c, shelf_life_days)`` pairs.
        target_temp_c (float): Storage temperature to predict for (°C).

    Returns:
        ArrheniusResult | InsufficientData: The fit and prediction, or a marker
        when there are fewer than two points or every point shares one
        temperature.

    Raises:
        InvalidConfigurationError: If a shelf life is not positive or a
            temperature is not above absolute zero.

    Note:
        Each point is transformed to ``x = 1 / (T + 273.15)`` and
        ``y = ln(1 / days)``. ``Ea = -slope · R / 1000`` and
        ``A = exp(intercept)``, which is ``inf`` for fits steep enough to
        leave the float range. Predictions are evaluated from the slope and
        intercept in log space, so such fits still give finite or infinite
        day counts.
    """
    points = [_as_test_point(p) for p in test_points]
    target_temp_c = _require_above_absolute_zero(target_temp_c, "Target temperature")
    for p in points:
        _require_above_absolute_zero(p.temperature_c, "Test temperature")
        if not math.isfinite(p.shelf_life_days) or p.shelf_life_days <= 0:
            raise InvalidConfigurationError(
                "Test shelf life must be a positive, finite number of days."
            )

    if len(points) < 2:
        return InsufficientData(
            f"At least 2 test points are required, got {len(points)}."
        )

    x = np.array([1.0 / celsius_to_kelvin(p.temperature_c) for p in points])
    y = np.array([math.log(1.0 / p.shelf_life_days) for p in points])
    if np.ptp(x) == 0:
        return InsufficientData(
            "All test points share one temperature; the Arrhenius slope is undefined."
        )

    reg = linear_regression(x, y, min_points=2)
    slope = reg["m"]
    intercept = reg["b"]
    ea_kj_mol = -slope * GAS_CONSTANT / 1000.0
    try:
        a = math.exp(intercept)
    except OverflowError:
        a = math.inf

    curve = tuple(
        CurvePoint(t, min(_fitted_shelf_life(slope, intercept, t), CURVE_MAX_DAYS))
        for t in CURVE_TEMPERATURES_C
    )

    return ArrheniusResult(
        ea_kj_mol=ea_kj_mol,
        a=a,
        r_squared=reg["r2"],
        predicted_days=_fitted_shelf_life(slope, intercept, target_temp_c),
        curve=curve,
        slope=slope,
        intercept=intercept,
        n_points=len(points),
        ea_standard_error=reg["se_m"] * GAS_CONSTANT / 1000.0,
    )
