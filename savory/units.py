"""Centralized unit conversion utilities and physical constants."""

from __future__ import annotations

GAS_CONSTANT: float = 8.314  # J mol^-1 K^-1
ZERO_CELSIUS_K: float = 273.15
DAYS_PER_WEEK: float = 7.0
DAYS_PER_MONTH: float = 30.0


def celsius_to_kelvin(temperature_c: float) -> float:
    """Convert a storage or test temperature from degrees Celsius to kelvin.

    Args:
        temperature_c (float): Temperature in degrees Celsius.

    Returns:
        float: Absolute temperature in kelvin.

    Note:
        Arrhenius kinetics are only defined on the absolute scale, so every
        temperature entering ``exp(-Ea / (R T))`` must pass through here.
    """
    return float(temperature_c) + ZERO_CELSIUS_K


def days_to_weeks(days: float) -> float:
    """Express a shelf life given in days as weeks."""
    return float(days) / DAYS_PER_WEEK


def days_to_months(days: float) -> float:
    """Express a shelf life given in days as 30-day months."""
    return float(days) / DAYS_PER_MONTH
