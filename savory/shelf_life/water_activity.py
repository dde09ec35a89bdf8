"""Qualitative shelf-life risk assessment from water activity and hurdles.

The assessment is a multiplicative heuristic. A base shelf life and a risk
level are read from the water-activity bracket of the product; the base is
then scaled by the other preservation hurdles (pH, storage temperature,
preservatives, packaging, product type). The risk level reflects the water
activity bracket alone and is not changed by the hurdles.

Water activity brackets (base days, risk level):
    aw < 0.30          365   very-low
    0.30 <= aw < 0.50  180   low
    0.50 <= aw < 0.60   90   low
    0.60 <= aw < 0.70   30   medium
    0.70 <= aw < 0.85   14   high
    aw >= 0.85           7   very-high

References:
    Scott (1957); Labuza (1970s) food stability map; FDA acid-food pH 4.6
    limit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple, Union

from savory.errors import InvalidConfigurationError
from savory.units import days_to_months, days_to_weeks


class RiskLevel(str, Enum):
    VERY_LOW = "very-low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very-high"


class Packaging(str, Enum):
    NORMAL = "normal"
    VACUUM = "vacuum"
    MODIFIED_ATMOSPHERE = "modified-atmosphere"
    NITROGEN = "nitrogen"


class ProductType(str, Enum):
    FRESH = "fresh"
    SEMI_DRIED = "semi-dried"
    DRIED = "dried"
    FROZEN = "frozen"


@dataclass(frozen=True)
class AwCategory:
    name: str
    organisms_note: str


# (upper bound, base days, risk level, risk factor or None)
AW_BRACKETS: Tuple[Tuple[float, float, RiskLevel, Optional[str]], ...] = (
    (0.3, 365.0, RiskLevel.VERY_LOW, None),
    (0.5, 180.0, RiskLevel.LOW, None),
    (0.6, 90.0, RiskLevel.LOW, None),
    (0.7, 30.0, RiskLevel.MEDIUM, "Water activity allows growth of yeasts and moulds"),
    (0.85, 14.0, RiskLevel.HIGH, "Water activity allows growth of many bacteria"),
    (math.inf, 7.0, RiskLevel.VERY_HIGH, "High water activity: all microorganisms can grow"),
)

AW_CATEGORIES: Tuple[Tuple[float, AwCategory], ...] = (
    (0.3, AwCategory("very dry", "No microbial growth")),
    (0.5, AwCategory("dry", "Some osmophilic yeasts")),
    (0.6, AwCategory("semi-dry", "Some yeasts and moulds")),
    (0.7, AwCategory("slightly moist", "Most moulds")),
    (0.85, AwCategory("moderately moist", "Many yeasts and bacteria")),
    (0.95, AwCategory("very moist", "Most pathogenic bacteria")),
    (math.inf, AwCategory("wet", "All microorganisms")),
)

PACKAGING_FACTORS: Mapping[Packaging, float] = MappingProxyType(
    {
        Packaging.NORMAL: 1.0,
        Packaging.VACUUM: 1.5,
        Packaging.MODIFIED_ATMOSPHERE: 1.8,
        Packaging.NITROGEN: 2.0,
    }
)

PRODUCT_FACTORS: Mapping[ProductType, float] = MappingProxyType(
    {
        ProductType.FRESH: 0.5,
        ProductType.SEMI_DRIED: 1.0,
        ProductType.DRIED: 1.5,
        ProductType.FROZEN: 3.0,
    }
)

RISK_LABELS: Mapping[RiskLevel, str] = MappingProxyType(
    {
        RiskLevel.VERY_LOW: "Very low",
        RiskLevel.LOW: "Low",
        RiskLevel.MEDIUM: "Medium",
        RiskLevel.HIGH: "High",
        RiskLevel.VERY_HIGH: "Very high",
    }
)

ACID_PH_LIMIT = 4.6
HIGH_PH_LIMIT = 6.5
CHILLED_TEMP_C = 4.0
WARM_TEMP_C = 30.0
AMBIENT_LIMIT_C = 25.0
TARGET_AW = 0.6

ACID_PH_FACTOR = 1.5
HIGH_PH_FACTOR = 0.7
CHILLED_FACTOR = 2.0
WARM_FACTOR = 0.5
PRESERVATIVE_FACTOR = 1.3


@dataclass(frozen=True)
class WaterActivityAssessment:
    predicted_days: int
    shelf_life_days: float
    risk_level: RiskLevel
    risk_factors: Tuple[str, ...]
    recommendations: Tuple[str, ...]
    aw_category: AwCategory

    @property
    def predicted_weeks(self) -> float:
        return days_to_weeks(self.shelf_life_days)

    @property
    def predicted_months(self) -> float:
        return days_to_months(self.shelf_life_days)

    @property
    def risk_label(self) -> str:
        return RISK_LABELS[self.risk_level]


def aw_category(aw: float) -> AwCategory:
    """Return the descriptive category and growth note for ``aw``."""
    for upper, category in AW_CATEGORIES:
        if aw < upper:
            return category
    return AW_CATEGORIES[-1][1]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _coerce_enum(enum_cls, value, label: str):
    try:
        return enum_cls(value)
    except ValueError:
        accepted = ", ".join(member.value for member in enum_cls)
        raise InvalidConfigurationError(
            f"Unknown {label} '{value}'; expected one of: {accepted}."
        ) from None


def assess_water_activity(
    aw: float,
    ph: float,
    temperature_c: float,
    preservatives: bool = False,
    packaging: Union[Packaging, str] = Packaging.NORMAL,
    product_type: Union[ProductType, str] = ProductType.SEMI_DRIED,
) -> WaterActivityAssessment:
    """Estimate shelf life and microbial risk from water activity and hurdles.

    Args:
        aw (float): Water activity in ``[0, 1]``.
        ph (float): Product pH.
        temperature_c (float): Storage temperature (°C).
        preservatives (bool, optional): Whether preservatives are used.
        packaging (Packaging | str, optional): ``normal``, ``vacuum``,
            ``modified-atmosphere`` or ``nitrogen``.
        product_type (ProductType | str, optional): ``fresh``,
            ``semi-dried``, ``dried`` or ``frozen``.

    Returns:
        WaterActivityAssessment: Rounded and unrounded shelf-life estimates,
        the water-activity risk level, and explanatory notes.

    Raises:
        InvalidConfigurationError: If ``aw`` is outside ``[0, 1]``, pH or
            temperature is not finite, or an enum value is unknown.
    """
    aw = float(aw)
    if not math.isfinite(aw) or not 0.0 <= aw <= 1.0:
        raise InvalidConfigurationError(f"Water activity must lie in [0, 1], got {aw}.")
    ph = float(ph)
    temperature_c = float(temperature_c)
    if not math.isfinite(ph):
        raise InvalidConfigurationError("pH must be a finite number.")
    if not math.isfinite(temperature_c):
        raise InvalidConfigurationError("Storage temperature must be a finite number.")
    packaging = _coerce_enum(Packaging, packaging, "packaging")
    product_type = _coerce_enum(ProductType, product_type, "product type")

    risk_factors: List[str] = []
    recommendations: List[str] = []

    for upper, base_days, risk_level, note in AW_BRACKETS:
        if aw < upper:
            break
    days = base_days
    if note:
        risk_factors.append(note)

    if ph < ACID_PH_LIMIT:
        days *= ACID_PH_FACTOR
        recommendations.append("Low pH inhibits pathogenic microorganisms")
    elif ph > HIGH_PH_LIMIT:
        days *= HIGH_PH_FACTOR
        risk_factors.append("High pH favours bacterial growth")

    if temperature_c <= CHILLED_TEMP_C:
        days *= CHILLED_FACTOR
        recommendations.append("Chilled storage extends shelf life")
    elif temperature_c >= WARM_TEMP_C:
        days *= WARM_FACTOR
        risk_factors.append("High storage temperature accelerates deterioration")

    if preservatives:
        days *= PRESERVATIVE_FACTOR
        recommendations.append("Preservatives extend shelf life")

    days *= PACKAGING_FACTORS[packaging]
    days *= PRODUCT_FACTORS[product_type]

    if aw > TARGET_AW:
        recommendations.append("Lower water activity below 0.6 to extend shelf life")
    if packaging is Packaging.NORMAL:
        recommendations.append(
            "Use vacuum or modified-atmosphere packaging to extend shelf life"
        )
    if temperature_c > AMBIENT_LIMIT_C and product_type is not ProductType.FROZEN:
        recommendations.append("Store below 25 °C")

    return WaterActivityAssessment(
        predicted_days=_round_half_up(days),
        shelf_life_days=days,
        risk_level=risk_level,
        risk_factors=tuple(risk_factors),
        recommendations=tuple(recommendations),
        aw_category=aw_category(aw),
    )
