"""
Shelf-life prediction models for food products.

Modules:
    kinetics:
        Q10 extrapolation and Arrhenius regression of accelerated storage
        tests.

    water_activity:
        Multiplicative risk heuristic combining water activity with pH,
        temperature, preservatives, packaging and product type.

Interpretation Guardrails:
    Kinetic predictions are extrapolations from accelerated tests and the
    water-activity estimate is a screening heuristic. Neither replaces a
    real-time storage trial.
"""

from .kinetics import (
    ArrheniusResult,
    CurvePoint,
    KineticTestPoint,
    Q10Result,
    arrhenius_predict,
    q10_predict,
)
from .water_activity import (
    AwCategory,
    Packaging,
    ProductType,
    RiskLevel,
    WaterActivityAssessment,
    assess_water_activity,
)

__all__ = [
    "ArrheniusResult",
    "CurvePoint",
    "KineticTestPoint",
    "Q10Result",
    "arrhenius_predict",
    "q10_predict",
    "AwCategory",
    "Packaging",
    "ProductType",
    "RiskLevel",
    "WaterActivityAssessment",
    "assess_water_activity",
]
