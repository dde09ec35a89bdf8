"""
A Python package for statistical analysis of food-science experiments.

Tests sensory panel scores for differences between samples and predicts
product shelf life from accelerated storage tests and water activity.

Modules:
    - stats: Descriptive statistics, one-way ANOVA, Duncan's multiple range
      test and the numerical approximations behind them.
    - shelf_life: Q10 and Arrhenius extrapolation, water-activity risk model.
    - sensory: Multi-attribute sensory panel analysis.
    - reporting: pandas tables of analysis results.
"""

__version__ = "1.0.0"

from .errors import ApproximationWarning, InsufficientData, InvalidConfigurationError
from .sensory import (
    DEFAULT_ATTRIBUTES,
    AttributeAnalysis,
    PanelAttribute,
    SampleAnalysis,
    analyze_samples,
    analyze_sensory_panel,
)
from .shelf_life import (
    KineticTestPoint,
    Packaging,
    ProductType,
    RiskLevel,
    arrhenius_predict,
    assess_water_activity,
    q10_predict,
)
from .stats import (
    Sample,
    describe,
    duncan_test,
    f_test_p_value,
    one_way_anova,
    summarize_groups,
)

__all__ = [
    # Errors
    "ApproximationWarning",
    "InsufficientData",
    "InvalidConfigurationError",
    # Statistics
    "Sample",
    "describe",
    "summarize_groups",
    "one_way_anova",
    "f_test_p_value",
    "duncan_test",
    # Sensory panels
    "DEFAULT_ATTRIBUTES",
    "AttributeAnalysis",
    "PanelAttribute",
    "SampleAnalysis",
    "analyze_samples",
    "analyze_sensory_panel",
    # Shelf life
    "KineticTestPoint",
    "Packaging",
    "ProductType",
    "RiskLevel",
    "arrhenius_predict",
    "assess_water_activity",
    "q10_predict",
]
