"""
Statistical utilities for sensory and shelf-life analysis.

This subpackage provides the numerical routines behind the analyses. All
functions operate on sequences and primitive types; no food-specific logic is
included.

Modules:
    descriptive:
        Sample container and descriptive statistics (mean, Bessel-corrected
        variance, SD, SE, median, range).

    special:
        Lanczos Gamma function and the series approximation of the
        regularized incomplete Beta function used for F-test p-values.

    anova:
        One-way ANOVA with explicit handling of sparse and zero-variance data.

    duncan:
        Duncan-style multiple range test with greedy letter grouping.

    regression:
        Closed-form ordinary least-squares straight-line fit.

Design Principle:
    This subpackage has no dependencies on shelf_life/, sensory or reporting.
    It provides pure numerical utilities that can be independently tested.
"""

from .anova import ACCEPTED_ALPHAS, ANOVAResult, one_way_anova, validate_alpha
from .descriptive import BasicStats, Sample, describe, summarize_groups
from .duncan import DUNCAN_Q_TABLE, DuncanGroupRow, duncan_q, duncan_test
from .regression import linear_regression
from .special import f_test_p_value, gamma, log_gamma, regularized_incomplete_beta

__all__ = [
    "ACCEPTED_ALPHAS",
    "ANOVAResult",
    "one_way_anova",
    "validate_alpha",
    "BasicStats",
    "Sample",
    "describe",
    "summarize_groups",
    "DUNCAN_Q_TABLE",
    "DuncanGroupRow",
    "duncan_q",
    "duncan_test",
    "linear_regression",
    "f_test_p_value",
    "gamma",
    "log_gamma",
    "regularized_incomplete_beta",
]
