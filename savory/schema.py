"""Define standardized column names for result DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResultColumns:
    """Container for standardized column labels.

    These column names are used by every table built in ``savory.reporting``
    so that downstream exporters see the same headers for every attribute and
    every experiment.

    Attributes:
        source: Row label of an ANOVA table (Between Groups, Within Groups,
            Total).
        ss: Sum of squares for the row's source of variation.
        df: Degrees of freedom for the row's source of variation.
        ms: Mean square, ``ss / df``. Undefined for the Total row.
        f: F statistic ``MSB / MSW``. Only the Between Groups row carries it.
        p_value: Approximate upper-tail probability of ``f``.

        sample: Sample (formulation) name.
        n: Number of observations in the sample.
        mean: Arithmetic mean of the sample.
        group: Duncan letter label; samples sharing a letter are not
            significantly different.

        attribute: Sensory attribute name (for example "Taste").
        verdict: Whether the attribute shows a significant difference at the
            chosen significance level.
    """

    source: str = "Source"
    ss: str = "SS"
    df: str = "df"
    ms: str = "MS"
    f: str = "F"
    p_value: str = "p-value"

    sample: str = "Sample"
    n: str = "n"
    mean: str = "Mean"
    sum: str = "Sum"
    variance: str = "Variance"
    sd: str = "SD"
    se: str = "SE"
    min: str = "Min"
    max: str = "Max"
    range: str = "Range"
    median: str = "Median"
    group: str = "Group"

    attribute: str = "Attribute"
    verdict: str = "Result"


COLUMNS = ResultColumns()
