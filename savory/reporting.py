"""Arrange analysis results into tables for display and export collaborators.

Every function returns a new ``pandas.DataFrame`` built from immutable result
objects; nothing is written to disk here. Column labels come from
``savory.schema.COLUMNS`` so that every table uses the same headers.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .errors import InsufficientData
from .schema import COLUMNS
from .sensory import AttributeAnalysis
from .stats.anova import ANOVAResult
from .stats.descriptive import BasicStats
from .stats.duncan import DuncanGroupRow

SIGNIFICANT_LABEL = "Different*"
NOT_SIGNIFICANT_LABEL = "Not different"


def anova_table(result: ANOVAResult) -> pd.DataFrame:
    """Build the classic three-row ANOVA table.

    Args:
        result (ANOVAResult): Output of ``one_way_anova``.

    Returns:
        pandas.DataFrame: Rows ``Between Groups``, ``Within Groups`` and
        ``Total`` with SS, df, MS, F and p-value columns. Cells that are not
        defined for a row (MS of Total, F and p-value outside Between Groups)
        are NaN.
    """
    return pd.DataFrame(
        {
            COLUMNS.source: ["Between Groups", "Within Groups", "Total"],
            COLUMNS.ss: [result.ssb, result.ssw, result.sst],
            COLUMNS.df: [result.df_between, result.df_within, result.df_total],
            COLUMNS.ms: [result.msb, result.msw, np.nan],
            COLUMNS.f: [result.f, np.nan, np.nan],
            COLUMNS.p_value: [result.p_value, np.nan, np.nan],
        }
    )


def duncan_table(rows: Sequence[DuncanGroupRow]) -> pd.DataFrame:
    """Tabulate Duncan groups in descending order of mean."""
    return pd.DataFrame(
        [
            {
                COLUMNS.sample: row.name,
                COLUMNS.n: row.n,
                COLUMNS.mean: row.mean,
                COLUMNS.group: row.label,
            }
            for row in rows
        ],
        columns=[COLUMNS.sample, COLUMNS.n, COLUMNS.mean, COLUMNS.group],
    )


def descriptive_table(
    stats: Union[
        Mapping[str, Union[BasicStats, InsufficientData]],
        Iterable[Tuple[str, Union[BasicStats, InsufficientData]]],
    ],
) -> pd.DataFrame:
    """Tabulate descriptive statistics per sample.

    Samples marked ``InsufficientData`` are left out; undefined spread
    statistics (single observations) appear as NaN.
    """
    items = stats.items() if isinstance(stats, Mapping) else stats
    columns = [
        COLUMNS.sample,
        COLUMNS.n,
        COLUMNS.sum,
        COLUMNS.mean,
        COLUMNS.median,
        COLUMNS.variance,
        COLUMNS.sd,
        COLUMNS.se,
        COLUMNS.min,
        COLUMNS.max,
        COLUMNS.range,
    ]
    rows = []
    for name, s in items:
        if isinstance(s, InsufficientData):
            continue
        rows.append(
            {
                COLUMNS.sample: name,
                COLUMNS.n: s.n,
                COLUMNS.sum: s.sum,
                COLUMNS.mean: s.mean,
                COLUMNS.median: s.median,
                COLUMNS.variance: np.nan if s.variance is None else s.variance,
                COLUMNS.sd: np.nan if s.sd is None else s.sd,
                COLUMNS.se: np.nan if s.se is None else s.se,
                COLUMNS.min: s.min,
                COLUMNS.max: s.max,
                COLUMNS.range: s.range,
            }
        )
    return pd.DataFrame(rows, columns=columns)


def panel_summary_table(
    analyses: Mapping[str, AttributeAnalysis], decimals: int = 2
) -> pd.DataFrame:
    """Summarize a sensory panel as one row per attribute.

    Each sample column holds ``"mean ± sd"``; the F, p-value and verdict
    columns come from the attribute's ANOVA. Samples missing for an attribute
    are left empty.
    """
    sample_names = []
    for analysis in analyses.values():
        for name in analysis.result.sample_names:
            if name not in sample_names:
                sample_names.append(name)

    rows = []
    for analysis in analyses.values():
        row = {COLUMNS.attribute: analysis.attribute.name}
        by_name = dict(analysis.result.basic_stats)
        for name in sample_names:
            s = by_name.get(name)
            row[name] = f"{s.mean:.{decimals}f} ± {s.sd:.{decimals}f}" if s else ""
        row[COLUMNS.f] = analysis.anova.f
        row[COLUMNS.p_value] = analysis.anova.p_value
        row[COLUMNS.verdict] = (
            SIGNIFICANT_LABEL if analysis.anova.significant else NOT_SIGNIFICANT_LABEL
        )
        rows.append(row)

    return pd.DataFrame(
        rows,
        columns=[COLUMNS.attribute, *sample_names, COLUMNS.f, COLUMNS.p_value, COLUMNS.verdict],
    )
