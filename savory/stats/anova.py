"""One-way analysis of variance across sensory samples.

The F statistic compares the spread of sample means around the grand mean
(between groups) with the spread of scores inside each sample (within
groups). Its p-value comes from the series approximation in
``savory.stats.special`` rather than from a statistics library.

Degenerate inputs follow fixed conventions instead of producing NaN:

- fewer than two samples, or a sample with fewer than two scores, returns an
  ``InsufficientData`` marker;
- zero within-group variance with distinct means gives ``F = inf`` and
  ``p = 0``;
- zero variance everywhere (every score identical) gives ``F = 0`` and
  ``p = 1``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from savory.errors import InsufficientData, InvalidConfigurationError
from savory.stats.descriptive import Sample, as_finite_array
from savory.stats.special import f_test_p_value

ACCEPTED_ALPHAS: Tuple[float, ...] = (0.01, 0.05, 0.10)
DEFAULT_ALPHA = 0.05


@dataclass(frozen=True)
class ANOVAResult:
    ssb: float
    ssw: float
    sst: float
    df_between: int
    df_within: int
    df_total: int
    msb: float
    msw: float
    f: float
    p_value: float
    significant: bool
    alpha: float
    n_groups: int
    n_total: int

    @property
    def eta_squared(self) -> float:
        """Share of the total sum of squares explained by the samples."""
        return self.ssb / self.sst if self.sst > 0 else 0.0


def validate_alpha(alpha: float) -> float:
    """Return ``alpha`` as one of the accepted significance levels.

    Raises:
        InvalidConfigurationError: If ``alpha`` is not 0.01, 0.05 or 0.10.
    """
    for accepted in ACCEPTED_ALPHAS:
        if math.isclose(float(alpha), accepted, rel_tol=1e-9, abs_tol=1e-12):
            return accepted
    raise InvalidConfigurationError(
        f"Significance level must be one of {ACCEPTED_ALPHAS}, got {alpha}."
    )


def check_samples(samples: Sequence[Sample]) -> Optional[InsufficientData]:
    """Return an ``InsufficientData`` marker if ``samples`` cannot be compared."""
    if len(samples) < 2:
        return InsufficientData(
            f"At least 2 samples are required for comparison, got {len(samples)}."
        )
    small = [s.name for s in samples if s.n < 2]
    if small:
        return InsufficientData(
            f"Samples with fewer than 2 values: {small}. "
            f"Each sample needs at least 2 observations."
        )
    return None


def one_way_anova(
    samples: Sequence[Sample], alpha: float = DEFAULT_ALPHA
) -> Union[ANOVAResult, InsufficientData]:
    """Perform a one-way ANOVA over ``samples``.

    Args:
        samples (Sequence[Sample]): Two or more samples, each with at least two
            finite observations.
        alpha (float, optional): Significance level, one of 0.01, 0.05 or
            0.10. Defaults to ``0.05``.

    Returns:
        ANOVAResult | InsufficientData: The ANOVA table values, or a marker
        explaining why the samples cannot be analyzed.

    Raises:
        InvalidConfigurationError: If ``alpha`` is not accepted or a value is
            not finite.
    """
    alpha = validate_alpha(alpha)
    samples = list(samples)
    problem = check_samples(samples)
    if problem is not None:
        return problem

    arrays = [as_finite_array(s.values, label=f"Sample '{s.name}'") for s in samples]
    k = len(arrays)
    n_total = int(sum(a.size for a in arrays))
    df_between = k - 1
    df_within = n_total - k
    df_total = n_total - 1
    if df_within <= 0:
        return InsufficientData("No within-group degrees of freedom remain.")

    grand_mean = float(np.sum(np.concatenate(arrays))) / n_total

    ssb = 0.0
    ssw = 0.0
    for arr in arrays:
        mean = float(np.sum(arr)) / arr.size
        ssb += arr.size * (mean - grand_mean) ** 2
        ssw += float(np.sum((arr - mean) ** 2))
    sst = ssb + ssw

    msb = ssb / df_between
    msw = ssw / df_within

    if msw == 0.0:
        if ssb == 0.0:
            f, p_value = 0.0, 1.0
        else:
            f, p_value = math.inf, 0.0
    else:
        f = msb / msw
        p_value = f_test_p_value(f, df_between, df_within)

    return ANOVAResult(
        ssb=ssb,
        ssw=ssw,
        sst=sst,
        df_between=df_between,
        df_within=df_within,
        df_total=df_total,
        msb=msb,
        msw=msw,
        f=f,
        p_value=p_value,
        significant=p_value < alpha,
        alpha=alpha,
        n_groups=k,
        n_total=n_total,
    )
