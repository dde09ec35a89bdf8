"""Duncan-style multiple range test with letter grouping.

After a significant ANOVA, sample means are ranked and compared pairwise.
Two means are considered "not significantly different" when their distance
is below ``q(p) · SE``, where ``p`` is the number of ranked means spanned by
the pair and ``SE = sqrt(MSW / n_h)`` uses the harmonic mean of the sample
sizes.

Critical values come from a fixed table approximating Duncan's significant
studentized ranges at alpha = 0.05; spans wider than the table reuse its last
entry. Letters are then handed out greedily in rank order: a sample inherits
the first letter of every higher-ranked sample it is compatible with, and
receives a fresh letter when it is compatible with none. This is a pairwise
heuristic, not the stepwise textbook procedure, and with overlapping
compatibilities a sample may carry several letters.
"""

from __future__ import annotations

import math
import string
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple, Union

from savory.errors import InsufficientData, InvalidConfigurationError
from savory.stats.anova import check_samples
from savory.stats.descriptive import Sample, as_finite_array

DUNCAN_Q_TABLE: Mapping[int, float] = MappingProxyType(
    {
        2: 2.77,
        3: 2.92,
        4: 3.02,
        5: 3.09,
        6: 3.15,
        7: 3.19,
        8: 3.23,
        9: 3.26,
        10: 3.29,
    }
)
MAX_TABLE_SPAN = max(DUNCAN_Q_TABLE)
LETTERS = string.ascii_lowercase


@dataclass(frozen=True)
class DuncanGroupRow:
    name: str
    n: int
    mean: float
    letters: Tuple[str, ...]
    se: float

    @property
    def label(self) -> str:
        return "".join(self.letters)


def duncan_q(span: int) -> float:
    """Return the tabulated critical range for ``span`` ranked means.

    Args:
        span (int): Number of means covered by the comparison, ``j - i + 1``.

    Returns:
        float: Critical multiplier of the standard error. Spans beyond the
        table are capped at the widest tabulated span.

    Raises:
        ValueError: If ``span`` is smaller than 2.
    """
    if span < 2:
        raise ValueError("A range comparison spans at least 2 means.")
    return DUNCAN_Q_TABLE[min(span, MAX_TABLE_SPAN)]


def _not_different(mean_i: float, mean_j: float, span: int, se: float) -> bool:
    """Return True if two means lie within the critical range of each other.

    Identical means are always compatible, including when ``se`` is zero.
    """
    diff = abs(mean_i - mean_j)
    return diff < duncan_q(span) * se or diff == 0.0


def assign_letters(means: Sequence[float], se: float) -> List[Tuple[str, ...]]:
    """Assign group letters to means already sorted in descending order."""
    letters: List[Tuple[str, ...]] = []
    next_letter = 0
    for i, mean_i in enumerate(means):
        current: List[str] = []
        for j in range(i):
            span = i - j + 1
            if _not_different(means[j], mean_i, span, se):
                inherited = letters[j][0]
                if inherited not in current:
                    current.append(inherited)
        if not current:
            current.append(LETTERS[next_letter])
            next_letter += 1
        letters.append(tuple(current))
    return letters


def duncan_test(
    samples: Sequence[Sample], msw: float, df_within: int
) -> Union[Tuple[DuncanGroupRow, ...], InsufficientData]:
    """Rank samples and group those whose means are not distinguishable.

    Args:
        samples (Sequence[Sample]): The samples passed to the ANOVA.
        msw (float): Within-groups mean square from the ANOVA.
        df_within (int): Within-groups degrees of freedom from the ANOVA.

    Returns:
        tuple[DuncanGroupRow, ...] | InsufficientData: One row per sample in
        descending order of mean (ties keep input order), or a marker when a
        sample has fewer than two values.

    Raises:
        InvalidConfigurationError: If ``msw`` is negative or not finite,
            ``df_within`` is not positive, or there are more samples than
            available letters.

    Note:
        Run this only after ``one_way_anova`` reports a significant result;
        ``df_within`` is accepted for the caller's bookkeeping because the
        fixed critical-value table does not vary with it.
    """
    samples = list(samples)
    if not math.isfinite(msw) or msw < 0:
        raise InvalidConfigurationError("MSW must be a finite, non-negative number.")
    if df_within <= 0:
        raise InvalidConfigurationError("Within-groups degrees of freedom must be positive.")
    if len(samples) > len(LETTERS):
        raise InvalidConfigurationError(
            f"At most {len(LETTERS)} samples can be letter-grouped, got {len(samples)}."
        )
    problem = check_samples(samples)
    if problem is not None:
        return problem

    stats = []
    for s in samples:
        arr = as_finite_array(s.values, label=f"Sample '{s.name}'")
        stats.append((s.name, int(arr.size), float(arr.sum()) / arr.size))
    stats.sort(key=lambda row: row[2], reverse=True)

    k = len(stats)
    n_harmonic = k / sum(1.0 / n for _, n, _ in stats)
    se = math.sqrt(msw / n_harmonic)

    letters = assign_letters([mean for _, _, mean in stats], se)
    return tuple(
        DuncanGroupRow(name=name, n=n, mean=mean, letters=group, se=se)
        for (name, n, mean), group in zip(stats, letters)
    )
