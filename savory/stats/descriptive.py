"""Descriptive statistics for a single sequence of panel scores or readings.

The reduction follows the conventions used throughout sensory and shelf-life
reporting: the variance is the Bessel-corrected sample variance, the standard
error is ``sd / sqrt(n)`` and the median is taken from a sorted copy of the
data. A single observation has a mean but no spread, and an empty sequence
has no statistics at all.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from savory.errors import InsufficientData, InvalidConfigurationError


@dataclass(frozen=True)
class Sample:
    """A named group of observations, for example one formulation's scores.

    ``values`` keeps the insertion order for display; it does not affect any
    statistic.
    """

    name: str
    values: Tuple[float, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))

    @property
    def n(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class BasicStats:
    """Summary of one numeric sequence.

    ``variance``, ``sd`` and ``se`` are ``None`` when ``n == 1`` because the
    sample variance needs at least two observations.
    """

    n: int
    sum: float
    mean: float
    variance: Optional[float]
    sd: Optional[float]
    se: Optional[float]
    min: float
    max: float
    range: float
    median: float

    @property
    def has_spread(self) -> bool:
        return self.variance is not None


def as_finite_array(values: Iterable[float], label: str = "values") -> np.ndarray:
    """Convert ``values`` to a float array, rejecting NaN and infinities.

    Args:
        values (Iterable[float]): Already-parsed numeric observations.
        label (str, optional): Name used in the error message.

    Returns:
        numpy.ndarray: One-dimensional float array.

    Raises:
        InvalidConfigurationError: If any value is not a finite real number.
    """
    arr = np.asarray(list(values), dtype=float)
    if arr.ndim != 1:
        raise InvalidConfigurationError(f"{label} must be a flat sequence of numbers.")
    if not np.all(np.isfinite(arr)):
        raise InvalidConfigurationError(f"{label} must contain only finite numbers.")
    return arr


def describe(values: Sequence[float]) -> Union[BasicStats, InsufficientData]:
    """Reduce a numeric sequence to its descriptive statistics.

    Args:
        values (Sequence[float]): Observations in any order.

    Returns:
        BasicStats | InsufficientData: Statistics for ``n >= 1``; an
        ``InsufficientData`` marker for an empty sequence.

    Raises:
        InvalidConfigurationError: If a value is NaN or infinite.

    Note:
        ``variance = sum((x - mean)^2) / (n - 1)``, ``sd = sqrt(variance)``,
        ``se = sd / sqrt(n)``. For ``n == 1`` these three are left undefined
        (``None``) instead of dividing by zero.
    """
    arr = as_finite_array(values)
    n = int(arr.size)
    if n == 0:
        return InsufficientData("No observations to summarize.")

    total = float(np.sum(arr))
    mean = total / n

    variance = sd = se = None
    if n >= 2:
        variance = float(np.sum((arr - mean) ** 2)) / (n - 1)
        sd = math.sqrt(variance)
        se = sd / math.sqrt(n)

    ordered = np.sort(arr)
    mid = n // 2
    if n % 2 == 0:
        median = (float(ordered[mid - 1]) + float(ordered[mid])) / 2.0
    else:
        median = float(ordered[mid])

    lo = float(ordered[0])
    hi = float(ordered[-1])

    return BasicStats(
        n=n,
        sum=total,
        mean=mean,
        variance=variance,
        sd=sd,
        se=se,
        min=lo,
        max=hi,
        range=hi - lo,
        median=median,
    )


def summarize_groups(
    samples: Iterable[Sample],
) -> Dict[str, Union[BasicStats, InsufficientData]]:
    """Describe several samples side by side, keyed by sample name.

    Samples with fewer than two observations are reported as
    ``InsufficientData`` because they cannot be compared on spread.
    """
    summary: Dict[str, Union[BasicStats, InsufficientData]] = {}
    for sample in samples:
        if sample.n < 2:
            summary[sample.name] = InsufficientData(
                f"Sample '{sample.name}' has {sample.n} value(s); at least 2 are required."
            )
            continue
        summary[sample.name] = describe(sample.values)
    return summary
