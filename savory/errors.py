"""Define the error taxonomy shared by every analysis in the package.

Validation problems are raised before any computation starts. Data that is
too sparse to analyze is not an exception: the analysis returns an explicit
``InsufficientData`` marker in place of its result so callers can tell an
empty analysis apart from a computed one.
"""

from __future__ import annotations

from dataclasses import dataclass


class InvalidConfigurationError(ValueError):
    """Raised when an input value or setting is outside its accepted domain.

    Examples are a significance level outside ``{0.01, 0.05, 0.10}``, a water
    activity outside ``[0, 1]`` or a non-positive Q10 coefficient.
    """


class ApproximationWarning(UserWarning):
    """Warn that a numerical approximation left its well-conditioned range.

    The value is still returned; it is a bounded approximation rather than a
    certified result.
    """


@dataclass(frozen=True)
class InsufficientData:
    """Marker returned instead of a result when there is too little data.

    Attributes:
        reason: Human-readable explanation naming what was missing, for
            example the group with fewer than two observations.
    """

    reason: str

    def __bool__(self) -> bool:
        return False
