"""
Sensory panel analysis.

A panel scores several samples (formulations) on several attributes, for
example on a 9-point hedonic scale. For every attribute this module:

- keeps the samples that received at least two scores,
- summarizes each sample (mean, SD, SE, ...),
- runs a one-way ANOVA across the samples, and
- when the ANOVA is significant, groups the samples with Duncan's multiple
  range test.

Attributes with fewer than two usable samples are skipped and logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence, Tuple, Union

from .errors import InsufficientData, InvalidConfigurationError
from .stats.anova import DEFAULT_ALPHA, ANOVAResult, one_way_anova, validate_alpha
from .stats.descriptive import BasicStats, Sample, describe
from .stats.duncan import DuncanGroupRow, duncan_test

logger = logging.getLogger(__name__)

MAX_PANEL_SAMPLES = 10


@dataclass(frozen=True)
class PanelAttribute:
    id: str
    name: str


DEFAULT_ATTRIBUTES: Tuple[PanelAttribute, ...] = (
    PanelAttribute("color", "Color"),
    PanelAttribute("odor", "Odor"),
    PanelAttribute("taste", "Taste"),
    PanelAttribute("texture", "Texture"),
    PanelAttribute("overall", "Overall Liking"),
)


@dataclass(frozen=True)
class SampleAnalysis:
    """ANOVA and, when significant, Duncan grouping for one set of samples."""

    basic_stats: Tuple[Tuple[str, BasicStats], ...]
    anova: ANOVAResult
    duncan: Optional[Tuple[DuncanGroupRow, ...]]

    @property
    def sample_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.basic_stats)


@dataclass(frozen=True)
class AttributeAnalysis:
    attribute: PanelAttribute
    result: SampleAnalysis

    @property
    def anova(self) -> ANOVAResult:
        return self.result.anova

    @property
    def duncan(self) -> Optional[Tuple[DuncanGroupRow, ...]]:
        return self.result.duncan


def analyze_samples(
    samples: Sequence[Sample], alpha: float = DEFAULT_ALPHA
) -> Union[SampleAnalysis, InsufficientData]:
    """Summarize, compare and (if significant) group samples for one attribute."""
    samples = list(samples)
    anova = one_way_anova(samples, alpha=alpha)
    if isinstance(anova, InsufficientData):
        return anova

    duncan = None
    if anova.significant:
        duncan = duncan_test(samples, anova.msw, anova.df_within)

    return SampleAnalysis(
        basic_stats=tuple((s.name, describe(s.values)) for s in samples),
        anova=anova,
        duncan=duncan,
    )


def analyze_sensory_panel(
    scores: Mapping[str, Mapping[str, Sequence[float]]],
    attributes: Sequence[PanelAttribute] = DEFAULT_ATTRIBUTES,
    alpha: float = DEFAULT_ALPHA,
) -> Union[Dict[str, AttributeAnalysis], InsufficientData]:
    """Analyze every attribute of a sensory panel.

    Args:
        scores: Mapping ``sample name -> attribute id -> scores``. Sample order
            is preserved in the results.
        attributes: Attributes to analyze. Defaults to color, odor, taste,
            texture and overall liking.
        alpha (float, optional): Significance level (0.01, 0.05 or 0.10).

    Returns:
        dict[str, AttributeAnalysis] | InsufficientData: Results keyed by
        attribute id for every attribute with at least two usable samples, or
        a marker when no attribute could be analyzed.

    Raises:
        InvalidConfigurationError: If ``alpha`` is not accepted, no attribute
            is selected, or more than ten samples are given.
    """
    alpha = validate_alpha(alpha)
    if not attributes:
        raise InvalidConfigurationError("Select at least one attribute to analyze.")
    if len(scores) > MAX_PANEL_SAMPLES:
        raise InvalidConfigurationError(
            f"A panel compares at most {MAX_PANEL_SAMPLES} samples, got {len(scores)}."
        )

    results: Dict[str, AttributeAnalysis] = {}
    for attribute in attributes:
        samples = []
        for sample_name, by_attribute in scores.items():
            values = list(by_attribute.get(attribute.id, ()))
            if len(values) < 2:
                logger.info(
                    "Skipping sample '%s' for attribute '%s': %d score(s)",
                    sample_name,
                    attribute.name,
                    len(values),
                )
                continue
            samples.append(Sample(sample_name, values))

        if len(samples) < 2:
            logger.warning(
                "Attribute '%s' has %d usable sample(s); at least 2 are required",
                attribute.name,
                len(samples),
            )
            continue

        analysis = analyze_samples(samples, alpha=alpha)
        if isinstance(analysis, InsufficientData):
            logger.warning("Attribute '%s' not analyzed: %s", attribute.name, analysis.reason)
            continue
        logger.debug(
            "Attribute '%s': F=%.4f p=%.4g significant=%s",
            attribute.name,
            analysis.anova.f,
            analysis.anova.p_value,
            analysis.anova.significant,
        )
        results[attribute.id] = AttributeAnalysis(attribute=attribute, result=analysis)

    if not results:
        return InsufficientData(
            "Enter at least 2 scores for at least 2 samples on one attribute."
        )
    return results
