import math

import numpy as np
import pytest

from savory.errors import InsufficientData, InvalidConfigurationError
from savory.stats.descriptive import Sample, describe, summarize_groups


def test_describe_known_values():
    stats = describe([2, 4, 4, 4, 5, 5, 7, 9])
    assert stats.n == 8
    assert stats.sum == 40
    assert stats.mean == 5
    assert math.isclose(stats.variance, 32 / 7)
    assert math.isclose(stats.sd, math.sqrt(32 / 7))
    assert math.isclose(stats.se, math.sqrt(32 / 7) / math.sqrt(8))
    assert stats.median == 4.5
    assert (stats.min, stats.max, stats.range) == (2, 9, 7)


def test_variance_matches_bessel_definition():
    values = np.random.default_rng(7).normal(6.5, 1.2, size=23)
    stats = describe(values)
    mean = values.sum() / len(values)
    expected = np.sum((values - mean) ** 2) / (len(values) - 1)
    assert np.isclose(stats.variance, expected, rtol=1e-12)


def test_constant_sequence_has_zero_spread():
    stats = describe([6, 6, 6, 6])
    assert stats.sd == 0
    assert stats.se == 0
    assert stats.range == 0


def test_odd_length_median_uses_middle_value():
    assert describe([9, 1, 5]).median == 5


def test_single_value_has_no_spread():
    stats = describe([7.5])
    assert stats.mean == 7.5
    assert stats.median == 7.5
    assert stats.variance is None and stats.sd is None and stats.se is None
    assert not stats.has_spread


def test_empty_sequence_is_insufficient():
    result = describe([])
    assert isinstance(result, InsufficientData)
    assert not result


def test_non_finite_values_rejected():
    with pytest.raises(InvalidConfigurationError, match="finite"):
        describe([1.0, math.nan])


def test_sample_preserves_order_and_coerces_to_float():
    sample = Sample("Formula A", [7, 8, 6])
    assert sample.values == (7.0, 8.0, 6.0)
    assert sample.n == 3


def test_summarize_groups_flags_small_samples():
    summary = summarize_groups([Sample("A", [7, 8, 6]), Sample("B", [5])])
    assert summary["A"].mean == 7
    assert isinstance(summary["B"], InsufficientData)
    assert "'B'" in summary["B"].reason
