"""Pytest configuration for repository-relative imports."""

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def scipy_stats():
    """Reference distributions; tests using it are skipped without scipy."""
    return pytest.importorskip("scipy.stats")


@pytest.fixture
def scipy_special():
    return pytest.importorskip("scipy.special")
