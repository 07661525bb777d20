"""Shared fixtures for the test suite."""

import matplotlib

# ##>: Headless backend for window tests.
matplotlib.use('Agg')

import numpy as np  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture
def generator() -> np.random.Generator:
    """Seeded generator for reproducible random boards."""
    return np.random.default_rng(42)
