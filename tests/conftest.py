"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyslr.regression import Observation


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def perfect_line_observations():
    """Four points on y = 1 + 2x."""
    return [Observation(float(v), float(2 * v + 1)) for v in range(1, 5)]


@pytest.fixture
def through_origin_observations():
    """Four points on y = 2x."""
    return [Observation(float(v), float(2 * v)) for v in range(1, 5)]


@pytest.fixture
def price_demand_data():
    """Eleven noisy points with a strong negative trend."""
    x = np.array([4, 4, 5, 5, 7, 7, 8, 9, 10, 11, 12], dtype=np.float64)
    y = np.array(
        [6300, 5800, 5700, 4500, 4500, 4200, 4100, 3100, 2100, 2500, 2200],
        dtype=np.float64,
    )
    return x, y


@pytest.fixture
def noisy_data(rng):
    """Random linear data with noise."""
    n = 200
    x = rng.standard_normal(n) * 3.0 + 10.0
    y = 4.0 - 1.5 * x + rng.standard_normal(n) * 0.8
    return x, y
