"""Shared test fixtures."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from nbez.bezier import NBez


@pytest.fixture
def rng():
    return np.random.default_rng(20240611)


@pytest.fixture
def quadratic_points():
    return np.array([[0.0, 0.0], [1.0, 2.0], [2.0, 0.0]])


@pytest.fixture
def cubic_points():
    return np.array([[0.0, 0.0], [1.0, 3.0], [3.0, 3.0], [4.0, 0.0]])


@pytest.fixture
def cubic_curve(cubic_points):
    return NBez(cubic_points)


@pytest.fixture
def random_curve(rng):
    """Factory for random curves of a given order and dimension."""

    def make(order, dimension=2, dtype=np.float64):
        return NBez(rng.uniform(-10.0, 10.0, size=(order + 1, dimension)), dtype=dtype)

    return make
