"""Shared pytest fixtures for numapprox tests."""
import matplotlib
matplotlib.use('Agg')

import numpy as np
import pytest

from numapprox.algorithms.newton_polynomial import NewtonPolynomial


@pytest.fixture
def two_point_samples():
    """Two samples of a constant function."""
    return np.array([1.0, 3.0]), np.array([-2.0, -2.0])


@pytest.fixture
def cubic_samples():
    """Five samples of p(x) = x^3 - 2x + 1."""
    x = np.array([-2.0, -0.5, 0.0, 1.0, 2.5])
    return x, x ** 3 - 2 * x + 1


@pytest.fixture
def sine_samples():
    """Nine equally spaced samples of sin on [0, pi]."""
    x = np.linspace(0.0, np.pi, 9)
    return x, np.sin(x)


@pytest.fixture
def newton_cubic(cubic_samples):
    """Newton polynomial through the cubic samples."""
    x, y = cubic_samples
    return NewtonPolynomial(x, y)


@pytest.fixture
def complex_sequence_8():
    """Deterministic complex sequence of length 8."""
    rng = np.random.default_rng(13579)
    return rng.normal(size=8) + 1j * rng.normal(size=8)
