"""Unit tests for the interpolation method interface."""

import numpy as np
import pytest

from numapprox.algorithms.linear_interpolation import LinearInterpolation
from numapprox.algorithms.newton_polynomial import NewtonPolynomial
from numapprox.core.interfaces import InterpolationMethod


class TestInterpolationMethod:
    """Test cases for InterpolationMethod."""
    def test_cannot_instantiate(self):
        """Test that the abstract base class cannot be instantiated."""
        with pytest.raises(TypeError):
            InterpolationMethod()

    @pytest.mark.parametrize("method_cls", [NewtonPolynomial, LinearInterpolation])
    def test_interchangeable_methods(self, method_cls):
        """Test that implementations are used through the common interface."""
        method = method_cls()
        assert isinstance(method, InterpolationMethod)
        method.init_uniform(0.0, 1.0, 2, [0.0, 0.5, 1.0])
        assert np.isclose(method.evaluate(0.25), 0.25)
        method.init([2.0, 4.0], [1.0, 3.0])
        assert np.isclose(method(3.0), 2.0)

    def test_minimal_subclass(self):
        """Test that a subclass implementing the abstract methods works with __call__."""
        class Constant(InterpolationMethod):
            def init_uniform(self, lower, upper, n, y):
                self.value = y[0]

            def init(self, x, y):
                self.value = y[0]

            def evaluate(self, z):
                return self.value

        method = Constant()
        method.init([0.0], [42.0])
        assert method(10.0) == 42.0
