"""Abstract base classes for numapprox components."""

from abc import ABC, abstractmethod
from typing import Union

import numpy as np

from numapprox.core.typedefs import ArrayTypes


class InterpolationMethod(ABC):
    """Abstract base class for one-dimensional interpolation methods.

    An interpolation method is built from sampling points (x_i, y_i)
    and can then be evaluated anywhere. Implementations are
    interchangeable for callers that only need init/evaluate.
    """

    @abstractmethod
    def init_uniform(self, lower: float, upper: float, n: int, y: ArrayTypes) -> None:
        """Initialize with n+1 equally spaced sampling points on [lower, upper].
        Args:
            lower: Left end of the interval
            upper: Right end of the interval
            n: Number of subintervals
            y: The n+1 sample values
        """
        pass

    @abstractmethod
    def init(self, x: ArrayTypes, y: ArrayTypes) -> None:
        """Initialize with arbitrary sampling points.
        Args:
            x: Sampling points (abscissas)
            y: Sample values (ordinates), same length as x
        """
        pass

    @abstractmethod
    def evaluate(self, z: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Evaluate the interpolant.
        Args:
            z: Point or array of points
        Returns:
            Interpolated value(s)
        """
        pass

    def __call__(self, z: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        return self.evaluate(z)
