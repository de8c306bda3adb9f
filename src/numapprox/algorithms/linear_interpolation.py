import logging
from typing import Optional, Union

import numpy as np

from numapprox.core.interfaces import InterpolationMethod
from numapprox.core.typedefs import ArrayTypes
from numapprox.data.constants import ErrorMessages
from numapprox.validation.array_validator import validate_sample_set, validate_uniform_grid

logger = logging.getLogger(__name__)


class LinearInterpolation(InterpolationMethod):
    """Piecewise linear interpolation with linear extension beyond the outer sampling points."""

    def __init__(self, x: Optional[ArrayTypes] = None, y: Optional[ArrayTypes] = None,
                 validate: bool = False):
        self.x: Optional[np.ndarray] = None
        self.y: Optional[np.ndarray] = None
        if x is not None and y is not None:
            self.init(x, y, validate=validate)

    def init_uniform(self, lower: float, upper: float, n: int, y: ArrayTypes,
                     validate: bool = False) -> None:
        if validate:
            validate_uniform_grid(n, y)
        with np.errstate(divide='ignore', invalid='ignore'):
            h = np.float64(upper - lower) / n
            x = lower + np.arange(n + 1) * h
        self.init(x, y, validate=validate)

    def init(self, x: ArrayTypes, y: ArrayTypes, validate: bool = False) -> None:
        """Store the samples sorted by abscissa."""
        if validate:
            validate_sample_set(x, y)
        x = np.array(x, dtype=float)
        y = np.array(y, dtype=float)
        order = np.argsort(x, kind="stable")
        self.x = x[order]
        self.y = y[order]
        logger.debug("Linear interpolation initialized with %d sampling points on [%s, %s]",
                     len(self.x), self.x[0] if len(self.x) else None, self.x[-1] if len(self.x) else None)

    def evaluate(self, z: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Interpolate inside [x[0], x[-1]] and extrapolate along the end segments outside."""
        if self.x is None or len(self.x) == 0:
            raise ValueError(ErrorMessages.NOT_INITIALIZED.format(cls_name=type(self).__name__))
        scalar = np.ndim(z) == 0
        z = np.asarray(z, dtype=float)
        x, y = self.x, self.y
        if len(x) == 1:
            logger.debug("Single-point sample set: returning constant value %.6f", y[0])
            result = np.full_like(z, y[0])
            return float(result) if scalar else result
        result = np.interp(z, x, y)
        with np.errstate(divide='ignore', invalid='ignore'):
            lower_slope = (y[1] - y[0]) / (x[1] - x[0])
            upper_slope = (y[-1] - y[-2]) / (x[-1] - x[-2])
            result = np.where(z < x[0], y[0] + lower_slope * (z - x[0]), result)
            result = np.where(z > x[-1], y[-1] + upper_slope * (z - x[-1]), result)
        return float(result) if scalar else result
