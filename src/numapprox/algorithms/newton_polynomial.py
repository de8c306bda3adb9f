import logging
from typing import Optional, Union

import numpy as np
import sympy as sp

from numapprox.core.interfaces import InterpolationMethod
from numapprox.core.typedefs import ArrayTypes
from numapprox.data.constants import ErrorMessages
from numapprox.validation.array_validator import (
    validate_distinct_abscissas,
    validate_sample_set,
    validate_uniform_grid
)

logger = logging.getLogger(__name__)


def _read_only(arr: np.ndarray) -> np.ndarray:
    view = arr.view()
    view.flags.writeable = False
    return view


class NewtonPolynomial(InterpolationMethod):
    """
    Newton form of the interpolating polynomial.

    p(z) = a[0] + a[1](z - x[0]) + a[2](z - x[0])(z - x[1]) + ...

    Besides the coefficients a (the leading entries of the divided-difference
    scheme) the interpolator keeps the trailing diagonal f of the scheme,
    f[k] = [x_k, ..., x_n], so that a new sampling point can be appended in
    O(n) without rebuilding the scheme.

    By default inputs are not checked: duplicate abscissas yield inf/nan
    coefficients. Pass validate=True to get DimensionMismatchError,
    DuplicateAbscissaError or InvalidLengthError instead.
    """

    def __init__(self, x: Optional[ArrayTypes] = None, y: Optional[ArrayTypes] = None,
                 validate: bool = False):
        self.x: Optional[np.ndarray] = None
        self.y: Optional[np.ndarray] = None
        self.a: Optional[np.ndarray] = None
        self.f: Optional[np.ndarray] = None
        if x is not None and y is not None:
            self.init(x, y, validate=validate)

    # --- Initialization ---
    def init_uniform(self, lower: float, upper: float, n: int, y: ArrayTypes,
                     validate: bool = False) -> None:
        """
        Initialize with n+1 equally spaced sampling points lower + i*(upper-lower)/n.
        Args:
            lower: Left end of the interval
            upper: Right end of the interval
            n: Number of subintervals
            y: The n+1 sample values
            validate: Raise on malformed input instead of computing with it
        """
        logger.debug("Initializing Newton polynomial on [%s, %s] with n=%d", lower, upper, n)
        if validate:
            validate_uniform_grid(n, y)
        with np.errstate(divide='ignore', invalid='ignore'):
            h = np.float64(upper - lower) / n
            x = lower + np.arange(n + 1) * h
        if validate:
            validate_distinct_abscissas(x)
        self.x = x
        self._compute_coefficients(y)

    def init(self, x: ArrayTypes, y: ArrayTypes, validate: bool = False) -> None:
        """
        Initialize with arbitrary sampling points. x is copied.
        Args:
            x: Sampling points
            y: Sample values
            validate: Raise on malformed input instead of computing with it
        """
        logger.debug("Initializing Newton polynomial with %d sampling points", len(x))
        if validate:
            validate_sample_set(x, y)
        self.x = np.array(x, dtype=float)
        self._compute_coefficients(y)

    def _compute_coefficients(self, y: ArrayTypes) -> None:
        """
        Fill a and f from the divided-difference scheme of (x, y).

        The scheme is computed column by column in one flat buffer of
        length (n+1)^2; entry (row i, column k) lives at k*(n+1) + i.
        Column k holds [x_i, ..., x_{i+k}] for i = 0..n-k. Its first entry
        is a[k] and its last entry is f[n-k].
        """
        y = np.array(y, dtype=float)
        length = len(y)
        self.y = y
        self.a = np.zeros(length)
        self.f = np.zeros(length)
        if length == 0:
            logger.warning("Empty sample set, no coefficients computed")
            return
        scheme = np.zeros(length * length)
        scheme[:length] = y
        self.a[0] = scheme[0]
        self.f[length - 1] = scheme[length - 1]
        x = self.x
        with np.errstate(divide='ignore', invalid='ignore'):
            for k in range(1, length):
                prev = scheme[(k - 1) * length:(k - 1) * length + length - k + 1]
                col = (prev[1:] - prev[:-1]) / (x[k:length] - x[:length - k])
                scheme[k * length:k * length + length - k] = col
                self.a[k] = col[0]
                self.f[length - 1 - k] = col[-1]
        if not np.all(np.isfinite(self.a)):
            logger.warning("Non-finite Newton coefficients, sampling points are probably not distinct")
        logger.debug("Computed %d Newton coefficients", length)

    # --- Accessors ---
    def get_coefficients(self) -> np.ndarray:
        """Coefficients a of the Newton polynomial (read-only)."""
        return _read_only(self.a)

    def get_divided_differences(self) -> np.ndarray:
        """Diagonal f of the divided-difference scheme, f[k] = [x_k...x_n] (read-only)."""
        return _read_only(self.f)

    def get_sampling_points(self) -> np.ndarray:
        return _read_only(self.x)

    def get_sampling_values(self) -> np.ndarray:
        return _read_only(self.y)

    @property
    def degree(self) -> int:
        """Upper bound of the polynomial degree, number of sampling points minus one."""
        if self.a is None:
            return -1
        return len(self.a) - 1

    # --- Extension ---
    def add_sampling_point(self, x_new: float, y_new: float) -> None:
        """
        Append the sampling point (x_new, y_new) and update a and f in O(n).

        The new point becomes the bottom row of the divided-difference scheme.
        The new diagonal follows from the old one:
        [x_{i-1}..x_new] = ([x_i..x_new] - [x_{i-1}..x_n]) / (x_new - x_{i-1}).
        An x_new that is already a sampling point is ignored.
        """
        if self.x is None or len(self.x) == 0:
            logger.debug("Empty interpolator, initializing with (%s, %s)", x_new, y_new)
            self.init([x_new], [y_new])
            return
        if np.any(self.x == x_new):
            logger.debug("Sampling point x=%s already present, ignoring", x_new)
            return
        self.x = np.append(self.x, float(x_new))
        self.y = np.append(self.y, float(y_new))
        last = len(self.x) - 1
        f_tmp = np.zeros(last + 1)
        f_tmp[last] = y_new
        with np.errstate(divide='ignore', invalid='ignore'):
            for i in range(last, 0, -1):
                f_tmp[i - 1] = (f_tmp[i] - self.f[i - 1]) / (self.x[last] - self.x[i - 1])
        self.f = f_tmp
        self.a = np.append(self.a, f_tmp[0])
        logger.debug("Added sampling point (%s, %s), degree is now %d", x_new, y_new, self.degree)

    # --- Evaluation ---
    def evaluate(self, z: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """
        Evaluate p(z).

        The product (z - x[0])...(z - x[i-1]) is carried from one term to
        the next, so a single point costs O(n). Arrays are evaluated
        element-wise.
        """
        if self.a is None or len(self.a) == 0:
            raise ValueError(ErrorMessages.NOT_INITIALIZED.format(cls_name=type(self).__name__))
        scalar = np.ndim(z) == 0
        z = np.asarray(z, dtype=float)
        result = np.zeros_like(z)
        term = np.ones_like(z)
        with np.errstate(invalid='ignore', over='ignore'):
            for a_i, x_i in zip(self.a, self.x):
                result = result + a_i * term
                term = term * (z - x_i)
        return float(result) if scalar else result

    # --- Symbolic form ---
    def as_expr(self, symbol: Optional[sp.Symbol] = None) -> sp.Expr:
        """
        Newton form of the polynomial as a SymPy expression.
        Args:
            symbol: Variable of the polynomial (default: Symbol('x'))
        Returns:
            Unexpanded expression a0 + a1*(symbol - x0) + ...
        """
        if self.a is None:
            raise ValueError(ErrorMessages.NOT_INITIALIZED.format(cls_name=type(self).__name__))
        symbol = symbol if symbol is not None else sp.Symbol('x')
        terms = []
        basis = sp.Integer(1)
        for a_i, x_i in zip(self.a, self.x):
            terms.append(sp.Float(a_i) * basis)
            basis = basis * (symbol - sp.Float(x_i))
        return sp.Add(*terms)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(degree={self.degree})"
