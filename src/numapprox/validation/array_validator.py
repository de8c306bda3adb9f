"""Opt-in input validation for sample sets and transform inputs."""

import logging
from typing import Sequence

import numpy as np

from numapprox.core.exceptions import DimensionMismatchError, DuplicateAbscissaError, InvalidLengthError
from numapprox.data.constants import ErrorMessages, NumericalConstants

logger = logging.getLogger(__name__)


def is_power_of_two(length: int) -> bool:
    """Check whether length is a positive power of two."""
    return length > 0 and (length & (length - 1)) == 0


def validate_sample_set(x: np.ndarray, y: np.ndarray) -> None:
    """
    Check that a sample set is usable for interpolation.

    Args:
        x: Sampling points
        y: Sample values
    Raises:
        InvalidLengthError: If the sample set is empty
        DimensionMismatchError: If x and y differ in length
        DuplicateAbscissaError: If two sampling points are exactly equal
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    logger.debug("Validating sample set with %d abscissas and %d ordinates", len(x), len(y))
    if len(x) != len(y):
        raise DimensionMismatchError(ErrorMessages.DIMENSION_MISMATCH.format(
            x_name="x", x_len=len(x), y_name="y", y_len=len(y)))
    if len(x) < NumericalConstants.MIN_SAMPLE_POINTS:
        raise InvalidLengthError(ErrorMessages.EMPTY_SAMPLE_SET, length=len(x))
    validate_distinct_abscissas(x)
    logger.debug("Sample set is valid")


def validate_distinct_abscissas(x: np.ndarray) -> None:
    """Raise DuplicateAbscissaError for the first pair of equal entries in x."""
    x = np.asarray(x, dtype=float)
    if len(x) < 2:
        return
    order = np.argsort(x, kind="stable")
    sorted_x = x[order]
    equal = np.flatnonzero(sorted_x[1:] == sorted_x[:-1])
    if equal.size:
        i = equal[0]
        first, second = sorted(int(idx) for idx in (order[i], order[i + 1]))
        raise DuplicateAbscissaError(ErrorMessages.DUPLICATE_ABSCISSA.format(
            value=float(x[first]), first=first, second=second), value=float(x[first]))


def validate_uniform_grid(n: int, y: np.ndarray) -> None:
    """
    Check the arguments of an equally spaced initialization.

    Args:
        n: Number of subintervals
        y: Sample values, expected to hold n+1 entries
    Raises:
        InvalidLengthError: If n is smaller than one
        DimensionMismatchError: If y does not hold n+1 entries
    """
    if n < NumericalConstants.MIN_UNIFORM_INTERVALS:
        raise InvalidLengthError(ErrorMessages.INVALID_INTERVAL_COUNT.format(
            min_count=NumericalConstants.MIN_UNIFORM_INTERVALS, count=n), length=n)
    if len(y) != n + 1:
        raise DimensionMismatchError(ErrorMessages.DIMENSION_MISMATCH.format(
            x_name="n+1", x_len=n + 1, y_name="y", y_len=len(y)))


def validate_transform_length(values: Sequence) -> None:
    """Raise InvalidLengthError unless len(values) is a power of two."""
    length = len(values)
    if not is_power_of_two(length):
        raise InvalidLengthError(ErrorMessages.NOT_POWER_OF_TWO.format(length=length), length=length)
    logger.debug("Transform length %d is a power of two", length)
