"""Custom exceptions for numapprox core functionality."""
import logging

logger = logging.getLogger(__name__)


class NumericalError(Exception):
    """Base exception for all input validation errors of the numerical core."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("NumericalError raised: %s", message)


class DimensionMismatchError(NumericalError):
    """Exception raised when abscissa and ordinate arrays differ in length."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("DimensionMismatchError raised: %s", message)


class DuplicateAbscissaError(NumericalError):
    """Exception raised when a sample set contains the same abscissa twice."""

    def __init__(self, message, value=None):
        self.value = value
        super().__init__(message)
        logger.error("DuplicateAbscissaError raised: %s", message)


class InvalidLengthError(NumericalError):
    """Exception raised when an input has a length the algorithm cannot handle."""

    def __init__(self, message, length=None):
        self.length = length
        super().__init__(message)
        logger.error("InvalidLengthError raised: %s", message)
