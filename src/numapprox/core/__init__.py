"""
Core data types and contracts for numapprox.

This module provides the complex value type used by the transform,
the interpolation method interface and the exception hierarchy.
"""

from .complex_value import Complex
from .exceptions import NumericalError, DimensionMismatchError, DuplicateAbscissaError, InvalidLengthError
from .interfaces import InterpolationMethod
from .typedefs import ArrayTypes, ComplexLike

__all__ = [
    "Complex",
    "InterpolationMethod",
    "NumericalError",
    "DimensionMismatchError",
    "DuplicateAbscissaError",
    "InvalidLengthError",
    "ArrayTypes",
    "ComplexLike"
]
