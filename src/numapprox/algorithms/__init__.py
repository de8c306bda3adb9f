"""
Numerical algorithms of numapprox.

This module provides Newton polynomial interpolation with incremental
extension, a linear interpolation sibling sharing the same interface, and
a recursive radix-2 inverse discrete Fourier transform.
"""

from .newton_polynomial import NewtonPolynomial
from .linear_interpolation import LinearInterpolation
from .inverse_fft import ifft, ifft_array

__all__ = [
    "NewtonPolynomial",
    "LinearInterpolation",
    "ifft",
    "ifft_array"
]
