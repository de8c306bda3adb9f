"""
numapprox - A small toolkit for sampling-based numerical approximation.

This library provides Newton polynomial interpolation with incremental
extension of the sample set and a recursive radix-2 inverse discrete
Fourier transform over complex values.

Key Features:
- Newton interpolation via an in-place divided-difference scheme
- O(n) extension of an interpolant by one sampling point
- Interchangeable interpolation methods behind a common interface
- Recursive decimation-in-time inverse FFT for power-of-two lengths
- Opt-in input validation with descriptive errors
- Symbolic export of Newton polynomials with SymPy

Main Components:
- Core: Complex value type, interpolation interface and exceptions
- Algorithms: Newton and linear interpolation, inverse FFT
- Validation: Input checks for sample sets and transform lengths
- Visualization: Plotting of interpolants and complex sequences
- Utils: File archiving helper
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("numapprox")
except PackageNotFoundError:
    __version__ = "0.1.0+unknown"  # Fallback version

# Core types
from .core.complex_value import Complex
from .core.interfaces import InterpolationMethod
from .core.exceptions import (
    NumericalError,
    DimensionMismatchError,
    DuplicateAbscissaError,
    InvalidLengthError
)

# Algorithms
from .algorithms.newton_polynomial import NewtonPolynomial
from .algorithms.linear_interpolation import LinearInterpolation
from .algorithms.inverse_fft import ifft, ifft_array

__all__ = [
    # Version
    '__version__',

    # Core classes
    'Complex',
    'InterpolationMethod',

    # Exceptions
    'NumericalError',
    'DimensionMismatchError',
    'DuplicateAbscissaError',
    'InvalidLengthError',

    # Algorithms
    'NewtonPolynomial',
    'LinearInterpolation',
    'ifft',
    'ifft_array'
]
