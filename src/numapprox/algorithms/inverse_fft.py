import logging
import math
from typing import List, Sequence

import numpy as np

from numapprox.core.complex_value import Complex
from numapprox.core.typedefs import ComplexLike
from numapprox.validation.array_validator import validate_transform_length

logger = logging.getLogger(__name__)


def ifft(c: Sequence[ComplexLike], normalize: bool = False, validate: bool = False) -> List[Complex]:
    """
    Recursive radix-2 inverse discrete Fourier transform.

    Computes v[j] = sum_k c[k] * exp(+2*pi*i*j*k/n). The result is not
    divided by n unless normalize is True, in which case it is the true
    inverse of the forward DFT.

    Args:
        c: Input sequence; its length must be a power of two
        normalize: Divide every output value by n
        validate: Raise InvalidLengthError for lengths that are not a power of two
    Returns:
        New list of Complex values with the same length as c
    Raises:
        InvalidLengthError: If validate is True and len(c) is not a power of two
    """
    if validate:
        validate_transform_length(c)
    values = [Complex.coerce(value) for value in c]
    n = len(values)
    logger.debug("Inverse FFT of length %d (normalize=%s)", n, normalize)
    if n == 0:
        return []
    result = _ifft_recursive(values)
    if normalize:
        result = [value.scale(1.0 / n) for value in result]
    return result


def _ifft_recursive(c: List[Complex]) -> List[Complex]:
    n = len(c)
    if n == 1:
        return [c[0]]
    half = n // 2
    z_even = _ifft_recursive(c[0::2])
    z_odd = _ifft_recursive(c[1::2])
    omega = Complex.from_polar(1.0, 2.0 * math.pi / n)
    v = [Complex()] * n
    # twiddle factor omega^j, advanced by one multiplication per step
    w = Complex(1.0, 0.0)
    for j in range(half):
        t = w.mul(z_odd[j])
        v[j] = z_even[j].add(t)
        v[j + half] = z_even[j].sub(t)
        w = w.mul(omega)
    return v


def ifft_array(values: Sequence[ComplexLike], normalize: bool = False, validate: bool = False) -> np.ndarray:
    """Run ifft and return the result as a complex128 numpy array."""
    return np.array([complex(value) for value in ifft(values, normalize=normalize, validate=validate)],
                    dtype=np.complex128)
