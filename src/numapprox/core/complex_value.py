"""
complex_value.py

Immutable complex number used by the inverse Fourier transform.

Classes:
    Complex: A frozen dataclass holding the real and imaginary part of a complex number,
             with pure arithmetic (add, sub, mul, power) and a polar-form factory.

Type Aliases:
    ComplexLike: Values accepted wherever a Complex is expected (Complex, complex, int, float).
"""

import math
import numbers
from dataclasses import dataclass
from typing import Union

from numapprox.data.constants import NumericalConstants


@dataclass(frozen=True)
class Complex:
    """
    Represents a complex number re + i*im.

    All operations return new instances; a Complex is never mutated after construction.

    Attributes:
        re (float): The real part.
        im (float): The imaginary part.
    """
    re: float = 0.0
    im: float = 0.0

    @classmethod
    def from_polar(cls, magnitude: float, angle: float) -> "Complex":
        """Create magnitude * (cos(angle) + i*sin(angle))."""
        return cls(magnitude * math.cos(angle), magnitude * math.sin(angle))

    @classmethod
    def coerce(cls, value: "ComplexLike") -> "Complex":
        """Convert a Complex, builtin complex or real number into a Complex."""
        if isinstance(value, Complex):
            return value
        if isinstance(value, numbers.Complex):
            value = complex(value)
            return cls(value.real, value.imag)
        raise TypeError(f"Cannot convert {type(value).__name__} to Complex")

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.re + other.re, self.im + other.im)

    def sub(self, other: "Complex") -> "Complex":
        return Complex(self.re - other.re, self.im - other.im)

    def mul(self, other: "Complex") -> "Complex":
        return Complex(self.re * other.re - self.im * other.im,
                       self.re * other.im + self.im * other.re)

    def scale(self, factor: float) -> "Complex":
        """Multiply both parts by a real factor."""
        return Complex(self.re * factor, self.im * factor)

    def power(self, k: int) -> "Complex":
        """
        Raise to a non-negative integer power by repeated squaring.

        Args:
            k: The exponent, k >= 0
        Returns:
            self ** k, with power(0) == 1
        Raises:
            ValueError: If k is negative
        """
        if k < 0:
            raise ValueError(f"Exponent must be non-negative, got {k}")
        result = Complex(1.0, 0.0)
        base = self
        while k:
            if k & 1:
                result = result.mul(base)
            base = base.mul(base)
            k >>= 1
        return result

    def conjugate(self) -> "Complex":
        return Complex(self.re, -self.im)

    def is_close(self, other: "ComplexLike",
                 tolerance: float = NumericalConstants.DEFAULT_TOLERANCE) -> bool:
        """Check whether the distance to another value is within an absolute tolerance."""
        other = Complex.coerce(other)
        return abs(self.sub(other)) <= tolerance

    # Operator overloads delegate to the named operations
    def __add__(self, other):
        try:
            return self.add(Complex.coerce(other))
        except TypeError:
            return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        try:
            return self.sub(Complex.coerce(other))
        except TypeError:
            return NotImplemented

    def __rsub__(self, other):
        try:
            return Complex.coerce(other).sub(self)
        except TypeError:
            return NotImplemented

    def __mul__(self, other):
        try:
            return self.mul(Complex.coerce(other))
        except TypeError:
            return NotImplemented

    __rmul__ = __mul__

    def __neg__(self):
        return Complex(-self.re, -self.im)

    def __abs__(self) -> float:
        return math.hypot(self.re, self.im)

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __str__(self) -> str:
        sign = '-' if self.im < 0 else '+'
        return f"{self.re:g} {sign} {abs(self.im):g}i"


ComplexLike = Union[Complex, complex, int, float]
