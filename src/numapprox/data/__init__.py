"""Numerical constants and message templates for numapprox."""

from .constants import NumericalConstants, ErrorMessages, FileConstants

__all__ = [
    "NumericalConstants",
    "ErrorMessages",
    "FileConstants"
]
