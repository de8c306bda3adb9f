"""Validation utilities for numapprox."""

from .array_validator import (
    is_power_of_two,
    validate_sample_set,
    validate_distinct_abscissas,
    validate_uniform_grid,
    validate_transform_length
)

__all__ = [
    "is_power_of_two",
    "validate_sample_set",
    "validate_distinct_abscissas",
    "validate_uniform_grid",
    "validate_transform_length"
]
