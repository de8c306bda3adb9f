from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class NumericalConstants:
    """Numerical constants used throughout the interpolation and transform code."""
    # Tolerance and precision
    DEFAULT_TOLERANCE: Final[float] = 1e-8
    # Sample sets
    MIN_UNIFORM_INTERVALS: Final[int] = 1
    MIN_SAMPLE_POINTS: Final[int] = 1
    # Visualization
    DEFAULT_VISUALIZATION_POINTS: Final[int] = 500
    RANGE_PADDING_FACTOR: Final[float] = 0.1


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    DIMENSION_MISMATCH: Final[str] = "Array length mismatch: {x_name}({x_len}) != {y_name}({y_len})"
    DUPLICATE_ABSCISSA: Final[str] = "Duplicate abscissa {value!r} at indices {first} and {second}"
    EMPTY_SAMPLE_SET: Final[str] = "Sample set cannot be empty"
    INVALID_INTERVAL_COUNT: Final[str] = "Number of intervals must be at least {min_count}, got {count}"
    NOT_POWER_OF_TWO: Final[str] = "Transform length must be a power of two, got {length}"
    NOT_INITIALIZED: Final[str] = "{cls_name} has no sampling points; call init() or init_uniform() first"


@dataclass(frozen=True)
class FileConstants:
    """File archiving related constants."""
    DEFAULT_ARCHIVE_NAME: Final[str] = "archive.zip"
    ARCHIVE_CHUNK_SIZE: Final[int] = 4 * 1024
