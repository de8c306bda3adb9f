"""
typedefs.py

Type aliases shared across numapprox.

Type Aliases:
    ArrayTypes: Numerical sequences accepted as sample data (numpy arrays, lists or tuples).
    ComplexLike: Values accepted as transform input (Complex, complex, int, float).
"""

from typing import List, Tuple, Union

import numpy as np

from numapprox.core.complex_value import ComplexLike

ArrayTypes = Union[np.ndarray, List, Tuple]  # Sample data can be given as numpy arrays, lists or tuples

__all__ = ["ArrayTypes", "ComplexLike"]
