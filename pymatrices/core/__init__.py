"""
Core infrastructure for PyMatrices.

This module provides shared abstractions used by the vector and matrix
subpackages.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators for the array ingest boundary
    tolerances: Tolerance tiers and allclose() for approximate comparison
"""

from pymatrices.core.exceptions import (
    PyMatricesError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)
from pymatrices.core.tolerances import ToleranceTier, allclose

__all__ = [
    # Exceptions
    "PyMatricesError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    # Tolerances
    "ToleranceTier",
    "allclose",
]
