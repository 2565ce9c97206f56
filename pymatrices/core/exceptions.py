"""
Exception hierarchy for PyMatrices.

All exceptions inherit from PyMatricesError to allow catching any
library-specific error.

Arithmetic operators never raise these. A size mismatch between operands
(e.g. Matrix2D * Vector3D) is rejected by Python itself with TypeError,
because the operator returns NotImplemented. The exceptions below cover the
two places where a runtime failure is possible:

    - converting a dynamically sized array into a fixed-size type
    - inverting a matrix whose determinant is exactly zero

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatricesError(Exception):
    """Base exception for all PyMatrices errors."""
    pass


class ValidationError(PyMatricesError):
    """
    Input validation failed.

    Raised when an array handed to a from_array() constructor cannot be
    interpreted as numeric data.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when an array handed to a from_array() constructor does not have
    the fixed shape of the target type (e.g. a (3,) array for Vector2D).
    """
    pass


class NumericalError(PyMatricesError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised by inverse() when the determinant is exactly zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was computed, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
