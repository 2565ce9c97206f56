"""
PyMatrices: fixed-size linear algebra for transform pipelines.

Vectors and square matrices of dimension 2, 3 and 4 with exact equality,
column-major matrix semantics and row-major constructor argument order.

Submodules:
    vectors: Vector2D, Vector3D, Vector4D
    matrices: Matrix2D, Matrix3D, Matrix4D, transpose, determinant, inverse
    core: exceptions, validation, tolerance tiers
    walkthrough: narrated demonstration of 2x2 linear maps
"""

__version__ = "0.1.0"

from pymatrices.vectors import Vector2D, Vector3D, Vector4D, dot, cross
from pymatrices.matrices import (
    Matrix2D,
    Matrix3D,
    Matrix4D,
    transpose,
    determinant,
    inverse,
)
from pymatrices.core.exceptions import (
    PyMatricesError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    # Vectors
    "Vector2D",
    "Vector3D",
    "Vector4D",
    "dot",
    "cross",
    # Matrices
    "Matrix2D",
    "Matrix3D",
    "Matrix4D",
    "transpose",
    "determinant",
    "inverse",
    # Exceptions
    "PyMatricesError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
