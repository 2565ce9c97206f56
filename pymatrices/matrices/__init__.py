"""
Fixed-size square matrix types.

Public API:
    Matrix2D, Matrix3D, Matrix4D  - column-major value types
    transpose(m)                  - reflection across the main diagonal
    determinant(m)                - closed-form determinant
    inverse(m)                    - closed-form inverse (SingularMatrixError if det == 0)
"""

from pymatrices.matrices._base import FixedMatrix
from pymatrices.matrices.matrix2d import Matrix2D
from pymatrices.matrices.matrix3d import Matrix3D
from pymatrices.matrices.matrix4d import Matrix4D
from pymatrices.matrices.ops import transpose, determinant, inverse

__all__ = [
    "FixedMatrix",
    "Matrix2D",
    "Matrix3D",
    "Matrix4D",
    "transpose",
    "determinant",
    "inverse",
]
