"""
Free-function forms of the matrix operations.

These mirror the methods on Matrix2D/3D/4D so transformation code can be
written the way it reads on paper, e.g. ``x * transpose(A)``.
"""

from __future__ import annotations

from typing import TypeVar

from pymatrices.matrices._base import FixedMatrix

M = TypeVar('M', bound=FixedMatrix)


def transpose(m: M) -> M:
    """
    Transpose of ``m``: entry (i, j) of the result is entry (j, i) of ``m``.

    For any A, B of the same size, ``transpose(A * B) == transpose(B) * transpose(A)``
    (exactly for integer-valued entries, to rounding otherwise).
    """
    return m.transpose()


def determinant(m: FixedMatrix) -> float:
    """Determinant of ``m`` from its closed-form expansion."""
    return m.determinant()


def inverse(m: M) -> M:
    """
    Inverse of ``m``.

    Raises:
        SingularMatrixError: If the determinant of ``m`` is exactly zero
    """
    return m.inverse()
