"""
3x3 matrices.

The determinant and inverse are written in terms of the columns a, b, c:
det = (a x b) . c, and the rows of the inverse are b x c, c x a and a x b
scaled by 1/det.
"""

from __future__ import annotations

from pymatrices.matrices._base import FixedMatrix
from pymatrices.vectors import Vector3D


class Matrix3D(FixedMatrix):
    """
    3x3 matrix of float64 entries.

    Arguments are given in row-major reading order::

        Matrix3D(n00, n01, n02,
                 n10, n11, n12,
                 n20, n21, n22)

    ``Matrix3D.zero()`` is the zero matrix.
    """
    __slots__ = ()

    SIZE = 3
    VECTOR = Vector3D

    def __init__(
        self,
        n00: float, n01: float, n02: float,
        n10: float, n11: float, n12: float,
        n20: float, n21: float, n22: float,
    ):
        self._init_entries(
            n00, n01, n02,
            n10, n11, n12,
            n20, n21, n22,
        )

    @classmethod
    def from_columns(cls, a: Vector3D, b: Vector3D, c: Vector3D) -> Matrix3D:
        """Matrix whose columns are ``a``, ``b`` and ``c``."""
        return cls._from_column_vectors((a, b, c))

    @classmethod
    def from_rows(cls, a: Vector3D, b: Vector3D, c: Vector3D) -> Matrix3D:
        """Matrix whose rows are ``a``, ``b`` and ``c``."""
        return cls._from_row_vectors((a, b, c))

    def determinant(self) -> float:
        a, b, c = self[0], self[1], self[2]
        return a.cross(b).dot(c)

    def _inverse_with(self, inv_det: float) -> Matrix3D:
        a, b, c = self[0], self[1], self[2]
        r0 = b.cross(c) * inv_det
        r1 = c.cross(a) * inv_det
        r2 = a.cross(b) * inv_det
        return Matrix3D.from_rows(r0, r1, r2)
