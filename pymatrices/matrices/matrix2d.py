"""
2x2 matrices.
"""

from __future__ import annotations

from pymatrices.matrices._base import FixedMatrix
from pymatrices.vectors import Vector2D


class Matrix2D(FixedMatrix):
    """
    2x2 matrix of float64 entries.

    Arguments are given in row-major reading order::

        Matrix2D(n00, n01,
                 n10, n11)

    ``Matrix2D.zero()`` and ``Matrix2D.identity()`` give 0 and I.
    """
    __slots__ = ()

    SIZE = 2
    VECTOR = Vector2D

    def __init__(
        self,
        n00: float, n01: float,
        n10: float, n11: float,
    ):
        self._init_entries(n00, n01, n10, n11)

    @classmethod
    def from_columns(cls, a: Vector2D, b: Vector2D) -> Matrix2D:
        """Matrix whose columns are ``a`` and ``b``."""
        return cls._from_column_vectors((a, b))

    @classmethod
    def from_rows(cls, a: Vector2D, b: Vector2D) -> Matrix2D:
        """Matrix whose rows are ``a`` and ``b``."""
        return cls._from_row_vectors((a, b))

    def determinant(self) -> float:
        return self(0, 0) * self(1, 1) - self(0, 1) * self(1, 0)

    def _inverse_with(self, inv_det: float) -> Matrix2D:
        return Matrix2D(
            self(1, 1) * inv_det, -self(0, 1) * inv_det,
            -self(1, 0) * inv_det, self(0, 0) * inv_det,
        )
