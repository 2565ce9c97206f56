"""
4x4 matrices.

The determinant and inverse use the 3D cross-product formulation. With the
columns split into their upper 3D parts a, b, c, d and bottom row
(x, y, z, w):

    s = a x b        t = c x d
    u = y*a - x*b    v = w*c - z*d
    det = s . v + t . u
"""

from __future__ import annotations

from pymatrices.matrices._base import FixedMatrix
from pymatrices.vectors import Vector4D


class Matrix4D(FixedMatrix):
    """
    4x4 matrix of float64 entries.

    Arguments are given in row-major reading order::

        Matrix4D(n00, n01, n02, n03,
                 n10, n11, n12, n13,
                 n20, n21, n22, n23,
                 n30, n31, n32, n33)

    ``Matrix4D.zero()`` is the zero matrix.
    """
    __slots__ = ()

    SIZE = 4
    VECTOR = Vector4D

    def __init__(
        self,
        n00: float, n01: float, n02: float, n03: float,
        n10: float, n11: float, n12: float, n13: float,
        n20: float, n21: float, n22: float, n23: float,
        n30: float, n31: float, n32: float, n33: float,
    ):
        self._init_entries(
            n00, n01, n02, n03,
            n10, n11, n12, n13,
            n20, n21, n22, n23,
            n30, n31, n32, n33,
        )

    @classmethod
    def from_columns(cls, a: Vector4D, b: Vector4D, c: Vector4D, d: Vector4D) -> Matrix4D:
        """Matrix whose columns are ``a``, ``b``, ``c`` and ``d``."""
        return cls._from_column_vectors((a, b, c, d))

    @classmethod
    def from_rows(cls, a: Vector4D, b: Vector4D, c: Vector4D, d: Vector4D) -> Matrix4D:
        """Matrix whose rows are ``a``, ``b``, ``c`` and ``d``."""
        return cls._from_row_vectors((a, b, c, d))

    def _cross_terms(self) -> tuple:
        a, b, c, d = (self[j].xyz for j in range(4))
        x, y, z, w = self(3, 0), self(3, 1), self(3, 2), self(3, 3)
        s = a.cross(b)
        t = c.cross(d)
        u = a * y - b * x
        v = c * w - d * z
        return a, b, c, d, x, y, z, w, s, t, u, v

    def determinant(self) -> float:
        *_, s, t, u, v = self._cross_terms()
        return s.dot(v) + t.dot(u)

    def _inverse_with(self, inv_det: float) -> Matrix4D:
        a, b, c, d, x, y, z, w, s, t, u, v = self._cross_terms()
        s = s * inv_det
        t = t * inv_det
        u = u * inv_det
        v = v * inv_det

        r0 = b.cross(v) + t * y
        r1 = v.cross(a) - t * x
        r2 = d.cross(u) + s * w
        r3 = u.cross(c) - s * z

        return Matrix4D(
            r0.x, r0.y, r0.z, -b.dot(t),
            r1.x, r1.y, r1.z, a.dot(t),
            r2.x, r2.y, r2.z, -d.dot(s),
            r3.x, r3.y, r3.z, c.dot(s),
        )
