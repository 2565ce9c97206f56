"""
Four-component vector.
"""

from __future__ import annotations

from pymatrices.vectors._base import FixedVector
from pymatrices.vectors.vector3d import Vector3D


class Vector4D(FixedVector):
    """
    Vector (x, y, z, w) in R4.

    ``Vector4D.zero()`` is the zero vector. In homogeneous coordinates ``w`` is 1
    for points and 0 for directions; the type itself does not enforce either.
    """
    __slots__ = ()

    SIZE = 4

    def __init__(self, x: float, y: float, z: float, w: float):
        self._init_components(x, y, z, w)

    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = value

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = value

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = value

    @property
    def w(self) -> float:
        return float(self._v[3])

    @w.setter
    def w(self, value: float) -> None:
        self._v[3] = value

    @property
    def xyz(self) -> Vector3D:
        """First three components as a Vector3D (copy)."""
        return Vector3D._from_storage(self._v[:3].copy())
