"""
Three-component vector and the cross product.
"""

from __future__ import annotations

import numpy as np

from pymatrices.vectors._base import FixedVector


class Vector3D(FixedVector):
    """
    Vector (x, y, z) in R3.

    ``Vector3D.zero()`` is the zero vector.
    """
    __slots__ = ()

    SIZE = 3

    def __init__(self, x: float, y: float, z: float):
        self._init_components(x, y, z)

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

    def cross(self, other: Vector3D) -> Vector3D:
        """Right-handed cross product ``self x other``."""
        if not isinstance(other, Vector3D):
            raise TypeError(
                f"cross() requires two Vector3D operands, got {type(other).__name__}"
            )
        a = self._v
        b = other._v
        with np.errstate(all='ignore'):
            return Vector3D(
                a[1] * b[2] - a[2] * b[1],
                a[2] * b[0] - a[0] * b[2],
                a[0] * b[1] - a[1] * b[0],
            )


def cross(a: Vector3D, b: Vector3D) -> Vector3D:
    """Right-handed cross product ``a x b``."""
    return a.cross(b)
