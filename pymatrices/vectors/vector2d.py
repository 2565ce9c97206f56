"""
Two-component vector.
"""

from __future__ import annotations

from pymatrices.vectors._base import FixedVector


class Vector2D(FixedVector):
    """
    Vector (x, y) in R2.

    ``Vector2D.zero()`` is the zero vector. Components are float64 and may be read
    or written through ``x``/``y`` or by index.
    """
    __slots__ = ()

    SIZE = 2

    def __init__(self, x: float, y: float):
        self._init_components(x, y)

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
