"""
Fixed-size vector types.

Public API:
    Vector2D, Vector3D, Vector4D  - value types with componentwise arithmetic
    dot(a, b)                     - dot product of same-size vectors
    cross(a, b)                   - cross product of two Vector3D
"""

from pymatrices.vectors._base import FixedVector, dot
from pymatrices.vectors.vector2d import Vector2D
from pymatrices.vectors.vector3d import Vector3D, cross
from pymatrices.vectors.vector4d import Vector4D

__all__ = [
    "FixedVector",
    "Vector2D",
    "Vector3D",
    "Vector4D",
    "dot",
    "cross",
]
