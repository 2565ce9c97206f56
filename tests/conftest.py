"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrices import (
    Matrix2D, Matrix3D, Matrix4D,
    Vector2D, Vector3D, Vector4D,
)


VECTOR_TYPES = {2: Vector2D, 3: Vector3D, 4: Vector4D}
MATRIX_TYPES = {2: Matrix2D, 3: Matrix3D, 4: Matrix4D}


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def int_vector(rng):
    """Factory for integer-valued vectors in [-10, 10] of a given size."""
    def make(size):
        cls = VECTOR_TYPES[size]
        return cls(*rng.integers(-10, 10, size=size, endpoint=True).astype(float))
    return make


@pytest.fixture
def int_matrix(rng):
    """Factory for integer-valued matrices in [-10, 10] of a given size."""
    def make(size):
        cls = MATRIX_TYPES[size]
        return cls(*rng.integers(-10, 10, size=size * size, endpoint=True).astype(float))
    return make
