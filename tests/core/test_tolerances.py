"""
Tests for tolerance tiers and allclose().
"""

import dataclasses

import numpy as np
import pytest

from pymatrices import Matrix2D, Vector2D, Vector3D
from pymatrices.core.tolerances import EXACT, FP32, FP64, ToleranceTier, allclose


class TestToleranceTier:

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            FP64.rtol = 1.0

    def test_tiers_ordered(self):
        assert EXACT.rtol < FP64.rtol < FP32.rtol
        assert EXACT.atol < FP64.atol < FP32.atol


class TestAllclose:

    def test_vectors_within_fp64(self):
        assert allclose(Vector2D(1.0, 2.0), Vector2D(1.0 + 1e-13, 2.0))

    def test_vectors_outside_fp64(self):
        assert not allclose(Vector2D(1.0, 2.0), Vector2D(1.001, 2.0))

    def test_fp32_is_looser(self):
        a = Vector2D(1.0, 2.0)
        b = Vector2D(1.0 + 1e-6, 2.0)
        assert not allclose(a, b, EXACT)
        assert allclose(a, b, FP32)

    def test_matrix_against_array(self):
        m = Matrix2D(1, 2, 3, 4)
        assert allclose(m, [[1.0, 2.0], [3.0, 4.0]])

    def test_shape_mismatch_is_false(self):
        assert not allclose(Vector2D(1, 2), Vector3D(1, 2, 0))

    def test_nan_never_close(self):
        assert not allclose(Vector2D(np.nan, 0.0), Vector2D(np.nan, 0.0))

    def test_custom_tier(self):
        loose = ToleranceTier(rtol=0.0, atol=0.5, name='loose', description='test')
        assert allclose(Vector2D(1.0, 1.0), Vector2D(1.4, 0.6), loose)
