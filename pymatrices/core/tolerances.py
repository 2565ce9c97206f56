"""
Tolerance tiers for approximate comparison.

Vector and matrix equality (==) is exact: no epsilon is applied. Identities
such as linearity or (AB)^T = B^T A^T hold exactly for integer-valued inputs
but only to rounding for general floats. Callers needing tolerance compare
externally with allclose() and one of the tiers below.

Used by the test suite and the walkthrough.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Bitwise agreement
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact equality, same as ==',
)

# Double precision arithmetic with a handful of reassociated multiply-adds
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, rounding from reordered summation',
)

# Data that passed through single precision (e.g. exported to a GPU buffer)
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision, statistically equivalent',
)


def _as_array(value: Any) -> np.ndarray:
    if hasattr(value, 'to_array'):
        return value.to_array()
    return np.asarray(value, dtype=np.float64)


def allclose(a: Any, b: Any, tier: ToleranceTier = FP64) -> bool:
    """
    Compare two vectors, matrices or array-likes within a tolerance tier.

    Args:
        a: First operand (Vector<N>, Matrix<N>, or array-like)
        b: Second operand
        tier: Tolerance tier to apply

    Returns:
        True if shapes match and every entry satisfies
        |a - b| <= atol + rtol * |b|. NaN never compares close.
    """
    x = _as_array(a)
    y = _as_array(b)
    if x.shape != y.shape:
        return False
    return bool(np.allclose(x, y, rtol=tier.rtol, atol=tier.atol))
