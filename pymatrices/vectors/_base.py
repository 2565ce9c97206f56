"""
Shared implementation of the fixed-size vector types.

Vector2D, Vector3D and Vector4D are concrete subclasses of FixedVector. Each
subclass fixes SIZE and declares a constructor with exactly SIZE named
parameters, so a wrong component count is a TypeError raised by Python at the
call site rather than a runtime dimension check.

Arithmetic between vectors is only defined for operands of the same concrete
type. Anything else makes the operator return NotImplemented, which lets a
Matrix<N> handle ``v * M`` through its reflected operator and otherwise ends
in Python's own TypeError.

Equality is exact. No epsilon is applied; callers needing tolerance use
pymatrices.core.tolerances.allclose().
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterator, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrices import config
from pymatrices.core.validation import check_array, check_shape

V = TypeVar('V', bound='FixedVector')


def format_component(value: float) -> str:
    """Render one scalar for str() output."""
    return f"{value:.{config.DISPLAY_PRECISION}g}"


class FixedVector:
    """
    Base class for vectors with a fixed number of float64 components.

    Not instantiated directly; use Vector2D, Vector3D or Vector4D.
    """
    __slots__ = ('_v',)

    SIZE: int = 0

    # Keep NumPy from treating vectors as array-likes in mixed expressions
    # such as ``np.float64(2.0) * v``; the reflected operator runs instead.
    __array_ufunc__ = None

    # Mutable through __setitem__ and in-place operators
    __hash__ = None  # type: ignore[assignment]

    _v: NDArray[np.float64]

    def _init_components(self, *components: float) -> None:
        self._v = np.array(components, dtype=np.float64)

    @classmethod
    def _from_storage(cls: type[V], storage: NDArray[np.float64]) -> V:
        """Wrap an owned float64 array of length SIZE without copying."""
        obj = cls.__new__(cls)
        obj._v = storage
        return obj

    @classmethod
    def from_array(cls: type[V], array: ArrayLike) -> V:
        """
        Build a vector from a 1D array-like of exactly SIZE numbers.

        Raises:
            ValidationError: If the input is not numeric
            DimensionError: If the input does not have shape (SIZE,)
        """
        data = check_array(array, "array")
        check_shape(data, (cls.SIZE,), "array")
        return cls._from_storage(data)

    @classmethod
    def zero(cls: type[V]) -> V:
        return cls._from_storage(np.zeros(cls.SIZE, dtype=np.float64))

    def to_array(self) -> NDArray[np.float64]:
        """Return the components as a fresh float64 array."""
        return self._v.copy()

    def copy(self: V) -> V:
        return self._from_storage(self._v.copy())

    # --- Component access ---

    def __len__(self) -> int:
        return self.SIZE

    def __getitem__(self, index: int) -> float:
        return float(self._v[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._v[index] = value

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._v)

    # --- Arithmetic ---

    def __add__(self: V, other: Any) -> V:
        if type(other) is not type(self):
            return NotImplemented
        with np.errstate(all='ignore'):
            return self._from_storage(self._v + other._v)

    def __sub__(self: V, other: Any) -> V:
        if type(other) is not type(self):
            return NotImplemented
        with np.errstate(all='ignore'):
            return self._from_storage(self._v - other._v)

    def __mul__(self: V, other: Any) -> V:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        with np.errstate(all='ignore'):
            return self._from_storage(self._v * float(other))

    def __rmul__(self: V, other: Any) -> V:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        with np.errstate(all='ignore'):
            return self._from_storage(float(other) * self._v)

    def __truediv__(self: V, other: Any) -> V:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        with np.errstate(all='ignore'):
            return self._from_storage(self._v / np.float64(other))

    def __neg__(self: V) -> V:
        return self._from_storage(-self._v)

    def __pos__(self: V) -> V:
        return self.copy()

    def __iadd__(self: V, other: Any) -> V:
        if type(other) is not type(self):
            return NotImplemented
        with np.errstate(all='ignore'):
            self._v += other._v
        return self

    def __isub__(self: V, other: Any) -> V:
        if type(other) is not type(self):
            return NotImplemented
        with np.errstate(all='ignore'):
            self._v -= other._v
        return self

    def __imul__(self: V, other: Any) -> V:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        with np.errstate(all='ignore'):
            self._v *= float(other)
        return self

    def __itruediv__(self: V, other: Any) -> V:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        with np.errstate(all='ignore'):
            self._v /= np.float64(other)
        return self

    # --- Products and norms ---

    def dot(self: V, other: V) -> float:
        """
        Dot product, accumulated left to right.

        The summation order matches the column combination used by
        Matrix<N> * Vector<N>, so ``v * M`` and ``transpose(M) * v`` agree
        bit for bit.
        """
        if type(other) is not type(self):
            raise TypeError(
                f"dot() requires two {type(self).__name__} operands, "
                f"got {type(other).__name__}"
            )
        a = self._v
        b = other._v
        with np.errstate(all='ignore'):
            total = a[0] * b[0]
            for i in range(1, self.SIZE):
                total = total + a[i] * b[i]
        return float(total)

    @property
    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalize(self: V) -> V:
        """Unit vector in the same direction. The zero vector yields NaNs."""
        return self / self.magnitude

    # --- Comparison and display ---

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __str__(self) -> str:
        return "(" + ", ".join(format_component(c) for c in self) + ")"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self)})"


def dot(a: V, b: V) -> float:
    """Dot product of two vectors of the same size."""
    return a.dot(b)
