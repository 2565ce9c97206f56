"""
Shared implementation of the fixed-size square matrix types.

Storage is column-major: ``_columns[j]`` is column j, so ``_columns[j, i]``
is the entry at row i, column j. Constructors take their N*N scalars in
row-major reading order, the way a matrix is written on paper:

    Matrix2D(a, b,
             c, d)

gives ``M(0, 1) == b`` and ``M[1] == Vector2D(b, d)``.

Multiplication conventions:
    M * v   column vector; the linear combination v[0]*M[0] + ... + v[N-1]*M[N-1]
    v * M   row vector; component j is v . M[j], i.e. transpose(M) * v
    A * B   column j of the result is A * B[j]

``M * v`` and ``v * M`` differ unless M is symmetric. Both are accumulated in
index order, so ``v * M == transpose(M) * v`` holds exactly.
"""

from __future__ import annotations

import logging
import numbers
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Iterable, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrices.core.exceptions import SingularMatrixError
from pymatrices.core.validation import check_array, check_shape
from pymatrices.vectors._base import FixedVector, format_component

logger = logging.getLogger(__name__)

M = TypeVar('M', bound='FixedMatrix')


class FixedMatrix(ABC):
    """
    Base class for N x N float64 matrices.

    Not instantiated directly; use Matrix2D, Matrix3D or Matrix4D. Subclasses
    set SIZE and VECTOR (the same-size vector type), declare a constructor
    with exactly SIZE*SIZE named parameters, and implement determinant() and
    _inverse_with().
    """
    __slots__ = ('_columns',)

    SIZE: ClassVar[int] = 0
    VECTOR: ClassVar[type[FixedVector]] = FixedVector

    __array_ufunc__ = None

    __hash__ = None  # type: ignore[assignment]

    _columns: NDArray[np.float64]

    def _init_entries(self, *entries: float) -> None:
        n = self.SIZE
        rows = np.array(entries, dtype=np.float64).reshape(n, n)
        self._columns = np.ascontiguousarray(rows.T)

    @classmethod
    def _from_storage(cls: type[M], columns: NDArray[np.float64]) -> M:
        """Wrap an owned (SIZE, SIZE) column-major array without copying."""
        obj = cls.__new__(cls)
        obj._columns = columns
        return obj

    # --- Alternate constructors ---

    @classmethod
    def _stack_vectors(cls, vectors: Iterable[FixedVector], role: str) -> NDArray[np.float64]:
        stacked = []
        for vec in vectors:
            if type(vec) is not cls.VECTOR:
                raise TypeError(
                    f"{cls.__name__} {role} must be {cls.VECTOR.__name__}, "
                    f"got {type(vec).__name__}"
                )
            stacked.append(vec.to_array())
        return np.array(stacked, dtype=np.float64)

    @classmethod
    def _from_column_vectors(cls: type[M], columns: Iterable[FixedVector]) -> M:
        return cls._from_storage(cls._stack_vectors(columns, "columns"))

    @classmethod
    def _from_row_vectors(cls: type[M], rows: Iterable[FixedVector]) -> M:
        stacked = cls._stack_vectors(rows, "rows")
        return cls._from_storage(np.ascontiguousarray(stacked.T))

    @classmethod
    def from_array(cls: type[M], array: ArrayLike) -> M:
        """
        Build a matrix from a (SIZE, SIZE) array-like in (row, column) layout.

        Raises:
            ValidationError: If the input is not numeric
            DimensionError: If the input does not have shape (SIZE, SIZE)
        """
        data = check_array(array, "array")
        check_shape(data, (cls.SIZE, cls.SIZE), "array")
        return cls._from_storage(np.ascontiguousarray(data.T))

    @classmethod
    def identity(cls: type[M]) -> M:
        return cls._from_storage(np.eye(cls.SIZE, dtype=np.float64))

    @classmethod
    def zero(cls: type[M]) -> M:
        return cls._from_storage(np.zeros((cls.SIZE, cls.SIZE), dtype=np.float64))

    def to_array(self) -> NDArray[np.float64]:
        """Return the entries as a fresh float64 array indexed [row, column]."""
        return np.ascontiguousarray(self._columns.T)

    def copy(self: M) -> M:
        return self._from_storage(self._columns.copy())

    # --- Element, column and row access ---

    def __call__(self, row: int, col: int) -> float:
        return float(self._columns[col, row])

    def __getitem__(self, key: int | tuple[int, int]) -> Any:
        if isinstance(key, tuple):
            row, col = key
            return float(self._columns[col, row])
        return self.VECTOR._from_storage(self._columns[key].copy())

    def __setitem__(self, key: int | tuple[int, int], value: Any) -> None:
        if isinstance(key, tuple):
            row, col = key
            self._columns[col, row] = value
            return
        if type(value) is not self.VECTOR:
            raise TypeError(
                f"column of {type(self).__name__} must be {self.VECTOR.__name__}, "
                f"got {type(value).__name__}"
            )
        self._columns[key] = value.to_array()

    def row(self, index: int) -> FixedVector:
        """Row ``index`` as a vector (copy)."""
        return self.VECTOR._from_storage(self._columns[:, index].copy())

    # --- Arithmetic ---

    def _combine_columns(self, weights: NDArray[np.float64]) -> NDArray[np.float64]:
        """weights[0]*col0 + weights[1]*col1 + ..., accumulated in index order."""
        cols = self._columns
        with np.errstate(all='ignore'):
            result = cols[0] * weights[0]
            for j in range(1, self.SIZE):
                result = result + cols[j] * weights[j]
        return result

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, numbers.Real):
            with np.errstate(all='ignore'):
                return self._from_storage(self._columns * float(other))
        if type(other) is self.VECTOR:
            return self.VECTOR._from_storage(self._combine_columns(other._v))
        if type(other) is type(self):
            product = np.array(
                [self._combine_columns(other._columns[j]) for j in range(self.SIZE)]
            )
            return self._from_storage(product)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, numbers.Real):
            with np.errstate(all='ignore'):
                return self._from_storage(float(other) * self._columns)
        if type(other) is self.VECTOR:
            # Row vector: component j is other . column j
            components = [other.dot(self[j]) for j in range(self.SIZE)]
            return self.VECTOR._from_storage(np.array(components, dtype=np.float64))
        return NotImplemented

    def __truediv__(self: M, other: Any) -> M:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        with np.errstate(all='ignore'):
            return self._from_storage(self._columns / np.float64(other))

    def __add__(self: M, other: Any) -> M:
        if type(other) is not type(self):
            return NotImplemented
        with np.errstate(all='ignore'):
            return self._from_storage(self._columns + other._columns)

    def __sub__(self: M, other: Any) -> M:
        if type(other) is not type(self):
            return NotImplemented
        with np.errstate(all='ignore'):
            return self._from_storage(self._columns - other._columns)

    def __neg__(self: M) -> M:
        return self._from_storage(-self._columns)

    # --- Transpose, determinant, inverse ---

    def transpose(self: M) -> M:
        """Reflection across the main diagonal: result(i, j) == self(j, i)."""
        return self._from_storage(np.ascontiguousarray(self._columns.T))

    @property
    def T(self: M) -> M:
        return self.transpose()

    @abstractmethod
    def determinant(self) -> float:
        """Closed-form determinant."""
        ...

    @abstractmethod
    def _inverse_with(self: M, inv_det: float) -> M:
        """Adjugate scaled by inv_det, i.e. the inverse once det != 0."""
        ...

    def inverse(self: M) -> M:
        """
        Inverse matrix from the closed-form adjugate.

        Raises:
            SingularMatrixError: If the determinant is exactly zero
        """
        det = self.determinant()
        if det == 0.0:
            logger.debug("inverse() of singular %s: %r", type(self).__name__, self)
            raise SingularMatrixError(
                f"{type(self).__name__} is singular (determinant is 0)",
                matrix_name=type(self).__name__,
                determinant=det,
            )
        with np.errstate(all='ignore'):
            return self._inverse_with(1.0 / det)

    # --- Comparison and display ---

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._columns, other._columns))

    def __str__(self) -> str:
        rows = self.to_array()
        width = max(len(format_component(v)) for v in rows.flat)
        lines = []
        for r in rows:
            cells = " ".join(format_component(v).rjust(width) for v in r)
            lines.append(f"[ {cells} ]\n")
        return "".join(lines)

    def __repr__(self) -> str:
        entries = ", ".join(repr(float(v)) for v in self.to_array().flat)
        return f"{type(self).__name__}({entries})"
