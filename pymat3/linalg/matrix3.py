import logging
from math import copysign, inf
from numbers import Real

import numpy as np

from .utils import is_epsilon
from .vector3 import Vector3


__all__ = ["Matrix3"]

logger = logging.getLogger("pymat3")


class Matrix3:
    """A 3x3 matrix of floats, stored row-major in ``values[row][col]``.

    Construct it from a nested 3x3 sequence, ``Matrix3([[a, b, c], [d, e, f],
    [g, h, i]])``, or from nine scalars in row-major order, ``Matrix3(a, b, c,
    d, e, f, g, h, i)``. The shape of a nested sequence is trusted, not
    checked. Its rows are copied, so the matrix never shares storage with
    the caller.

    Operations never modify their operands; each returns a new matrix (or
    vector).
    """

    def __init__(self, *args) -> None:
        if len(args) == 1:
            self.values = [[float(v) for v in row] for row in args[0]]
        elif len(args) == 9:
            a, b, c, d, e, f, g, h, i = args
            self.values = [
                [float(a), float(b), float(c)],
                [float(d), float(e), float(f)],
                [float(g), float(h), float(i)],
            ]
        else:
            raise TypeError(
                f"Matrix3 expects a 3x3 grid or 9 values, got {len(args)} arguments."
            )

    def __repr__(self) -> str:
        return f"Matrix3({self.values})"

    @classmethod
    def zero(cls) -> "Matrix3":
        return cls([[0, 0, 0], [0, 0, 0], [0, 0, 0]])

    @classmethod
    def identity(cls) -> "Matrix3":
        return cls([[1, 0, 0], [0, 1, 0], [0, 0, 1]])

    @classmethod
    def ones(cls) -> "Matrix3":
        return cls([[1, 1, 1], [1, 1, 1], [1, 1, 1]])

    def clone(self) -> "Matrix3":
        """Return a deep copy of this matrix."""
        return Matrix3(self.values)

    def transpose(self) -> "Matrix3":
        v = self.values
        return Matrix3([[v[j][i] for j in range(3)] for i in range(3)])

    def negate(self) -> "Matrix3":
        return Matrix3([[-x for x in row] for row in self.values])

    def add(self, m: "Matrix3") -> "Matrix3":
        return Matrix3(
            [
                [a + b for a, b in zip(row_a, row_b)]
                for row_a, row_b in zip(self.values, m.values)
            ]
        )

    def sub(self, m: "Matrix3") -> "Matrix3":
        return self.add(m.negate())

    def times_num(self, s: float) -> "Matrix3":
        return Matrix3([[s * x for x in row] for row in self.values])

    def times_mat(self, m: "Matrix3") -> "Matrix3":
        """Return the matrix product ``self * m``."""
        a = self.values
        b = m.values
        return Matrix3(
            [
                [sum(a[i][k] * b[k][j] for k in range(3)) for j in range(3)]
                for i in range(3)
            ]
        )

    def times_vec(self, v) -> "Vector3":
        """Return the product ``self * v`` as a new Vector3.

        ``v`` can be anything indexable with three components, such as a
        Vector3, a tuple or a numpy array.
        """
        a = self.values
        return Vector3(*(sum(a[i][j] * v[j] for j in range(3)) for i in range(3)))

    def trace(self) -> float:
        v = self.values
        return v[0][0] + v[1][1] + v[2][2]

    def determinant(self) -> float:
        (a11, a12, a13), (a21, a22, a23), (a31, a32, a33) = self.values
        return (
            a11 * a22 * a33
            + a12 * a23 * a31
            + a13 * a21 * a32
            - a31 * a22 * a13
            - a32 * a23 * a11
            - a33 * a21 * a12
        )

    def invert(self, throw_on_degenerate: bool = True) -> "Matrix3":
        """Return the inverse of this matrix, using Gauss-Jordan elimination.

        The working matrix is reduced to the identity while the same row
        operations are applied to an identity matrix, which thereby turns
        into the inverse. This matrix itself is not modified.

        Parameters
        ----------
        throw_on_degenerate : bool
            If True (default), a ValueError is raised when the matrix is
            singular. If False, a warning is logged and the elimination
            carries on, so that the result contains infinite or nan entries.
        """
        matrix = self.clone().values
        inverse = Matrix3.identity().values

        for i in range(3):
            # First row on or below the diagonal with a non-zero entry in this column
            pivot_row = None
            for j in range(i, 3):
                if not is_epsilon(matrix[j][i]):
                    pivot_row = j
                    break

            if pivot_row is None:
                if throw_on_degenerate:
                    raise ValueError("matrix is singular, cannot invert")
                logger.warning(
                    f"Inverting a singular matrix, no pivot in column {i}: {self.values}"
                )
                pivot_row = i
            elif pivot_row > i:
                _swap_rows(matrix, i, pivot_row)
                _swap_rows(inverse, i, pivot_row)

            scale = _reciprocal(matrix[i][i])
            _scale_row(matrix, i, scale)
            _scale_row(inverse, i, scale)

            for j in range(3):
                if j == i:
                    continue
                leading_value = matrix[j][i]
                if not is_epsilon(leading_value):
                    _combine_rows(matrix, i, -leading_value, j)
                    _combine_rows(inverse, i, -leading_value, j)

        return Matrix3(inverse)

    def equals(self, m: "Matrix3") -> bool:
        return self.values == m.values

    def __eq__(self, other: "Matrix3") -> bool:
        return isinstance(other, Matrix3) and self.equals(other)

    @classmethod
    def from_array(cls, array: list, offset: int = 0) -> "Matrix3":
        """Create a matrix from a flat, row-major sequence of 9 numbers."""
        return cls(*(array[offset + k] for k in range(9)))

    def to_array(self, array: list = None, offset: int = 0) -> list:
        """Write the values to a flat list, in row-major order."""
        if array is None:
            array = []
        padding = offset + 9 - len(array)
        if padding > 0:
            array.extend((None for _ in range(padding)))
        for i in range(3):
            for j in range(3):
                array[offset + 3 * i + j] = self.values[i][j]
        return array

    def to_numpy(self) -> np.ndarray:
        return np.array(self.values, dtype=np.float64)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        if copy is False:
            raise ValueError("Matrix3 cannot be converted to an array without a copy.")
        if dtype is None:
            return self.to_numpy()
        return np.array(self.values, dtype=dtype)

    # Operators

    def __neg__(self) -> "Matrix3":
        return self.negate()

    def __add__(self, other):
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return self.times_num(other)

    __rmul__ = __mul__

    def __matmul__(self, other):
        if isinstance(other, Matrix3):
            return self.times_mat(other)
        try:
            is_vector = len(other) == 3
        except TypeError:
            is_vector = False
        if not is_vector:
            return NotImplemented
        return self.times_vec(other)


# Row operations used by the inversion, in-place on a 3x3 grid


def _swap_rows(values: list, i: int, j: int) -> None:
    values[i], values[j] = values[j], values[i]


def _scale_row(values: list, i: int, k: float) -> None:
    values[i] = [k * x for x in values[i]]


def _combine_rows(values: list, source: int, scale: float, target: int) -> None:
    # target += scale * source
    values[target] = [x + scale * y for x, y in zip(values[target], values[source])]


def _reciprocal(value: float) -> float:
    # Like IEEE division, 1 / 0 gives a signed infinity instead of raising
    if value == 0:
        return copysign(inf, value)
    return 1 / value
