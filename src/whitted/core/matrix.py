"""Square matrices (2x2, 3x3, 4x4) with cofactor-based determinant and inverse.

Matrices are stored row-major in a NumPy array. Determinants are computed by
recursive cofactor expansion along the first row and inverses by the
adjugate method, so results match the textbook algorithm step by step rather
than LAPACK's pivoted LU.

A matrix memoizes its determinant, invertibility and inverse the first time
they are requested. The memo is dropped whenever ``set`` mutates the matrix
and can always be recomputed from the entries. ``inverse`` hands out a copy of
the memoized inverse, so callers cannot alter the memo.

A frozen matrix rejects ``set``; ``World.freeze`` freezes shape transforms
so a scene cannot change while it is rendered.

Example:
    >>> from src.whitted.core.matrix import Matrix, inverse, identity
    >>> m = Matrix([[2, 0], [0, 4]])
    >>> inverse(m) == Matrix([[0.5, 0], [0, 0.25]])
    True
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from src.whitted.core.errors import MatrixDimensionError, NonInvertibleMatrixError
from src.whitted.core.tolerance import EPSILON, SINGULAR_EPSILON, approx_equal
from src.whitted.core.tuples import Tuple

SUPPORTED_DIMENSIONS = (2, 3, 4)


@dataclass(frozen=True)
class Invertibility:
    """Result of an invertibility query.

    Attributes:
        invertible: True when |determinant| exceeds the singular tolerance.
        determinant: The determinant the decision was based on.
    """

    invertible: bool
    determinant: float


class Matrix:
    """An N x N row-major matrix, N in {2, 3, 4}.

    Attributes:
        dimension: The number of rows (and columns).
    """

    __slots__ = ("_data", "_invertibility", "_inverse")

    def __init__(self, rows: Sequence[Sequence[float]] | npt.NDArray[np.float64]) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise MatrixDimensionError(f"Matrix must be square, got shape {data.shape}")
        if data.shape[0] not in SUPPORTED_DIMENSIONS:
            raise MatrixDimensionError(
                f"Matrix dimension must be one of {SUPPORTED_DIMENSIONS}, got {data.shape[0]}"
            )
        self._data = data
        self._invertibility: Invertibility | None = None
        self._inverse: Matrix | None = None

    @property
    def dimension(self) -> int:
        return self._data.shape[0]

    def get(self, row: int, col: int) -> float:
        return float(self._data[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        """Overwrite one entry and drop the memoized determinant/inverse.

        Raises:
            RuntimeError: If the matrix has been frozen.
        """
        if self.frozen:
            raise RuntimeError("Cannot modify a frozen matrix")
        self._data[row, col] = value
        self._invertibility = None
        self._inverse = None

    @property
    def frozen(self) -> bool:
        return not self._data.flags.writeable

    def freeze(self) -> Matrix:
        """Make the matrix read-only. Returns self for chaining."""
        self._data.flags.writeable = False
        return self

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.get(row, col)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the entries as a NumPy array."""
        return self._data.copy()

    def rows(self) -> list[list[float]]:
        return self._data.tolist()

    def __matmul__(self, other: object):
        if isinstance(other, Matrix):
            return multiply(self, other)
        if isinstance(other, Tuple):
            return multiply_tuple(self, other)
        return NotImplemented

    __mul__ = __matmul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.rows()!r})"


# =============================================================================
# Construction and elementwise operations
# =============================================================================


def identity(dimension: int = 4) -> Matrix:
    return Matrix(np.identity(dimension, dtype=np.float64))


def equal(a: Matrix, b: Matrix, epsilon: float = EPSILON) -> bool:
    """Compare two matrices entry by entry within epsilon."""
    if a.dimension != b.dimension:
        return False
    n = a.dimension
    return all(
        approx_equal(a.get(r, c), b.get(r, c), epsilon) for r in range(n) for c in range(n)
    )


def transpose(m: Matrix) -> Matrix:
    return Matrix(m.to_numpy().T)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Row-by-column product of two matrices of equal dimension."""
    if a.dimension != b.dimension:
        raise MatrixDimensionError(
            f"Cannot multiply {a.dimension}x{a.dimension} by {b.dimension}x{b.dimension}"
        )
    return Matrix(a._data @ b._data)


def multiply_tuple(m: Matrix, t: Tuple) -> Tuple:
    """Apply a 4x4 matrix to a tuple."""
    if m.dimension != 4:
        raise MatrixDimensionError(
            f"Only 4x4 matrices can transform tuples, got {m.dimension}x{m.dimension}"
        )
    x, y, z, w = (m._data @ np.array(t.as_list(), dtype=np.float64)).tolist()
    return Tuple(x, y, z, w)


# =============================================================================
# Determinant and inverse
# =============================================================================


def submatrix(m: Matrix, row: int, col: int) -> Matrix:
    """Remove one row and one column, producing an (N-1) x (N-1) matrix."""
    if m.dimension < 3:
        raise MatrixDimensionError("Submatrices are only defined for 3x3 and 4x4 matrices")
    data = np.delete(np.delete(m._data, row, axis=0), col, axis=1)
    return Matrix(data)


def minor(m: Matrix, row: int, col: int) -> float:
    """Determinant of the submatrix without ``row`` and ``col``."""
    if m.dimension == 2:
        return m.get(1 - row, 1 - col)
    return determinant(submatrix(m, row, col))


def cofactor(m: Matrix, row: int, col: int) -> float:
    """Minor with the sign (-1)^(row + col) applied."""
    value = minor(m, row, col)
    return -value if (row + col) % 2 else value


def determinant(m: Matrix) -> float:
    """Determinant by cofactor expansion along the first row."""
    if m._invertibility is not None:
        return m._invertibility.determinant
    data = m._data
    if m.dimension == 2:
        return float(data[0, 0] * data[1, 1] - data[0, 1] * data[1, 0])
    return sum(float(data[0, col]) * cofactor(m, 0, col) for col in range(m.dimension))


def is_invertible(m: Matrix, epsilon: float = SINGULAR_EPSILON) -> Invertibility:
    """Report whether a matrix can be inverted, without raising.

    The answer is memoized on the matrix for the default tolerance.
    """
    if epsilon == SINGULAR_EPSILON and m._invertibility is not None:
        return m._invertibility
    det = determinant(m)
    result = Invertibility(invertible=abs(det) > epsilon, determinant=det)
    if epsilon == SINGULAR_EPSILON:
        m._invertibility = result
    return result


def inverse(m: Matrix) -> Matrix:
    """Invert a matrix with the adjugate method: transpose(cofactors) / det.

    The result is a new matrix on every call; mutating it leaves ``m`` and its
    memo untouched.

    Raises:
        NonInvertibleMatrixError: If the determinant is within tolerance of zero.
    """
    if m._inverse is not None:
        return Matrix(m._inverse._data)
    check = is_invertible(m)
    if not check.invertible:
        raise NonInvertibleMatrixError(check.determinant)

    n = m.dimension
    result = np.empty((n, n), dtype=np.float64)
    for row in range(n):
        for col in range(n):
            # Swapping row/col here performs the transpose.
            result[col, row] = cofactor(m, row, col) / check.determinant
    m._inverse = Matrix(result)
    return Matrix(result)
