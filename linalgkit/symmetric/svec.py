"""Scaled vectorization of symmetric matrices.

A symmetric n x n matrix has n(n+1)/2 free entries. ``svec`` stacks them
into a vector, multiplying off-diagonal entries by sqrt(2) so that

    <A, B>_F = trace(A^T B) = svec(A) . svec(B)

and ``smat`` undoes it. Entries are laid out in row-major order of the upper
triangle:

    (0,0), (0,1), ..., (0,n-1), (1,1), (1,2), ..., (n-1,n-1)

which is also the column-major order of the lower triangle. ``svec_index``
gives the position of (i, j) in that layout.
"""

import math
from typing import Any, Optional, Tuple

import numpy as np

from ..utils.config import Config
from ..utils.exceptions import DomainError, ShapeError
from ..utils.validation import as_square, as_vector, restore_type

SQRT2 = math.sqrt(2.0)


def svec_dim(n: int) -> int:
    """Length of the svec encoding of an n x n matrix."""
    if n < 0:
        raise DomainError(f"Matrix order must be non-negative, got {n}", parameter="n")
    return n * (n + 1) // 2


def smat_dim(m: int) -> int:
    """Order n of the matrix whose svec encoding has length m.

    Raises:
        ShapeError: If m is not a triangular number
    """
    if m < 0:
        raise ShapeError(f"Encoding length must be non-negative, got {m}", parameter="m")
    n = (math.isqrt(8 * m + 1) - 1) // 2
    if svec_dim(n) != m:
        raise ShapeError(
            f"Length {m} is not a triangular number n(n+1)/2",
            parameter="v",
            expected="n(n+1)/2",
            actual=m,
        )
    return n


def svec_index(i: int, j: int, n: int) -> int:
    """Position of matrix entry (i, j) in the svec encoding.

    The result is symmetric in (i, j). With i <= j,
    ``svec_index(i, j, n) == i*n - i*(i-1)/2 + (j - i)``, and

        A[i, j] == svec(A)[svec_index(i, j, n)] / factor

    where factor is sqrt(2) for i != j and 1 on the diagonal.

    Raises:
        DomainError: If n < 1 or i, j lie outside [0, n)
    """
    for name, value in (("i", i), ("j", j), ("n", n)):
        if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
            raise DomainError(f"{name} must be an integer, got {type(value).__name__}",
                              parameter=name, expected="int", actual=type(value).__name__)
    if n < 1:
        raise DomainError(f"Matrix order must be >= 1, got {n}", parameter="n",
                          expected=">= 1", actual=int(n))
    if not (0 <= i < n and 0 <= j < n):
        raise DomainError(
            f"Index ({i}, {j}) out of range for {n}x{n} matrix",
            parameter="(i, j)",
            expected=f"[0, {n})",
            actual=(int(i), int(j)),
        )
    if i > j:
        i, j = j, i
    return int(i * n - i * (i - 1) // 2 + (j - i))


def _triangle(n: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    rows, cols = np.triu_indices(n)
    scale = np.where(rows == cols, 1.0, SQRT2)
    return rows, cols, scale


def _svec(arr: np.ndarray) -> np.ndarray:
    rows, cols, scale = _triangle(arr.shape[0])
    return arr[rows, cols] * scale


def _smat(values: np.ndarray, n: int) -> np.ndarray:
    rows, cols, scale = _triangle(n)
    entries = values / scale
    out = np.empty((n, n), dtype=np.float64)
    out[rows, cols] = entries
    out[cols, rows] = entries
    return out


def svec(a: Any, atol: Optional[float] = None) -> Any:
    """Encode a symmetric matrix as a vector of length n(n+1)/2.

    Only the upper triangle is read. The input must be symmetric up to
    ``atol * max(1, max|A|)``; anything else is rejected rather than silently
    symmetrized.

    Args:
        a: Symmetric matrix [n, n]
        atol: Symmetry tolerance, defaults to SYMMETRY_TOLERANCE

    Returns:
        Vector [n(n+1)/2]

    Raises:
        ShapeError: If a is not square
        DomainError: If a is not symmetric

    Example:
        >>> svec(np.array([[1.0, 2.5], [2.5, 4.0]]))
        array([1.        , 3.53553391, 4.        ])
    """
    arr = as_square(a, "a")
    if atol is None:
        atol = Config.numerical.SYMMETRY_TOLERANCE

    if arr.size:
        asymmetry = float(np.max(np.abs(arr - arr.T)))
        scale = max(1.0, float(np.max(np.abs(arr))))
        if asymmetry > atol * scale:
            raise DomainError(
                f"a must be symmetric (max |a - a^T| = {asymmetry:.3e})",
                parameter="a",
                expected=f"asymmetry <= {atol * scale:.3e}",
                actual=asymmetry,
            )

    return restore_type(_svec(arr), a)


def smat(v: Any) -> Any:
    """Decode an svec encoding back into the full symmetric matrix.

    Args:
        v: Vector of length n(n+1)/2

    Returns:
        Symmetric matrix [n, n]

    Raises:
        ShapeError: If the length is not a triangular number
    """
    values = as_vector(v, "v")
    n = smat_dim(values.size)
    return restore_type(_smat(values, n), v)
