"""Symmetric Kronecker product with the identity.

For a square matrix A, the map

    T(X) = (A X + X A^T) / 2

sends symmetric matrices to symmetric matrices. ``sym_kron_id`` returns the
matrix of T in svec coordinates, i.e. the operator ``op`` with

    smat(op @ svec(X)) == (A X + X A^T) / 2

for every symmetric X. This is the (A (x)s I) operator used when Lyapunov-type
terms appear in semidefinite programs written over svec unknowns.
"""

import logging
from typing import Any

import numpy as np

from .svec import SQRT2, _svec, svec_dim, svec_index
from ..utils.validation import as_square, restore_type

logger = logging.getLogger(__name__)


def sym_kron_id(a: Any) -> Any:
    """Matrix of X -> (A X + X A^T)/2 acting on svec encodings.

    Column svec_index(i, j, n) is the svec of T(E_ij), where E_ij is the
    symmetric basis matrix with svec(E_ij) equal to the corresponding unit
    vector: a single 1 at (i, i) on the diagonal, and 1/sqrt(2) at both
    (i, j) and (j, i) off the diagonal.

    Args:
        a: Square matrix [n, n]; need not be symmetric

    Returns:
        Operator [n(n+1)/2, n(n+1)/2]

    Raises:
        ShapeError: If a is not square
    """
    arr = as_square(a, "A")
    n = arr.shape[0]
    m = svec_dim(n)
    op = np.zeros((m, m), dtype=np.float64)

    for i in range(n):
        for j in range(i, n):
            # A @ E_ij only has non-zero columns i and j
            product = np.zeros((n, n), dtype=np.float64)
            if i == j:
                product[:, i] = arr[:, i]
            else:
                product[:, i] = arr[:, j] / SQRT2
                product[:, j] = arr[:, i] / SQRT2
            image = (product + product.T) / 2
            op[:, svec_index(i, j, n)] = _svec(image)

    logger.debug(f"sym_kron_id: built {m}x{m} operator for {n}x{n} input")
    return restore_type(op, a)
