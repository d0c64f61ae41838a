"""Symmetric orthogonalization of matrix columns.

W = X (X^T X)^(-1/2) is the matrix with orthonormal columns closest to X in
Frobenius norm. The inverse square root of the Gram matrix is built from its
eigendecomposition, G = E L E^T, as E L^(-1/2) E^T.
"""

import logging
from typing import Any, Optional

import numpy as np

from .power import vector_power
from ..utils.exceptions import ComputationError, ConfigurationError, ShapeError
from ..utils.validation import as_array, check_spectrum, check_writable, restore_type, write_into

logger = logging.getLogger(__name__)


def _orthogonalize(arr: np.ndarray, tolerance: Optional[float]) -> np.ndarray:
    if tolerance is not None and tolerance < 0:
        raise ConfigurationError(
            f"tolerance must be non-negative, got {tolerance}",
            config_key="tolerance",
            config_value=tolerance,
        )
    if arr.shape[1] == 0:
        raise ShapeError("x must have at least one column", parameter="x",
                         expected=">= 1 columns", actual=arr.shape)
    gram = arr.T @ arr
    gram = (gram + gram.T) / 2
    try:
        eigenvals, eigenvecs = np.linalg.eigh(gram)
    except np.linalg.LinAlgError as e:
        raise ComputationError(f"Eigendecomposition of Gram matrix failed: {e}",
                               operation="orthogonalize") from e

    check_spectrum(eigenvals, "orthogonalize", tolerance)
    logger.debug(
        f"orthogonalize: {arr.shape[1]} columns, Gram spectrum "
        f"[{eigenvals.min():.3e}, {eigenvals.max():.3e}]"
    )
    vector_power(eigenvals, -0.5)
    inv_sqrt = (eigenvecs * eigenvals) @ eigenvecs.T
    return arr @ inv_sqrt


def orthogonalize(x: Any, tolerance: Optional[float] = None) -> Any:
    """Return X (X^T X)^(-1/2), whose columns are orthonormal.

    Args:
        x: Matrix [n_rows, n_cols] with full column rank
        tolerance: Absolute threshold for Gram eigenvalues

    Returns:
        New matrix of the same shape

    Raises:
        ShapeError: If x is not 2D or has no columns
        DegenerateMatrixError: If x is column-rank deficient
    """
    arr = as_array(x, "x", ndim=2)
    return restore_type(_orthogonalize(arr, tolerance), x)


def orthogonalize_(x: Any, tolerance: Optional[float] = None) -> Any:
    """In-place variant of :func:`orthogonalize`.

    ``x`` must be a writable floating-point numpy array or tensor. It is only
    overwritten once the result has been computed successfully.
    """
    check_writable(x, "x", "orthogonalize_")
    arr = as_array(x, "x", ndim=2)
    return write_into(x, _orthogonalize(arr, tolerance))
