"""Centering and covariance of data matrices.

Data matrices follow the column-observation convention: rows are
dimensions (features) and columns are observations.
"""

from typing import Any

import numpy as np

from ..utils.exceptions import ShapeError
from ..utils.validation import as_array, restore_type


def center(x: Any) -> Any:
    """Subtract the mean observation from every column.

    Args:
        x: Data matrix [n_dims, n_observations]

    Returns:
        Centered matrix of the same shape; every row has zero mean
    """
    arr = as_array(x, "x", ndim=2)
    if arr.shape[1] == 0:
        return restore_type(arr.copy(), x)
    centered = arr - arr.mean(axis=1, keepdims=True)
    return restore_type(centered, x)


def covariance(x: Any) -> Any:
    """Sample covariance of the columns of ``x``.

    Computes ``(x - mean)(x - mean)^T / (N - 1)`` where the mean is taken
    across observations.

    Args:
        x: Data matrix [n_dims, n_observations]

    Returns:
        Symmetric covariance matrix [n_dims, n_dims]

    Raises:
        ShapeError: If fewer than two observations are given
    """
    arr = as_array(x, "x", ndim=2)
    return restore_type(_covariance(arr), x)


def _covariance(arr: np.ndarray) -> np.ndarray:
    n_obs = arr.shape[1]
    if n_obs < 2:
        raise ShapeError(
            f"Need at least 2 observations for covariance, got {n_obs}",
            parameter="x",
            expected=">= 2 columns",
            actual=n_obs,
        )
    centered = arr - arr.mean(axis=1, keepdims=True)
    cov = centered @ centered.T / (n_obs - 1)
    # Exact symmetry for the downstream eigensolvers
    return (cov + cov.T) / 2
