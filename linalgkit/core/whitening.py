"""Whitening transforms for multivariate data.

Whitening maps data X (rows = dimensions, columns = observations) to W X
whose sample covariance is the identity:

- SVD variant (ZCA): C = U S V^T,  W = U S^(-1/2) U^T
- Eigen variant (PCA): C = E L E^T, W = L^(-1/2) E^T

Both variants treat a rank-deficient covariance as an error: any singular
value or eigenvalue at or below the configured threshold raises
DegenerateMatrixError. Nothing is clamped, so the caller always receives
either an exact whitening matrix or an exception.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import numpy as np

from .centering import _covariance
from .power import vector_power
from ..utils.exceptions import ComputationError, ConfigurationError, ShapeError
from ..utils.validation import as_array, check_spectrum, restore_type

logger = logging.getLogger(__name__)


def _validate_tolerance(tolerance: Optional[float]) -> None:
    if tolerance is not None and tolerance < 0:
        raise ConfigurationError(
            f"tolerance must be non-negative, got {tolerance}",
            config_key="tolerance",
            config_value=tolerance,
        )


def _svd_whitening_matrix(cov: np.ndarray, tolerance: Optional[float]) -> Tuple[np.ndarray, np.ndarray]:
    try:
        u, s, _ = np.linalg.svd(cov)
    except np.linalg.LinAlgError as e:
        raise ComputationError(f"SVD of covariance failed: {e}", operation="whiten_using_svd") from e

    check_spectrum(s, "whiten_using_svd", tolerance)
    spectrum = s.copy()
    vector_power(s, -0.5)
    return (u * s) @ u.T, spectrum


def _eig_whitening_matrix(cov: np.ndarray, tolerance: Optional[float]) -> Tuple[np.ndarray, np.ndarray]:
    try:
        eigenvals, eigenvecs = np.linalg.eigh(cov)
    except np.linalg.LinAlgError as e:
        raise ComputationError(f"Eigendecomposition of covariance failed: {e}",
                               operation="whiten_using_eig") from e

    # Sort in descending order
    idx = np.argsort(eigenvals)[::-1]
    eigenvals = eigenvals[idx]
    eigenvecs = eigenvecs[:, idx]

    check_spectrum(eigenvals, "whiten_using_eig", tolerance)
    spectrum = eigenvals.copy()
    vector_power(eigenvals, -0.5)
    return eigenvals[:, None] * eigenvecs.T, spectrum


_METHODS = {
    "svd": _svd_whitening_matrix,
    "eig": _eig_whitening_matrix,
}


def _as_data(x: Any) -> np.ndarray:
    arr = as_array(x, "x", ndim=2)
    if arr.shape[0] == 0:
        raise ShapeError("x must have at least one dimension (row)", parameter="x",
                         expected=">= 1 rows", actual=arr.shape)
    return arr


def _whiten(x: Any, method: str, tolerance: Optional[float]) -> Tuple[Any, Any]:
    _validate_tolerance(tolerance)
    arr = _as_data(x)
    cov = _covariance(arr)
    whitening_matrix, spectrum = _METHODS[method](cov, tolerance)
    logger.debug(
        f"whiten ({method}): {arr.shape[0]} dims x {arr.shape[1]} observations, "
        f"condition number {spectrum.max() / spectrum.min():.3e}"
    )
    x_whitened = whitening_matrix @ arr
    return restore_type(x_whitened, x), restore_type(whitening_matrix, x)


def whiten_using_svd(x: Any, tolerance: Optional[float] = None) -> Tuple[Any, Any]:
    """Whiten data using the SVD of its covariance matrix.

    Args:
        x: Data matrix [n_dims, n_observations]
        tolerance: Absolute threshold for singular values; defaults to
            max(ABSOLUTE_TOLERANCE, RELATIVE_TOLERANCE * s_max)

    Returns:
        Tuple of (x_whitened, whitening_matrix) with
        x_whitened = whitening_matrix @ x

    Raises:
        ShapeError: If x is not 2D, has no rows or has fewer than two
            observations
        DegenerateMatrixError: If the covariance is rank deficient
    """
    return _whiten(x, "svd", tolerance)


def whiten_using_eig(x: Any, tolerance: Optional[float] = None) -> Tuple[Any, Any]:
    """Whiten data using the eigendecomposition of its covariance matrix.

    The whitening matrix rotates into the eigenbasis (eigenvalues in
    descending order) and rescales each axis to unit variance.

    Args:
        x: Data matrix [n_dims, n_observations]
        tolerance: Absolute threshold for eigenvalues

    Returns:
        Tuple of (x_whitened, whitening_matrix)

    Raises:
        ShapeError: If x is not 2D, has no rows or has fewer than two
            observations
        DegenerateMatrixError: If the covariance is rank deficient
    """
    return _whiten(x, "eig", tolerance)


class WhiteningProcessor:
    """Fit a whitening transform on one data set and apply it to others.

    Example:
        >>> wp = WhiteningProcessor(method="eig")
        >>> train_white = wp.fit_transform(train)
        >>> test_white = wp.transform(test)
    """

    def __init__(self, method: str = "svd", tolerance: Optional[float] = None,
                 center: bool = True):
        """Initialize whitening processor.

        Args:
            method: 'svd' (ZCA) or 'eig' (PCA whitening)
            tolerance: Absolute spectral threshold for degeneracy
            center: Whether transform subtracts the fitted mean first
        """
        if method not in _METHODS:
            raise ConfigurationError(
                f"Unknown whitening method '{method}', expected one of {sorted(_METHODS)}",
                config_key="method",
                config_value=method,
            )
        _validate_tolerance(tolerance)
        self.method = method
        self.tolerance = tolerance
        self.center = center
        self.mean_: Optional[np.ndarray] = None
        self.whitening_matrix_: Optional[np.ndarray] = None
        self.info: Dict[str, Any] = {}

    def fit(self, x: Any) -> "WhiteningProcessor":
        """Compute the whitening matrix of ``x``.

        Args:
            x: Data matrix [n_dims, n_observations]

        Returns:
            self
        """
        arr = _as_data(x)
        cov = _covariance(arr)
        whitening_matrix, spectrum = _METHODS[self.method](cov, self.tolerance)

        identity = np.eye(arr.shape[0])
        whitening_error = float(np.linalg.norm(whitening_matrix @ cov @ whitening_matrix.T - identity, 'fro'))

        self.mean_ = arr.mean(axis=1, keepdims=True)
        self.whitening_matrix_ = whitening_matrix
        self.info = {
            'method': self.method,
            'dimension': arr.shape[0],
            'n_observations': arr.shape[1],
            'eigenvalues': spectrum,
            'condition_number': float(spectrum.max() / spectrum.min()),
            'whitening_error': whitening_error,
        }
        logger.info(
            f"Fitted {self.method} whitening on {arr.shape[0]}x{arr.shape[1]} data "
            f"(condition number {self.info['condition_number']:.3e}, "
            f"error {whitening_error:.3e})"
        )
        return self

    def transform(self, x: Any) -> Any:
        """Apply the fitted whitening matrix to ``x``."""
        if self.whitening_matrix_ is None:
            raise ComputationError(
                "WhiteningProcessor must be fitted before transform",
                operation="transform",
            )
        arr = as_array(x, "x", ndim=2)
        if arr.shape[0] != self.whitening_matrix_.shape[1]:
            raise ShapeError(
                f"x has {arr.shape[0]} dimensions, whitening was fitted on "
                f"{self.whitening_matrix_.shape[1]}",
                parameter="x",
                expected=self.whitening_matrix_.shape[1],
                actual=arr.shape[0],
            )
        if self.center:
            arr = arr - self.mean_
        return restore_type(self.whitening_matrix_ @ arr, x)

    def fit_transform(self, x: Any) -> Any:
        """Fit on ``x`` and return its whitened version."""
        return self.fit(x).transform(x)
