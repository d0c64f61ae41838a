"""Validation utilities for matrix and vector inputs.

Every public operation funnels its inputs through these helpers: they accept
numpy arrays, torch tensors and nested sequences, check dimensionality and
finiteness, and hand back float64 numpy arrays. ``restore_type`` converts
results back to a tensor when the caller passed one in.
"""

import logging
from typing import Any, Optional

import numpy as np
import torch

from .config import Config
from .exceptions import ValidationError, ShapeError, DegenerateMatrixError

logger = logging.getLogger(__name__)


def as_array(x: Any, name: str = "x", ndim: Optional[int] = None) -> np.ndarray:
    """Convert an input to a finite float64 numpy array.

    Args:
        x: numpy array, torch tensor or nested sequence of numbers
        name: Name for error messages
        ndim: Required number of dimensions (None to skip the check)

    Returns:
        float64 numpy array (a copy when the input was a tensor)

    Raises:
        ValidationError: If the type is unsupported or values are not finite
        ShapeError: If the dimensionality is wrong
    """
    if isinstance(x, torch.Tensor):
        if x.is_complex():
            raise ValidationError(f"{name} must be real-valued", parameter=name,
                                  expected="real dtype", actual=str(x.dtype))
        arr = x.detach().cpu().to(torch.float64).numpy()
    elif isinstance(x, (np.ndarray, list, tuple)) or np.isscalar(x):
        arr = np.asarray(x)
        if np.iscomplexobj(arr):
            raise ValidationError(f"{name} must be real-valued", parameter=name,
                                  expected="real dtype", actual=str(arr.dtype))
        try:
            arr = arr.astype(np.float64, copy=False)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"{name} must be numeric: {e}", parameter=name) from e
    else:
        raise ValidationError(
            f"{name} must be numpy.ndarray or torch.Tensor, got {type(x).__name__}",
            parameter=name,
            expected="numpy.ndarray or torch.Tensor",
            actual=type(x).__name__,
        )

    if ndim is not None and arr.ndim != ndim:
        raise ShapeError(
            f"{name} must be {ndim}D, got {arr.ndim}D",
            parameter=name,
            expected=f"{ndim} dimensions",
            actual=f"{arr.ndim} dimensions",
        )

    if not np.all(np.isfinite(arr)):
        raise ValidationError(f"{name} contains NaN or Inf values", parameter=name,
                              expected="finite values")

    return arr


def as_vector(x: Any, name: str = "vec") -> np.ndarray:
    """Convert an input to a 1D float64 array; (n, 1) columns are flattened."""
    arr = as_array(x, name)
    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr[:, 0]
    if arr.ndim != 1:
        raise ShapeError(
            f"{name} must be a vector, got shape {arr.shape}",
            parameter=name,
            expected="1D or (n, 1)",
            actual=arr.shape,
        )
    return arr


def as_square(x: Any, name: str = "A") -> np.ndarray:
    """Convert an input to a square float64 matrix."""
    arr = as_array(x, name, ndim=2)
    if arr.shape[0] != arr.shape[1]:
        raise ShapeError(
            f"{name} must be square matrix, got shape {arr.shape}",
            parameter=name,
            expected="square",
            actual=arr.shape,
        )
    return arr


def restore_type(result: np.ndarray, like: Any) -> Any:
    """Return ``result`` as a tensor matching ``like`` when ``like`` is one."""
    if isinstance(like, torch.Tensor):
        dtype = like.dtype if like.is_floating_point() else torch.float64
        return torch.from_numpy(np.ascontiguousarray(result)).to(dtype=dtype, device=like.device)
    return result


def check_writable(x: Any, name: str, operation: str) -> None:
    """Require ``x`` to be a target an in-place operation can overwrite.

    Accepted targets are floating-point tensors and writable floating-point
    numpy arrays. Anything else (lists, integer arrays or tensors, read-only
    arrays) raises before any computation runs.

    Raises:
        ValidationError: If ``x`` cannot hold the result in place
    """
    if isinstance(x, torch.Tensor):
        if x.is_floating_point():
            return
        actual = f"torch.Tensor of {x.dtype}"
    elif isinstance(x, np.ndarray):
        if x.flags.writeable and np.issubdtype(x.dtype, np.floating):
            return
        actual = f"{'read-only ' if not x.flags.writeable else ''}numpy.ndarray of {x.dtype}"
    else:
        actual = type(x).__name__
    raise ValidationError(
        f"{operation} needs a writable float array or tensor, got {actual}",
        parameter=name,
        expected="writable floating-point numpy.ndarray or torch.Tensor",
        actual=actual,
    )


def write_into(target: Any, result: np.ndarray) -> Any:
    """Copy ``result`` into a target accepted by :func:`check_writable`."""
    if isinstance(target, torch.Tensor):
        with torch.no_grad():
            target.copy_(torch.from_numpy(np.ascontiguousarray(result)).reshape(target.shape))
    else:
        target[...] = result.reshape(target.shape)
    return target


def spectral_threshold(values: np.ndarray, tolerance: Optional[float] = None) -> float:
    """Threshold at or below which a spectral value counts as zero.

    Args:
        values: Eigenvalues or singular values
        tolerance: Absolute threshold overriding the configured one

    Returns:
        max(ABSOLUTE_TOLERANCE, RELATIVE_TOLERANCE * max|values|), or
        ``tolerance`` when given
    """
    if tolerance is not None:
        return float(tolerance)
    numerical = Config.numerical
    scale = float(np.max(np.abs(values))) if values.size else 0.0
    return max(numerical.ABSOLUTE_TOLERANCE, numerical.RELATIVE_TOLERANCE * scale)


def check_spectrum(
    values: np.ndarray,
    operation: str,
    tolerance: Optional[float] = None
) -> None:
    """Raise DegenerateMatrixError if any spectral value is numerically zero.

    Negative values within the threshold are treated as rounding noise of a
    zero eigenvalue and are degenerate too.
    """
    threshold = spectral_threshold(values, tolerance)
    if values.size == 0:
        return
    min_value = float(np.min(values))
    if min_value <= threshold:
        n_degenerate = int(np.sum(values <= threshold))
        logger.warning(
            f"{operation}: {n_degenerate} spectral values at or below {threshold:.3e} "
            f"(smallest {min_value:.3e})"
        )
        raise DegenerateMatrixError(
            f"{operation}: matrix is rank deficient "
            f"({n_degenerate} of {values.size} spectral values <= {threshold:.3e})",
            operation=operation,
            threshold=threshold,
            min_value=min_value,
        )
