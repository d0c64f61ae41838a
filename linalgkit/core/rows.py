"""Row removal."""

from typing import Any, Iterable

import numpy as np

from ..utils.exceptions import DomainError
from ..utils.validation import as_array, restore_type


def remove_rows(x: Any, rows_to_remove: Iterable[int]) -> Any:
    """Copy ``x`` without the given rows.

    Retained rows keep their relative order. The indices may come in any
    order.

    Args:
        x: Input matrix [n_rows, n_cols]
        rows_to_remove: Unique row indices in [0, n_rows)

    Returns:
        Matrix [n_rows - len(rows_to_remove), n_cols]

    Raises:
        DomainError: If an index is not an integer, out of range or duplicated
    """
    arr = as_array(x, "x", ndim=2)
    n_rows = arr.shape[0]

    try:
        indices = np.asarray(list(rows_to_remove))
    except TypeError as e:
        raise DomainError(
            f"Row indices must be an iterable of integers, got {type(rows_to_remove).__name__}",
            parameter="rows_to_remove",
            expected="iterable of integers",
            actual=type(rows_to_remove).__name__,
        ) from e
    if indices.size and (indices.ndim != 1 or not np.issubdtype(indices.dtype, np.integer)):
        raise DomainError(
            "Row indices must be integers",
            parameter="rows_to_remove",
            expected="integers",
            actual=str(indices.dtype),
        )
    indices = indices.astype(np.int64)

    out_of_range = indices[(indices < 0) | (indices >= n_rows)]
    if out_of_range.size:
        raise DomainError(
            f"Row indices must be in range [0, {n_rows - 1}]",
            parameter="rows_to_remove",
            actual=out_of_range.tolist(),
        )

    unique, counts = np.unique(indices, return_counts=True)
    if np.any(counts > 1):
        raise DomainError(
            "Row indices contain duplicates",
            parameter="rows_to_remove",
            actual=unique[counts > 1].tolist(),
        )

    keep = np.ones(n_rows, dtype=bool)
    keep[indices] = False
    return restore_type(arr[keep].copy(), x)
