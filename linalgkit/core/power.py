"""Sign-preserving elementwise power.

Eigenvalues of a covariance matrix can come out slightly negative from
rounding. Raising them to a fractional power with ``np.power`` would give
NaN, so the magnitude is raised and the sign re-applied instead.
"""

from typing import Any

import numpy as np

from ..utils.exceptions import DomainError
from ..utils.validation import as_vector, check_writable, write_into


def _signed_power(values: np.ndarray, power: float) -> np.ndarray:
    if power <= 0 and np.any(values == 0):
        zero_idx = np.flatnonzero(values == 0)
        raise DomainError(
            f"Cannot raise zero to non-positive power {power}",
            parameter="vec",
            expected="non-zero elements",
            actual=f"zeros at indices {zero_idx.tolist()}",
        )
    with np.errstate(over="ignore"):
        result = np.sign(values) * np.abs(values) ** power
    overflow_idx = np.flatnonzero(~np.isfinite(result))
    if overflow_idx.size:
        raise DomainError(
            f"Power {power} overflows float64",
            parameter="vec",
            expected="finite result",
            actual=f"overflow at indices {overflow_idx.tolist()}",
        )
    return result


def vector_power(vec: Any, power: float) -> Any:
    """Raise every element to ``power`` in place while keeping its sign.

    For each element v the result is ``sign(v) * |v| ** power``.

    Args:
        vec: Writable floating-point 1D numpy array or tensor (an (n, 1)
            column is accepted)
        power: Real exponent

    Returns:
        ``vec``, overwritten with the result

    Raises:
        ValidationError: If ``vec`` cannot be written in place
        DomainError: If a zero element would be raised to a power <= 0, or
            the result overflows. Nothing is modified in either case.
    """
    check_writable(vec, "vec", "vector_power")
    values = as_vector(vec)
    return write_into(vec, _signed_power(values, float(power)))
