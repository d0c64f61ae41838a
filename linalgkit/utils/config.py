"""Configuration constants for linalgkit.

This module centralizes the tolerances shared by the decomposition-based
transforms so that whitening, orthogonalization and the svec encoding agree
on what "numerically zero" and "numerically symmetric" mean.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class NumericalConstants:
    """Numerical stability and tolerance constants."""

    # Smallest norm accepted for a random draw before it is normalized
    STRICT_EPSILON: float = 1e-12

    # Spectral degeneracy: v <= max(ABSOLUTE_TOLERANCE, RELATIVE_TOLERANCE * v_max)
    ABSOLUTE_TOLERANCE: float = 1e-12
    RELATIVE_TOLERANCE: float = 1e-10

    # Maximum |A - A^T| accepted by svec
    SYMMETRY_TOLERANCE: float = 1e-10

    # Redraws allowed for a zero-norm random vector
    MAX_RANDOM_RETRIES: int = 100


@dataclass(frozen=True)
class ValidationConstants:
    """Tolerances used when checking results against identities."""

    # Cov(W X) = I for well-conditioned data
    NUMERICAL_TEST_TOLERANCE: float = 1e-6
    # Exact algebraic identities such as W C W^T = I
    STRICT_TEST_TOLERANCE: float = 1e-8


class Config:
    """Global configuration object containing all constants."""

    numerical = NumericalConstants()
    validation = ValidationConstants()

    @classmethod
    def get_all_constants(cls) -> Dict[str, Any]:
        """Get all constants as a flat dictionary.

        Returns:
            Dictionary with keys like "numerical.STRICT_EPSILON"
        """
        constants = {}

        for attr_name in dir(cls):
            attr = getattr(cls, attr_name)
            if isinstance(attr, (NumericalConstants, ValidationConstants)):
                for field_name in attr.__dataclass_fields__:
                    constants[f"{attr_name}.{field_name}"] = getattr(attr, field_name)

        return constants
