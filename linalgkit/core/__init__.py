"""Dense matrix transforms.

This module contains the statistical and geometric primitives:
- Sign-preserving elementwise powers
- Centering and covariance
- SVD- and eigen-based whitening
- Random unit vectors
- Symmetric orthogonalization
- Row removal
"""

from .power import vector_power
from .centering import center, covariance
from .whitening import whiten_using_svd, whiten_using_eig, WhiteningProcessor
from .random import rand_vector, make_rng
from .orthogonalize import orthogonalize, orthogonalize_
from .rows import remove_rows

__all__ = [
    "vector_power",
    "center",
    "covariance",
    "whiten_using_svd",
    "whiten_using_eig",
    "WhiteningProcessor",
    "rand_vector",
    "make_rng",
    "orthogonalize",
    "orthogonalize_",
    "remove_rows",
]
