"""linalgkit: numeric primitives for dense real matrices.

This package provides:

- Centering and whitening of multivariate data (SVD and eigen variants)
- Sign-preserving fractional powers of spectra
- Random unit vectors and symmetric orthogonalization
- Row removal
- The svec/smat encoding of symmetric matrices and the symmetric
  Kronecker product with the identity, for SDP-style formulations

Inputs may be numpy arrays or torch tensors; tensors come back as tensors.
"""

__version__ = "0.1.0"

from .core import (
    vector_power,
    center,
    covariance,
    whiten_using_svd,
    whiten_using_eig,
    WhiteningProcessor,
    rand_vector,
    make_rng,
    orthogonalize,
    orthogonalize_,
    remove_rows,
)
from .symmetric import svec, smat, svec_index, svec_dim, smat_dim, sym_kron_id
from .utils.logging import setup_logger
from .utils.exceptions import (
    LinalgKitError,
    ValidationError,
    ShapeError,
    DomainError,
    ComputationError,
    DegenerateMatrixError,
    ConfigurationError,
)

__all__ = [
    "__version__",
    # Transforms
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
    # Symmetric encoding
    "svec",
    "smat",
    "svec_index",
    "svec_dim",
    "smat_dim",
    "sym_kron_id",
    # Utilities
    "setup_logger",
    # Exceptions
    "LinalgKitError",
    "ValidationError",
    "ShapeError",
    "DomainError",
    "ComputationError",
    "DegenerateMatrixError",
    "ConfigurationError",
]
