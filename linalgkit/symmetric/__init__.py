"""Vector encoding of symmetric matrices.

svec/smat map symmetric n x n matrices to R^(n(n+1)/2) and back while
preserving the Frobenius inner product; sym_kron_id builds the svec-space
operator of X -> (A X + X A^T)/2.
"""

from .svec import svec, smat, svec_index, svec_dim, smat_dim
from .kronecker import sym_kron_id

__all__ = [
    "svec",
    "smat",
    "svec_index",
    "svec_dim",
    "smat_dim",
    "sym_kron_id",
]
