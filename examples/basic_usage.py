#!/usr/bin/env python3
"""Examples of the linalgkit API.

1. Whitening correlated data with both decompositions
2. Orthogonalizing a whitening matrix
3. Writing a Lyapunov-type constraint over svec unknowns
"""

import numpy as np

from linalgkit import (
    center,
    covariance,
    whiten_using_svd,
    whiten_using_eig,
    orthogonalize,
    rand_vector,
    svec,
    smat,
    sym_kron_id,
    setup_logger,
)


def whitening_example(rng):
    """Whiten 3 correlated signals observed 1000 times."""
    mixing = np.array([[2.0, 0.5, 0.0], [0.5, 1.0, 0.3], [0.0, 0.3, 0.5]])
    x = mixing @ rng.standard_normal((3, 1000)) + 5.0
    x = center(x)

    for name, whiten in [("svd", whiten_using_svd), ("eig", whiten_using_eig)]:
        x_white, w = whiten(x)
        error = np.linalg.norm(covariance(x_white) - np.eye(3))
        print(f"{name}: ||cov(Wx) - I|| = {error:.2e}")

    q = orthogonalize(w)
    print(f"orthogonalized: ||Q^T Q - I|| = {np.linalg.norm(q.T @ q - np.eye(3)):.2e}")


def lyapunov_example(rng):
    """Express (A X + X A^T)/2 as a matrix acting on svec(X)."""
    a = rng.standard_normal((3, 3))
    x = np.outer(rand_vector(3, rng), rand_vector(3, rng))
    x = x + x.T

    op = sym_kron_id(a)
    direct = (a @ x + x @ a.T) / 2
    via_svec = smat(op @ svec(x))
    print(f"operator size {op.shape}, max deviation {np.max(np.abs(direct - via_svec)):.2e}")


if __name__ == "__main__":
    setup_logger(level="DEBUG", format_type="simple")
    rng = np.random.default_rng(0)
    whitening_example(rng)
    lyapunov_example(rng)
