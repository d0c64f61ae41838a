"""Shared test fixtures for the linalgkit test suite."""

import pytest
import tempfile
import shutil
from pathlib import Path

import numpy as np

from linalgkit.utils.logging import shutdown_logging


@pytest.fixture(scope="function", autouse=True)
def cleanup_logging():
    """Clean up logging after each test."""
    yield
    shutdown_logging()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def rng():
    """Seeded generator so every test draws the same data."""
    return np.random.default_rng(42)


@pytest.fixture
def correlated_data(rng):
    """5 correlated dimensions x 2000 observations with a non-zero mean."""
    mixing = rng.standard_normal((5, 5)) + 2 * np.eye(5)
    latent = rng.standard_normal((5, 2000))
    return mixing @ latent + np.arange(5, dtype=float)[:, None]


@pytest.fixture
def rank_deficient_data(rng):
    """3 dimensions of which the third is the sum of the first two."""
    base = rng.standard_normal((2, 200))
    return np.vstack([base, base.sum(axis=0, keepdims=True)])


@pytest.fixture
def symmetric_matrix(rng):
    """Random symmetric 6x6 matrix."""
    a = rng.standard_normal((6, 6))
    return (a + a.T) / 2
