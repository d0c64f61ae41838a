"""Unit tests for the sign-preserving vector power."""

import numpy as np
import pytest
import torch

from linalgkit.core import vector_power
from linalgkit.utils.exceptions import DomainError, ShapeError, ValidationError


class TestVectorPower:
    """Test vector_power."""

    def test_sign_preserved(self):
        vec = np.array([4.0, -9.0, 0.25])
        vector_power(vec, 0.5)
        np.testing.assert_allclose(vec, [2.0, -3.0, 0.5])

    def test_negative_fractional_power(self):
        """Eigenvalue-style use: -0.5 never produces NaN."""
        vec = np.array([4.0, -1e-3, 16.0])
        vector_power(vec, -0.5)

        assert np.all(np.isfinite(vec))
        np.testing.assert_allclose(vec, [0.5, -1 / np.sqrt(1e-3), 0.25])

    def test_in_place(self):
        vec = np.array([1.0, 2.0, 3.0])
        result = vector_power(vec, 2)

        assert result is vec
        np.testing.assert_array_equal(vec, [1.0, 4.0, 9.0])

    def test_zero_positive_power(self):
        vec = np.array([0.0, -2.0])
        vector_power(vec, 3)
        np.testing.assert_array_equal(vec, [0.0, -8.0])

    @pytest.mark.parametrize("power", [0, -0.5, -2])
    def test_zero_non_positive_power(self, power):
        vec = np.array([1.0, 0.0, 2.0])
        with pytest.raises(DomainError, match="non-positive power"):
            vector_power(vec, power)
        # Fail fast: nothing modified
        np.testing.assert_array_equal(vec, [1.0, 0.0, 2.0])

    def test_power_zero_gives_signs(self):
        vec = np.array([3.0, -0.5])
        vector_power(vec, 0)
        np.testing.assert_array_equal(vec, [1.0, -1.0])

    @pytest.mark.parametrize("vec", [
        [1.0, -4.0],
        np.array([4, 9]),
        torch.tensor([4, 9]),
    ])
    def test_non_float_target_rejected(self, vec):
        with pytest.raises(ValidationError, match="writable float array"):
            vector_power(vec, 0.5)

    def test_read_only_rejected(self):
        vec = np.array([4.0, 9.0])
        vec.flags.writeable = False
        with pytest.raises(ValidationError, match="read-only"):
            vector_power(vec, 0.5)
        np.testing.assert_array_equal(vec, [4.0, 9.0])

    @pytest.mark.parametrize("values,power", [([1e-200, 1.0], -2), ([1e200, -1.0], 2)])
    def test_overflow_raises(self, values, power):
        vec = np.array(values)
        with pytest.raises(DomainError, match="overflows") as exc_info:
            vector_power(vec, power)
        assert "[0]" in exc_info.value.context["actual"]
        np.testing.assert_array_equal(vec, values)

    def test_column_vector(self):
        vec = np.array([[4.0], [-16.0]])
        vector_power(vec, 0.5)
        np.testing.assert_allclose(vec, [[2.0], [-4.0]])

    def test_matrix_rejected(self):
        with pytest.raises(ShapeError):
            vector_power(np.ones((2, 2)), 2)

    def test_tensor_in_place(self):
        vec = torch.tensor([-8.0, 27.0])
        result = vector_power(vec, 1 / 3)

        assert result is vec
        assert torch.allclose(vec, torch.tensor([-2.0, 3.0]))
