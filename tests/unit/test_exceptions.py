"""Unit tests for custom exception hierarchy."""

import pytest

from linalgkit.utils.exceptions import (
    LinalgKitError,
    ValidationError,
    ShapeError,
    DomainError,
    ComputationError,
    DegenerateMatrixError,
    ConfigurationError,
)


class TestLinalgKitError:
    """Test base LinalgKitError class."""

    def test_basic_creation(self):
        """Test basic exception creation."""
        error = LinalgKitError("Test error message")

        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.context == {}
        assert error.recoverable is False

    def test_string_representation_with_context(self):
        """Test string representation with context."""
        error = LinalgKitError("Test error", context={"param": "value", "count": 10})

        error_str = str(error)
        assert "Test error" in error_str
        assert "param=value" in error_str
        assert "count=10" in error_str

    def test_to_dict_method(self):
        """Test to_dict method."""
        error = LinalgKitError("Test message", context={"test": "value"}, recoverable=True)

        error_dict = error.to_dict()

        assert error_dict["type"] == "LinalgKitError"
        assert error_dict["message"] == "Test message"
        assert error_dict["context"] == {"test": "value"}
        assert error_dict["recoverable"] is True

    def test_large_context_value_truncated(self):
        """A whole matrix in the context does not flood the message."""
        error = LinalgKitError("Big", context={"matrix": "x" * 5000})

        assert len(str(error.context["matrix"])) <= 1000
        assert error.context["matrix"].endswith("...")

    def test_non_string_keys(self):
        error = LinalgKitError("Keys", context={1: "one"})
        assert error.context == {"1": "one"}


class TestValidationErrors:
    """Test ValidationError and its subclasses."""

    def test_creation_with_parameter_info(self):
        """Test creation with parameter information."""
        error = ValidationError(
            "Invalid parameter",
            parameter="x",
            expected="2D",
            actual="1D"
        )

        assert "Invalid parameter" in str(error)
        assert error.context["parameter"] == "x"
        assert error.context["expected"] == "2D"
        assert error.context["actual"] == "1D"
        assert error.recoverable is True

    @pytest.mark.parametrize("cls", [ShapeError, DomainError])
    def test_subclasses(self, cls):
        error = cls("Bad input", parameter="a")

        assert isinstance(error, ValidationError)
        assert isinstance(error, LinalgKitError)
        assert error.recoverable is True
        assert error.to_dict()["type"] == cls.__name__


class TestComputationErrors:
    """Test ComputationError and DegenerateMatrixError."""

    def test_creation_with_operation_info(self):
        """Test creation with operation information."""
        error = ComputationError(
            "Decomposition failed",
            operation="eigh",
            values={"dimension": 5}
        )

        assert error.context["operation"] == "eigh"
        assert error.context["dimension"] == 5
        assert error.recoverable is False

    def test_degenerate_matrix_error(self):
        error = DegenerateMatrixError(
            "Rank deficient",
            operation="whiten_using_eig",
            threshold=1e-10,
            min_value=-3e-17,
        )

        assert isinstance(error, ComputationError)
        assert error.context["operation"] == "whiten_using_eig"
        assert error.context["threshold"] == 1e-10
        assert error.context["min_value"] == -3e-17
        assert "threshold=1e-10" in str(error)


class TestConfigurationError:
    """Test ConfigurationError class."""

    def test_creation_with_config_info(self):
        """Test creation with configuration information."""
        error = ConfigurationError(
            "Invalid config value",
            config_key="tolerance",
            config_value=-1
        )

        assert error.context["config_key"] == "tolerance"
        assert error.context["config_value"] == -1
        assert error.recoverable is True


class TestExceptionHierarchy:
    """Test exception hierarchy behavior."""

    @pytest.mark.parametrize("cls", [
        ValidationError, ShapeError, DomainError,
        ComputationError, DegenerateMatrixError, ConfigurationError,
    ])
    def test_catch_with_base_class(self, cls):
        with pytest.raises(LinalgKitError):
            raise cls("Test")

    def test_shape_error_not_computation_error(self):
        assert not issubclass(ShapeError, ComputationError)
        assert not issubclass(DegenerateMatrixError, ValidationError)
