"""Custom exception hierarchy for linalgkit.

All exceptions inherit from the base LinalgKitError class, so callers can
catch every failure raised by the library with a single except clause while
still telling the categories apart.

Exception Categories:
- ValidationError: Input validation failures
  - ShapeError: Wrong dimensionality, non-square or malformed input
  - DomainError: Values outside the domain of an operation
- ComputationError: Numerical computation failures
  - DegenerateMatrixError: Rank-deficient covariance or Gram matrices
- ConfigurationError: Invalid configuration values
"""

from typing import Optional, Any, Dict


class LinalgKitError(Exception):
    """Base exception for all linalgkit errors.

    Attributes:
        message: Error message
        context: Additional context information
        recoverable: Whether the error is potentially recoverable
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        recoverable: bool = False
    ):
        """Initialize base exception.

        Args:
            message: Error message
            context: Additional context information
            recoverable: Whether the error is potentially recoverable
        """
        super().__init__(message)
        self.message = message
        self.context = self._validate_context(context or {})
        self.recoverable = recoverable

    def __str__(self) -> str:
        """Return string representation of the exception."""
        base_msg = self.message
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" (Context: {context_str})"
        return base_msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "recoverable": self.recoverable,
        }

    def _validate_context(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """Sanitize the context dictionary.

        Keys are coerced to strings and long representations (e.g. whole
        matrices) are truncated so error messages stay readable.
        """
        if not isinstance(context, dict):
            return {"invalid_context": f"Context must be dict, got {type(context).__name__}"}

        max_value_size = 1000

        validated_context = {}
        for key, value in context.items():
            if not isinstance(key, str):
                key = str(key)

            str_value = str(value)
            if len(str_value) > max_value_size:
                validated_context[key] = str_value[:max_value_size - 3] + "..."
            else:
                validated_context[key] = value

        return validated_context


class ValidationError(LinalgKitError):
    """Raised when input validation fails.

    Examples:
        - Input contains NaN or infinity
        - Unsupported input type
    """

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        expected: Optional[Any] = None,
        actual: Optional[Any] = None,
        **kwargs
    ):
        """Initialize validation error.

        Args:
            message: Error message
            parameter: Name of the parameter that failed validation
            expected: Expected value or type
            actual: Actual value received
            **kwargs: Additional context
        """
        context = kwargs.get('context', {})
        if parameter:
            context['parameter'] = parameter
        if expected is not None:
            context['expected'] = expected
        if actual is not None:
            context['actual'] = actual

        super().__init__(message, context, recoverable=True)


class ShapeError(ValidationError):
    """Raised when an input has the wrong shape.

    Examples:
        - Vector passed where a matrix is required
        - Non-square matrix passed to svec or sym_kron_id
        - svec encoding whose length is not a triangular number
    """


class DomainError(ValidationError):
    """Raised when input values lie outside the domain of an operation.

    Examples:
        - Row index out of range or duplicated
        - Zero element raised to a non-positive power
        - Non-symmetric matrix passed to svec
    """


class ComputationError(LinalgKitError):
    """Raised when numerical computation fails.

    Examples:
        - Decomposition failure reported by numpy.linalg
        - Random draw that keeps degenerating
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        values: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        """Initialize computation error.

        Args:
            message: Error message
            operation: Name of the operation that failed
            values: Relevant numerical values
            **kwargs: Additional context
        """
        context = kwargs.get('context', {})
        if operation:
            context['operation'] = operation
        if values:
            context.update(values)

        super().__init__(message, context, recoverable=False)


class DegenerateMatrixError(ComputationError):
    """Raised when a covariance or Gram matrix is numerically singular.

    Whitening and orthogonalization raise a spectrum to the power -0.5,
    which is undefined for zero eigenvalues. Any eigenvalue or singular
    value at or below the tolerance threshold raises this error instead of
    producing infinities.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        threshold: Optional[float] = None,
        min_value: Optional[float] = None,
        **kwargs
    ):
        values = {}
        if threshold is not None:
            values['threshold'] = threshold
        if min_value is not None:
            values['min_value'] = min_value
        super().__init__(message, operation=operation, values=values, **kwargs)


class ConfigurationError(LinalgKitError):
    """Raised when configuration values are invalid.

    Examples:
        - Unknown whitening method
        - Negative tolerance
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        **kwargs
    ):
        """Initialize configuration error.

        Args:
            message: Error message
            config_key: Configuration key that caused the error
            config_value: Configuration value that caused the error
            **kwargs: Additional context
        """
        context = kwargs.get('context', {})
        if config_key:
            context['config_key'] = config_key
        if config_value is not None:
            context['config_value'] = config_value

        super().__init__(message, context, recoverable=True)
