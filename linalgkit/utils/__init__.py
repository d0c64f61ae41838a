"""Utilities for the linalgkit package.

- Logging infrastructure
- Custom exception hierarchy
- Numerical constants
- Input validation helpers
"""

from .logging import setup_logger, shutdown_logging
from .exceptions import (
    LinalgKitError,
    ValidationError,
    ShapeError,
    DomainError,
    ComputationError,
    DegenerateMatrixError,
    ConfigurationError,
)
from .config import Config

__all__ = [
    "setup_logger",
    "shutdown_logging",
    "LinalgKitError",
    "ValidationError",
    "ShapeError",
    "DomainError",
    "ComputationError",
    "DegenerateMatrixError",
    "ConfigurationError",
    "Config",
]
