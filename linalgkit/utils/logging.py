"""Logging setup for scripts and tests that use linalgkit.

Library modules only call ``logging.getLogger(__name__)`` and never attach
handlers. ``setup_logger`` attaches console and file handlers to the package
logger, or to one of its children, so that the diagnostics become visible:
condition numbers and Gram spectra at DEBUG, fitted whitening transforms at
INFO, degenerate spectra and redrawn random vectors at WARNING.
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Dict, Optional, Union

from .exceptions import ConfigurationError

PACKAGE_LOGGER = "linalgkit"

_FORMATS = {
    'standard': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    # File output also records where the message came from
    'detailed': '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
    'simple': '%(levelname)s - %(message)s',
}

# Loggers that already carry our handlers, keyed by name
_configured: Dict[str, logging.Logger] = {}
_lock = threading.Lock()


def _resolve_level(level: str) -> int:
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ConfigurationError(
            f"Invalid log level: {level}",
            config_key="level",
            config_value=level,
        )
    return numeric_level


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    format_type: str = "standard"
) -> logging.Logger:
    """Send the output of a linalgkit logger to stdout and optionally a file.

    Configuring ``"linalgkit"`` covers every module of the package. A second
    call for a name that is already configured returns that logger unchanged.

    Args:
        name: Logger name, ``"linalgkit"`` or a module below it
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_file: Optional file that receives the 'detailed' format; parent
            directories are created
        format_type: Console format, 'standard', 'detailed' or 'simple'

    Returns:
        The configured logger

    Raises:
        ConfigurationError: If ``level`` or ``format_type`` is unknown

    Example:
        >>> logger = setup_logger(level='DEBUG')
        >>> whiten_using_eig(x)  # logs the covariance condition number
    """
    numeric_level = _resolve_level(level)
    if format_type not in _FORMATS:
        raise ConfigurationError(
            f"Unknown log format '{format_type}', expected one of {sorted(_FORMATS)}",
            config_key="format_type",
            config_value=format_type,
        )

    with _lock:
        if name in _configured:
            return _configured[name]

        handlers = [(logging.StreamHandler(sys.stdout), format_type)]
        if log_file is not None:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append((logging.FileHandler(path, mode='a'), 'detailed'))

        logger = logging.getLogger(name)
        logger.setLevel(numeric_level)
        for handler, fmt in handlers:
            handler.setFormatter(logging.Formatter(_FORMATS[fmt]))
            handler.setLevel(numeric_level)
            logger.addHandler(handler)
        logger.propagate = False

        _configured[name] = logger
        return logger


def shutdown_logging() -> None:
    """Detach and close the handlers added by setup_logger.

    The loggers go back to propagating to the root logger.
    """
    with _lock:
        for logger in _configured.values():
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
            logger.propagate = True
        _configured.clear()
