"""Unit tests for logging setup and the package's log output."""

import logging
import threading

import pytest

from linalgkit.core import whiten_using_svd, whiten_using_eig
from linalgkit.utils.exceptions import ConfigurationError, DegenerateMatrixError
from linalgkit.utils.logging import setup_logger, shutdown_logging


class TestSetupLogger:
    """Test setup_logger."""

    def test_defaults_to_package_logger(self):
        logger = setup_logger()

        assert logger is logging.getLogger("linalgkit")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert not logger.propagate

    @pytest.mark.parametrize("level", ["debug", "INFO", "WARNING", "ERROR", "CRITICAL"])
    def test_level(self, level):
        logger = setup_logger(f"linalgkit.level_{level}", level=level)
        assert logger.level == getattr(logging, level.upper())

    def test_invalid_level(self):
        with pytest.raises(ConfigurationError, match="Invalid log level") as exc_info:
            setup_logger("linalgkit.bad", level="LOUD")
        assert exc_info.value.context['config_key'] == "level"

    def test_invalid_format(self):
        with pytest.raises(ConfigurationError, match="Unknown log format"):
            setup_logger("linalgkit.bad", format_type="fancy")

    def test_file_output_records_caller(self, temp_dir):
        log_file = temp_dir / "nested" / "run.log"
        logger = setup_logger("linalgkit.file", log_file=log_file)

        logger.info("fitted")

        text = log_file.read_text()
        assert "fitted" in text
        assert "test_file_output_records_caller" in text

    def test_second_call_keeps_handlers(self):
        first = setup_logger("linalgkit.twice", level="DEBUG")
        second = setup_logger("linalgkit.twice", level="ERROR")

        assert first is second
        assert second.level == logging.DEBUG
        assert len(second.handlers) == 1

    def test_concurrent_setup(self):
        results = []
        threads = [threading.Thread(target=lambda: results.append(setup_logger("linalgkit.shared")))
                   for _ in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(r) for r in results}) == 1
        assert len(results[0].handlers) == 1


class TestShutdownLogging:
    """Test shutdown_logging."""

    def test_handlers_removed(self, temp_dir):
        logger = setup_logger(log_file=temp_dir / "run.log")
        handlers = list(logger.handlers)

        shutdown_logging()

        assert logger.handlers == []
        assert logger.propagate
        assert all(getattr(h, 'stream', None) is None for h in handlers if isinstance(h, logging.FileHandler))

    def test_setup_after_shutdown(self):
        setup_logger()
        shutdown_logging()
        assert len(setup_logger().handlers) == 1


class TestPackageOutput:
    """Test what the package modules log."""

    def test_condition_number_at_debug(self, temp_dir, correlated_data):
        log_file = temp_dir / "linalgkit.log"
        setup_logger(level="DEBUG", log_file=log_file)

        whiten_using_svd(correlated_data)

        assert "condition number" in log_file.read_text()

    def test_debug_hidden_at_info(self, temp_dir, correlated_data):
        log_file = temp_dir / "linalgkit.log"
        setup_logger(level="INFO", log_file=log_file)

        whiten_using_svd(correlated_data)

        assert "condition number" not in log_file.read_text()

    def test_degenerate_spectrum_warns(self, caplog, rank_deficient_data):
        with caplog.at_level(logging.WARNING, logger="linalgkit"):
            with pytest.raises(DegenerateMatrixError):
                whiten_using_eig(rank_deficient_data)

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].name == "linalgkit.utils.validation"
        assert "whiten_using_eig" in warnings[0].getMessage()
