"""
Test suite for logging helpers.

System role: Verification of safe structured logging
"""

import logging

from bookchunker.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from bookchunker.observability.logger import configure_logging


class TestSafeLogValue:
    """Test suite for safe_log_value()."""

    def test_collections_are_summarized(self) -> None:
        """Test lists and dicts are reduced to sizes."""
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"
        assert safe_log_value(None) == "None"

    def test_long_strings_are_truncated(self) -> None:
        """Test truncation marker."""
        value = safe_log_value("x" * 20, max_length=5)

        assert value == "xxxxx... (truncated, 20 total)"


class TestLogWithContext:
    """Test suite for log_with_context() and log_exception_with_context()."""

    def test_context_is_attached_to_record(self, caplog) -> None:
        """Test extra fields land on the log record."""
        logger = logging.getLogger("bookchunker.test")

        with caplog.at_level(logging.INFO, logger="bookchunker.test"):
            log_with_context(logger, logging.INFO, "chunked", document_id=5)

        assert caplog.records[0].document_id == "5"

    def test_exception_context_includes_error_type(self, caplog) -> None:
        """Test error type and message are attached."""
        logger = logging.getLogger("bookchunker.test")

        with caplog.at_level(logging.ERROR, logger="bookchunker.test"):
            log_exception_with_context(logger, "failed", ValueError("bad"), document_id=9)

        record = caplog.records[0]
        assert record.error_type == "ValueError"
        assert record.error_msg == "bad"
        assert record.exc_info is not None


class TestConfigureLogging:
    """Test suite for configure_logging()."""

    def test_sets_level_and_single_handler(self) -> None:
        """Test root logger is configured once."""
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("DEBUG")
            configure_logging("WARNING")

            assert root.level == logging.WARNING
            assert len(root.handlers) == 1
            assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
