"""
Observability module.

Provides logging configuration and structured logging helpers.
"""

from bookchunker.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from bookchunker.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "log_with_context",
    "log_exception_with_context",
    "safe_log_value",
]
