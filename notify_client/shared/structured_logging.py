"""
Structured Logging Utilities

Logger adapter that stamps every record from a client with its context
(service id, HTTP method, ...).
"""

from __future__ import annotations

import logging
from typing import Any

STRUCTURED_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that adds structured context to log messages.

    Usage:
        logger = get_structured_logger(__name__, service_id="abc")
        logger.info("Sending request")  # record.context == "service_id=abc"

    Per-call context can be added with ``extra={"context_fields": {...}}``.
    """

    def __init__(self, logger: logging.Logger, **context: Any):
        """
        Initialize structured logger adapter.

        Args:
            logger: Base logger instance
            **context: Context fields to include in all log messages
        """
        super().__init__(logger, context)

    def bind(self, **context: Any) -> StructuredLoggerAdapter:
        """Return a new adapter with additional context fields."""
        return StructuredLoggerAdapter(self.logger, **{**self.extra, **context})

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """
        Process log message to add context.

        Args:
            msg: Log message
            kwargs: Logging keyword arguments

        Returns:
            Tuple of (message, updated kwargs)
        """
        extra = kwargs.setdefault("extra", {})
        fields = {**self.extra, **extra.pop("context_fields", {})}
        extra["context"] = format_context(fields)
        return msg, kwargs


def format_context(fields: dict[str, Any]) -> str:
    """Format context fields as ``key=value`` pairs, skipping None values."""
    context_parts = [f"{key}={value}" for key, value in fields.items() if value is not None]
    return " | ".join(context_parts) if context_parts else "none"


def get_structured_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """
    Get a structured logger with context.

    Args:
        name: Logger name (typically __name__)
        **context: Context fields (e.g., service_id="abc")

    Returns:
        StructuredLoggerAdapter instance
    """
    base_logger = logging.getLogger(name)
    return StructuredLoggerAdapter(base_logger, **context)
