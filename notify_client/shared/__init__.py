"""
Shared building blocks used across the client: error types and logging helpers.
"""

from .errors import APIError, InvalidAPIKeyError
from .structured_logging import StructuredLoggerAdapter, get_structured_logger

__all__ = [
    "APIError",
    "InvalidAPIKeyError",
    "StructuredLoggerAdapter",
    "get_structured_logger",
]
