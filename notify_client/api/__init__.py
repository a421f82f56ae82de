"""
API Client Package

- Base API client abstraction (session, headers, error handling, logging)
- Notify API client
- File preparation for send-a-file-by-email
"""

from .base_client import BaseAPIClient
from .notify_client import NotifyClient
from .uploads import prepare_upload

__all__ = [
    "BaseAPIClient",
    "NotifyClient",
    "prepare_upload",
]
