"""
Notify Client

Python client for the notification service v2 REST API:
- Send email, SMS and letter notifications
- Fetch notifications, templates and received text messages
- Preview templates with personalisation
"""

from .api import NotifyClient, prepare_upload
from .shared.errors import APIError, InvalidAPIKeyError

__version__ = "0.1.0"

__all__ = [
    "NotifyClient",
    "prepare_upload",
    "APIError",
    "InvalidAPIKeyError",
    "__version__",
]
