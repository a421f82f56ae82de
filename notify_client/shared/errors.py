"""Exception types raised by the client."""

from __future__ import annotations

from typing import Any

import requests


class InvalidAPIKeyError(ValueError):
    """Raised when an API key cannot be split into service id and secret."""


class APIError(requests.HTTPError):
    """
    Non-2xx response from the notification service.

    The response body is kept exactly as the service returned it: the parsed
    JSON document when there is one, otherwise the raw text.
    """

    def __init__(self, response: requests.Response, message: str | None = None):
        self.status_code = response.status_code
        self.body = _response_body(response)
        super().__init__(message or self._describe(), response=response)

    @property
    def errors(self) -> list[dict[str, Any]]:
        """Error entries from a JSON body (``{"errors": [...]}``), if any."""
        if isinstance(self.body, dict):
            return list(self.body.get("errors") or [])
        return []

    def _describe(self) -> str:
        messages = [e.get("message") for e in self.errors if isinstance(e, dict) and e.get("message")]
        if messages:
            return f"{self.status_code} - {', '.join(messages)}"
        return f"{self.status_code} - {self.body}"


def _response_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text
