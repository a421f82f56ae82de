"""
Base API Client

Abstract base class for API clients with common functionality:
- Session and proxy handling
- Default headers and per-request authentication
- Error handling
- Logging
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import requests

from ..config import Config
from ..shared.errors import APIError
from ..shared.structured_logging import get_structured_logger


class BaseAPIClient(ABC):
    """
    Abstract base class for API clients.

    Provides the transport: one ``requests`` call per operation, no retries.
    Subclasses supply the ``Authorization`` header via _get_auth_header().
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = Config.REQUEST_TIMEOUT,
        user_agent: str = Config.USER_AGENT,
        **log_context: Any,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            user_agent: Value sent in the User-Agent header
            **log_context: Fields stamped on every log record from this client
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self.session = requests.Session()
        self.log = get_structured_logger(__name__, **log_context)

    def set_proxy(self, proxy_url: str | None) -> None:
        """
        Route all requests through a proxy.

        Args:
            proxy_url: Proxy URL (e.g. "http://proxy.local:3128"), or None to clear
        """
        if proxy_url:
            self.session.proxies.update({"http": proxy_url, "https": proxy_url})
        else:
            self.session.proxies.clear()

    @abstractmethod
    def _get_auth_header(self) -> str:
        """Return the value for the Authorization header of the next request."""
        pass

    def _get_headers(self) -> dict[str, str]:
        """
        Get headers for an API request.

        Built per request so that time-bound credentials are always fresh.
        """
        return {
            "Authorization": self._get_auth_header(),
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }

    def _make_request(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        method: str = "GET",
        data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Make an API request.

        Args:
            endpoint: API endpoint (relative to base_url)
            params: Query parameters
            method: HTTP method (GET or POST)
            data: JSON body for POST requests

        Returns:
            Parsed JSON response

        Raises:
            APIError: If the service answers with a non-2xx status
            requests.RequestException: If the request fails in transport
        """
        method = method.upper()
        if method not in ("GET", "POST"):
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = f"{self.base_url}{endpoint}"

        try:
            response = self.session.request(
                method,
                url,
                headers=self._get_headers(),
                params=params,
                json=data,
                timeout=self.timeout,
            )
        except requests.Timeout:
            self.log.error(f"Timeout calling {method} {endpoint} after {self.timeout} seconds")
            raise
        except requests.ConnectionError as e:
            self.log.error(f"Connection error calling {method} {endpoint}: {e}")
            raise

        self._log_request(method, endpoint, params, response.status_code)
        return self._handle_response(response)

    def _handle_response(self, response: requests.Response) -> dict[str, Any]:
        """
        Handle API response and extract JSON data.

        Args:
            response: HTTP response object

        Returns:
            Parsed JSON response data

        Raises:
            APIError: If response indicates an error
            requests.RequestException: If a successful response is not JSON
        """
        if not response.ok:
            error = APIError(response)
            self.log.warning(f"API error response: {error}")
            raise error

        try:
            return response.json()
        except ValueError as e:
            self.log.error(f"Failed to parse JSON response: {e}")
            self.log.error(f"Response text: {response.text[:500]}")
            raise requests.RequestException(f"Invalid JSON response: {e}", response=response)

    def _log_request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        status_code: int | None = None,
    ):
        """Log API request details. Bodies are never logged."""
        context = {"extra": {"context_fields": {"method": method}}}
        if params:
            self.log.info(f"API request: {endpoint} with params: {params}", **context)
        else:
            self.log.info(f"API request: {endpoint}", **context)

        if status_code:
            self.log.debug(f"Response status: {status_code}", **context)
