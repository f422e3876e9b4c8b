"""HTTP transport shared by all resources.

Wraps a ``requests.Session`` bound to the service base URL and maps
transport failures onto the client's exception hierarchy.
"""

import logging
from typing import Any, Optional

import requests

from .errors import (
    WishlistError,
    WishlistHTTPError,
    WishlistNotFoundError,
    WishlistResponseError,
)

logger = logging.getLogger(__name__)


class ApiTransport:
    """Session bound to a base URL with bearer authentication."""

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        """Initialize transport.

        Args:
            base_url: Root URL, e.g. ``https://host:443/api/v1``
            token: Bearer token sent on every request
            timeout: Request timeout in seconds
            session: Pre-built session (a fresh one is created otherwise)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        })

    def url(self, path: str) -> str:
        """Join an API path onto the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        json: Optional[Any] = None,
        expected: Optional[int] = None,
    ) -> requests.Response:
        """Send a request and return the response.

        Args:
            method: HTTP method
            path: API path relative to the base URL
            params: Query string parameters
            json: Request body, serialized as JSON
            expected: Exact status required; any 2xx is accepted when omitted

        Raises:
            WishlistNotFoundError: On 404
            WishlistHTTPError: On any other unexpected status
            WishlistError: On timeouts and connection failures
        """
        url = self.url(path)
        try:
            response = self._session.request(
                method, url, params=params, json=json, timeout=self.timeout
            )
        except requests.exceptions.Timeout:
            logger.warning("%s %s timed out after %ss", method, url, self.timeout)
            raise WishlistError("Request timed out")
        except requests.exceptions.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise WishlistError(f"Request failed: {e}")

        status = response.status_code
        logger.debug("%s %s -> %s", method, url, status)

        unexpected = expected is not None and status != expected
        if unexpected or not 200 <= status < 300:
            logger.warning("%s %s returned %s", method, url, status)
            if status == 404:
                raise WishlistNotFoundError(f"Not found: {method} {path}")
            raise WishlistHTTPError(status)

        return response

    def request_json(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request and decode the JSON body."""
        response = self.request(method, path, **kwargs)
        if response.status_code == 204 or not response.content:
            raise WishlistResponseError(
                f"{method} {path} succeeded ({response.status_code}) but returned no body"
            )
        try:
            return response.json()
        except ValueError:
            raise WishlistResponseError(f"Invalid JSON from {method} {path}")

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()
