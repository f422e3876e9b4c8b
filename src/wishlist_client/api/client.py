"""Entry point for talking to the wishlist service."""

from typing import Optional

import requests

from ..config import get_config
from ..schemas import User
from .transport import ApiTransport
from .wishlists import WishlistResource


class WishlistHttpClient:
    """Client for the wishlist REST API.

    Example:
        >>> with WishlistHttpClient(key="aqua", secret="s3cr3t") as client:
        ...     wishlist = client.wishlists.get(1)
    """

    def __init__(
        self,
        key: str,
        secret: str,
        version: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
        user_id: Optional[int] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize client.

        Args:
            key: API key
            secret: API secret
            version: API version (uses config if not provided)
            host: Service host including scheme (uses config if not provided)
            port: Service port (uses config if not provided)
            user_id: Id of the calling user (uses config if not provided)
            token: Bearer token (uses config if not provided)
            timeout: Request timeout in seconds (uses config if not provided)
            session: Pre-built requests session, mainly for tests
        """
        config = get_config()

        self.key = key
        self.secret = secret
        self.host = (host or config.host).rstrip("/")
        self.port = port or config.port
        self.version = version or config.version

        # TODO: replace with tokens from a login endpoint once the service has one
        self.user = User(
            id=user_id if user_id is not None else config.user_id,
            access_token=token or config.access_token,
        )

        self._transport = ApiTransport(
            self.base_url,
            token=self.user.access_token,
            timeout=timeout or config.timeout,
            session=session,
        )
        self.wishlists = WishlistResource(self._transport, user_id=self.user.id)

    @property
    def base_url(self) -> str:
        """Root URL of the versioned API."""
        return f"{self.host}:{self.port}/api/{self.version}"

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._transport.close()

    def __enter__(self) -> "WishlistHttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
