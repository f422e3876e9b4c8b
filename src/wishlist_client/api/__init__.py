"""API module for the remote wishlist service.

Provides the client, its resources and the exceptions they raise.
"""

from .client import WishlistHttpClient
from .errors import (
    WishlistError,
    WishlistHTTPError,
    WishlistNotFoundError,
    WishlistResponseError,
)
from .resource import Resource
from .transport import ApiTransport
from .wishlists import WishlistResource

__all__ = [
    "WishlistHttpClient",
    "WishlistError",
    "WishlistHTTPError",
    "WishlistNotFoundError",
    "WishlistResponseError",
    "Resource",
    "ApiTransport",
    "WishlistResource",
]
