"""Thin client for the remote wishlist service."""

from .api import (
    WishlistError,
    WishlistHTTPError,
    WishlistHttpClient,
    WishlistNotFoundError,
    WishlistResource,
    WishlistResponseError,
)
from .schemas import User, Wishlist, WishlistLine

__version__ = "0.1.0"

__all__ = [
    "WishlistHttpClient",
    "WishlistResource",
    "WishlistError",
    "WishlistHTTPError",
    "WishlistNotFoundError",
    "WishlistResponseError",
    "User",
    "Wishlist",
    "WishlistLine",
]
