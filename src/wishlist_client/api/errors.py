"""Exceptions raised by the wishlist API client."""

from typing import Optional


class WishlistError(Exception):
    """Base exception for wishlist API errors."""

    pass


class WishlistHTTPError(WishlistError):
    """Raised when the service answers with an unexpected status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"HTTP error: {status_code}")


class WishlistNotFoundError(WishlistHTTPError):
    """Raised when the requested entity does not exist."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(404, message or "Not found")


class WishlistResponseError(WishlistError):
    """Raised when a response body cannot be decoded into models."""

    pass
