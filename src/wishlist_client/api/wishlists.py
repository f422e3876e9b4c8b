"""Wishlist resource: endpoints under /wishlists and /users/:id/wishlists."""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from ..schemas import Wishlist, WishlistLine
from .errors import WishlistNotFoundError, WishlistResponseError
from .resource import Resource
from .transport import ApiTransport

logger = logging.getLogger(__name__)


class WishlistResource(Resource[Wishlist]):
    """Wishlists owned by a single user."""

    def __init__(self, transport: ApiTransport, user_id: int):
        """Initialize resource.

        Args:
            transport: Transport bound to the service base URL
            user_id: Owner whose wishlists ``list`` pages through
        """
        super().__init__(transport)
        self.user_id = user_id

    def _to_wishlist(self, data: Any) -> Wishlist:
        """Convert a response payload to a Wishlist."""
        if not isinstance(data, dict):
            raise WishlistResponseError(f"Expected a wishlist object, got {type(data).__name__}")
        try:
            return Wishlist.model_validate(data)
        except ValidationError as e:
            raise WishlistResponseError(f"Malformed wishlist: {e.error_count()} error(s)") from e

    def get(self, id: int) -> Wishlist:
        """Fetch a wishlist by id.

        Raises:
            WishlistNotFoundError: If the wishlist does not exist
            WishlistHTTPError: On any status other than 200
        """
        data = self._transport.request_json("GET", f"/wishlists/{id}", expected=200)
        return self._to_wishlist(data)

    def optional(self, id: int) -> Optional[Wishlist]:
        """Fetch a wishlist by id, or None if it does not exist."""
        try:
            return self.get(id)
        except WishlistNotFoundError:
            logger.debug("Wishlist %s not found", id)
            return None

    def add(self, line: WishlistLine) -> Wishlist:
        """Add a product to a wishlist.

        Returns:
            The updated wishlist
        """
        data = self._transport.request_json(
            "POST", f"/wishlists/{line.wishlist_id}", json=line.to_payload()
        )
        return self._to_wishlist(data)

    def remove(self, line: WishlistLine) -> Wishlist:
        """Remove a product from a wishlist.

        Returns:
            The updated wishlist

        Raises:
            WishlistResponseError: If the service answers 204 No Content. The
                line has been removed at that point; call ``get`` to refresh.
        """
        data = self._transport.request_json(
            "DELETE", f"/wishlists/{line.wishlist_id}/lines/{line.product_id}"
        )
        return self._to_wishlist(data)

    def list(self, page_number: int = 1) -> list[Wishlist]:
        """List one page of the user's wishlists.

        Args:
            page_number: Page forwarded verbatim as the ``page`` parameter

        Returns:
            List of Wishlist objects
        """
        data = self._transport.request_json(
            "GET", f"/users/{self.user_id}/wishlists", params={"page": page_number}
        )

        if isinstance(data, dict):
            data = data.get("wishlists")
        if not isinstance(data, list):
            raise WishlistResponseError("Expected a list of wishlists")

        return [self._to_wishlist(item) for item in data]
