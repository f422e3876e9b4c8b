"""Pydantic schemas for wishlist service payloads.

The service speaks snake_case (and ``id_`` for wishlist ids); request bodies
are sent camelCase. Both spellings are accepted on input.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class User(BaseModel):
    """A wishlist service user."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    access_token: Optional[str] = Field(
        None, validation_alias=AliasChoices("access_token", "accessToken")
    )
    refresh_token: Optional[str] = Field(
        None, validation_alias=AliasChoices("refresh_token", "refreshToken")
    )


class WishlistLine(BaseModel):
    """A single product in a wishlist."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    product_id: int = Field(
        ...,
        validation_alias=AliasChoices("product_id", "productId"),
        serialization_alias="productId",
    )
    wishlist_id: int = Field(
        ...,
        validation_alias=AliasChoices("wishlist_id", "wishlistId"),
        serialization_alias="wishlistId",
    )

    def to_payload(self) -> dict:
        """Render the request body sent to the service."""
        return self.model_dump(by_alias=True)


class Wishlist(BaseModel):
    """A user's wishlist with its lines in service order."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., validation_alias=AliasChoices("id_", "id"))
    user_id: int = Field(..., validation_alias=AliasChoices("user_id", "userId"))
    lines: list[WishlistLine] = Field(default_factory=list)

    @property
    def product_ids(self) -> list[int]:
        """Product ids in line order."""
        return [line.product_id for line in self.lines]
