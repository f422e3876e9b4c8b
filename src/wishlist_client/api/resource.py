"""Generic contract for remote HTTP resources."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from .transport import ApiTransport

T = TypeVar("T")


class Resource(ABC, Generic[T]):
    """Typed access to one kind of remote entity."""

    def __init__(self, transport: ApiTransport):
        self._transport = transport

    @abstractmethod
    def get(self, id: int) -> T:
        """Fetch the entity or raise an error."""

    @abstractmethod
    def optional(self, id: int) -> Optional[T]:
        """Fetch the entity, returning None when it does not exist."""

    @abstractmethod
    def list(self, page_number: int = 1) -> list[T]:
        """Fetch one page of entities."""
