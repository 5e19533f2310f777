from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from src.domain.entities.listing import Listing, ListingDraft
from src.domain.enums.listing_category import ListingCategory


class ListingRepository(ABC):
    """Port for persisting and querying Listing rows."""

    @abstractmethod
    async def add(self, draft: ListingDraft) -> Listing:
        """Insert the draft and return the stored row with its id and timestamps."""
        ...

    @abstractmethod
    async def get_by_id(self, listing_id: UUID) -> Listing | None:
        ...

    @abstractmethod
    async def list_all(
        self,
        *,
        category: ListingCategory | None = None,
        seller_email: str | None = None,
        search: str | None = None,
    ) -> list[Listing]:
        """Return listings newest first."""
        ...

    @abstractmethod
    async def update_owned(
        self, listing_id: UUID, owner_email: str, changes: dict[str, Any]
    ) -> Listing | None:
        """Apply changes where id and seller_email both match; None if no row did."""
        ...

    @abstractmethod
    async def delete_owned(self, listing_id: UUID, owner_email: str) -> int:
        """Delete where id and seller_email both match; return the affected row count."""
        ...
