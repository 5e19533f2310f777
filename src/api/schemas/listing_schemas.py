from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.enums.listing_category import ListingCategory


class ListingResponse(BaseModel):
    id: UUID
    title: str
    description: str | None = None
    price: float
    category: ListingCategory
    seller_email: str
    image_url: str | None = None
    location: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ListingCreateRequest(BaseModel):
    # Presence of the required fields is checked by the use case so the
    # caller gets one message naming all of them.
    title: str | None = None
    description: str | None = None
    price: Decimal | None = None
    category: str | None = None
    seller_email: str | None = None
    image_url: str | None = None
    location: str | None = None


class ListingUpdateRequest(BaseModel):
    # Unknown keys are kept so the use case can name them in its error.
    model_config = ConfigDict(extra="allow")

    title: str | None = None
    description: str | None = None
    price: Decimal | None = None
    category: str | None = None
    image_url: str | None = None
    location: str | None = None

    def changes(self) -> dict[str, Any]:
        """Only the keys the caller actually sent, unknown ones included."""
        return {**self.model_dump(exclude_unset=True), **(self.model_extra or {})}


class DeleteListingResponse(BaseModel):
    message: str
