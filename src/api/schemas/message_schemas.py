from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class MessageResponse(BaseModel):
    id: UUID
    listing_id: UUID
    buyer_email: str
    seller_email: str
    message: str
    created_at: datetime

    model_config = {"from_attributes": True}


class MessageCreateRequest(BaseModel):
    listing_id: str | None = None
    buyer_email: str | None = None
    seller_email: str | None = None
    message: str | None = None
