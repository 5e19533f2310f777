from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class MessageDraft:
    listing_id: UUID
    buyer_email: str
    seller_email: str
    message: str


@dataclass
class Message:
    """A buyer/seller message about a listing. Immutable once stored."""

    id: UUID = field(default_factory=uuid4)
    listing_id: UUID = field(default_factory=uuid4)
    buyer_email: str = ""
    seller_email: str = ""
    message: str = ""
    created_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_draft(cls, draft: MessageDraft) -> "Message":
        return cls(
            listing_id=draft.listing_id,
            buyer_email=draft.buyer_email,
            seller_email=draft.seller_email,
            message=draft.message,
        )
