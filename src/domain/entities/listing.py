from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from src.domain.enums.listing_category import ListingCategory

# Columns a seller may change after creation. id, seller_email and the
# timestamps are owned by storage.
UPDATABLE_FIELDS: frozenset[str] = frozenset(
    {"title", "description", "price", "category", "image_url", "location"}
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ListingDraft:
    """A listing that has passed validation but has not been stored yet."""

    title: str
    price: Decimal
    category: ListingCategory
    seller_email: str
    description: str | None = None
    image_url: str | None = None
    location: str | None = None


@dataclass
class Listing:
    """
    An item offered on the marketplace.

    ``seller_email`` is the authorization key: only the principal with that
    email may update or delete the row.
    """

    # Identity
    id: UUID = field(default_factory=uuid4)

    # Item data
    title: str = ""
    description: str | None = None
    price: Decimal = Decimal("0")
    category: ListingCategory = ListingCategory.OTHER
    image_url: str | None = None
    location: str | None = None

    # Ownership
    seller_email: str = ""

    # Timestamps
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_draft(cls, draft: ListingDraft) -> "Listing":
        now = _utcnow()
        return cls(
            title=draft.title,
            description=draft.description,
            price=draft.price,
            category=draft.category,
            image_url=draft.image_url,
            location=draft.location,
            seller_email=draft.seller_email,
            created_at=now,
            updated_at=now,
        )
