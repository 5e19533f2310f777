from dataclasses import asdict, dataclass
from decimal import Decimal

import structlog

from src.application.interfaces.listing_repository import ListingRepository
from src.application.validation import (
    optional_text,
    parse_category,
    parse_price,
    require_fields,
)
from src.domain.entities.listing import Listing, ListingDraft
from src.domain.entities.principal import Principal

logger = structlog.get_logger(__name__)

REQUIRED_LISTING_FIELDS = ("title", "price", "category", "seller_email")


@dataclass
class CreateListingInput:
    title: str | None = None
    price: Decimal | float | int | str | None = None
    category: str | None = None
    seller_email: str | None = None
    description: str | None = None
    image_url: str | None = None
    location: str | None = None


class CreateListing:
    """
    Use case: validate a new listing and store it.

    An authenticated caller who omits seller_email becomes the seller.
    """

    def __init__(self, listing_repo: ListingRepository) -> None:
        self._listing_repo = listing_repo

    async def execute(
        self, input_data: CreateListingInput, principal: Principal | None = None
    ) -> Listing:
        values = asdict(input_data)
        if not values.get("seller_email") and principal is not None:
            values["seller_email"] = principal.email

        require_fields(values, REQUIRED_LISTING_FIELDS)

        draft = ListingDraft(
            title=values["title"].strip(),
            price=parse_price(values["price"]),
            category=parse_category(values["category"]),
            seller_email=values["seller_email"].strip(),
            description=optional_text(values["description"]),
            image_url=optional_text(values["image_url"]),
            location=optional_text(values["location"]),
        )

        listing = await self._listing_repo.add(draft)

        logger.info(
            "listing_created",
            listing_id=str(listing.id),
            category=listing.category.value,
            seller_email=listing.seller_email,
        )
        return listing
