from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

import structlog

from src.application.errors import InvalidRequestError, ListingNotFoundError
from src.application.interfaces.listing_repository import ListingRepository
from src.application.use_cases.get_listing import require_listing_id
from src.application.validation import is_blank, optional_text, parse_category, parse_price
from src.domain.entities.listing import UPDATABLE_FIELDS, Listing
from src.domain.entities.principal import Principal

logger = structlog.get_logger(__name__)


@dataclass
class UpdateListingInput:
    listing_id: str | UUID | None
    changes: dict[str, Any] = field(default_factory=dict)


def _normalise_changes(changes: dict[str, Any]) -> dict[str, Any]:
    unknown = sorted(set(changes) - UPDATABLE_FIELDS)
    if unknown:
        raise InvalidRequestError(f"Fields cannot be updated: {', '.join(unknown)}.")

    normalised: dict[str, Any] = {}
    for name, value in changes.items():
        if name == "title":
            if is_blank(value):
                raise InvalidRequestError("title cannot be empty.")
            normalised[name] = str(value).strip()
        elif name == "price":
            if value is None:
                raise InvalidRequestError("price cannot be empty.")
            normalised[name] = parse_price(value)
        elif name == "category":
            normalised[name] = parse_category(value)
        else:
            normalised[name] = optional_text(value)
    return normalised


class UpdateListing:
    """
    Use case: apply a partial update to a listing owned by the caller.

    A missing row and a row owned by someone else are reported the same way.
    """

    def __init__(self, listing_repo: ListingRepository) -> None:
        self._listing_repo = listing_repo

    async def execute(
        self, input_data: UpdateListingInput, principal: Principal | None
    ) -> Listing:
        listing_id = require_listing_id(input_data.listing_id)

        if not input_data.changes:
            raise InvalidRequestError("No fields provided for update.")
        changes = _normalise_changes(input_data.changes)

        if listing_id is None or principal is None:
            raise ListingNotFoundError(str(input_data.listing_id), masked=True)

        listing = await self._listing_repo.update_owned(listing_id, principal.email, changes)
        if listing is None:
            logger.warning(
                "listing_update_matched_no_rows",
                listing_id=str(listing_id),
                caller=principal.email,
            )
            raise ListingNotFoundError(listing_id, masked=True)

        logger.info(
            "listing_updated",
            listing_id=str(listing.id),
            fields=sorted(changes),
        )
        return listing
