from uuid import UUID

from src.application.errors import InvalidRequestError, ListingNotFoundError
from src.application.interfaces.listing_repository import ListingRepository
from src.application.validation import is_blank, parse_uuid
from src.domain.entities.listing import Listing


def require_listing_id(raw_id: str | UUID | None) -> UUID | None:
    """
    Reject a blank id; return None for a malformed one, which can never
    match a stored row.
    """
    if is_blank(raw_id):
        raise InvalidRequestError("Listing ID is required.")
    return parse_uuid(raw_id)


class GetListing:
    """Use case: fetch a single listing by id."""

    def __init__(self, listing_repo: ListingRepository) -> None:
        self._listing_repo = listing_repo

    async def execute(self, raw_id: str | UUID | None) -> Listing:
        listing_id = require_listing_id(raw_id)
        if listing_id is None:
            raise ListingNotFoundError(str(raw_id))

        listing = await self._listing_repo.get_by_id(listing_id)
        if listing is None:
            raise ListingNotFoundError(listing_id)
        return listing
