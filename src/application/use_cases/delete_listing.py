from uuid import UUID

import structlog

from src.application.errors import ListingNotFoundError
from src.application.interfaces.listing_repository import ListingRepository
from src.application.use_cases.get_listing import require_listing_id
from src.domain.entities.principal import Principal

logger = structlog.get_logger(__name__)


class DeleteListing:
    """Use case: permanently remove a listing owned by the caller."""

    def __init__(self, listing_repo: ListingRepository) -> None:
        self._listing_repo = listing_repo

    async def execute(self, raw_id: str | UUID | None, principal: Principal | None) -> None:
        listing_id = require_listing_id(raw_id)
        if listing_id is None or principal is None:
            raise ListingNotFoundError(str(raw_id), masked=True)

        deleted = await self._listing_repo.delete_owned(listing_id, principal.email)
        if deleted == 0:
            logger.warning(
                "listing_delete_matched_no_rows",
                listing_id=str(listing_id),
                caller=principal.email,
            )
            raise ListingNotFoundError(listing_id, masked=True)

        logger.info("listing_deleted", listing_id=str(listing_id))
