from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.listing_repository import ListingRepository
from src.domain.entities.listing import Listing, ListingDraft
from src.domain.enums.listing_category import ListingCategory
from src.infrastructure.database.errors import storage_errors
from src.infrastructure.database.models import ListingModel

LIKE_ESCAPE = "\\"


def _to_domain(model: ListingModel) -> Listing:
    return Listing(
        id=model.id,
        title=model.title,
        description=model.description,
        price=Decimal(str(model.price)),
        category=ListingCategory(model.category),
        image_url=model.image_url,
        location=model.location,
        seller_email=model.seller_email,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def _to_model(listing: Listing) -> ListingModel:
    # Timestamps are left to the server defaults
    return ListingModel(
        id=listing.id,
        title=listing.title,
        description=listing.description,
        price=listing.price,
        category=listing.category.value,
        image_url=listing.image_url,
        location=listing.location,
        seller_email=listing.seller_email,
    )


def _contains_pattern(text: str) -> str:
    """ILIKE pattern matching text literally anywhere in the column."""
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _to_columns(changes: dict[str, Any]) -> dict[str, Any]:
    return {
        name: value.value if isinstance(value, ListingCategory) else value
        for name, value in changes.items()
    }


class SqlAlchemyListingRepository(ListingRepository):
    """
    SQLAlchemy implementation for listing persistence.

    Ownership is enforced in the WHERE clause of UPDATE/DELETE, so a caller
    who does not own a row sees zero affected rows, exactly as for a missing
    row.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, draft: ListingDraft) -> Listing:
        model = _to_model(Listing.from_draft(draft))
        with storage_errors("create listing"):
            self._session.add(model)
            await self._session.flush()
            await self._session.refresh(model)
        return _to_domain(model)

    async def get_by_id(self, listing_id: UUID) -> Listing | None:
        with storage_errors("fetch listing", listing_id=str(listing_id)):
            model = await self._session.get(ListingModel, listing_id)
        return _to_domain(model) if model is not None else None

    async def list_all(
        self,
        *,
        category: ListingCategory | None = None,
        seller_email: str | None = None,
        search: str | None = None,
    ) -> list[Listing]:
        query = select(ListingModel)

        if category is not None:
            query = query.where(ListingModel.category == category.value)
        if seller_email is not None:
            query = query.where(ListingModel.seller_email == seller_email)
        if search:
            pattern = _contains_pattern(search)
            query = query.where(
                or_(
                    ListingModel.title.ilike(pattern, escape=LIKE_ESCAPE),
                    ListingModel.description.ilike(pattern, escape=LIKE_ESCAPE),
                    ListingModel.location.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )

        query = query.order_by(ListingModel.created_at.desc())

        with storage_errors("list listings"):
            result = await self._session.execute(query)
            models = result.scalars().all()

        return [_to_domain(m) for m in models]

    async def update_owned(
        self, listing_id: UUID, owner_email: str, changes: dict[str, Any]
    ) -> Listing | None:
        stmt = (
            update(ListingModel)
            .where(ListingModel.id == listing_id, ListingModel.seller_email == owner_email)
            .values(**_to_columns(changes), updated_at=func.now())
            .returning(ListingModel)
            .execution_options(synchronize_session=False, populate_existing=True)
        )
        with storage_errors("update listing", listing_id=str(listing_id)):
            result = await self._session.execute(stmt)
            model = result.scalars().first()
        return _to_domain(model) if model is not None else None

    async def delete_owned(self, listing_id: UUID, owner_email: str) -> int:
        stmt = (
            delete(ListingModel)
            .where(ListingModel.id == listing_id, ListingModel.seller_email == owner_email)
            .execution_options(synchronize_session=False)
        )
        with storage_errors("delete listing", listing_id=str(listing_id)):
            result = await self._session.execute(stmt)
        return result.rowcount
