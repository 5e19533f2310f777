from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.message_repository import MessageRepository
from src.domain.entities.message import Message, MessageDraft
from src.infrastructure.database.errors import storage_errors
from src.infrastructure.database.models import MessageModel


def _to_domain(model: MessageModel) -> Message:
    return Message(
        id=model.id,
        listing_id=model.listing_id,
        buyer_email=model.buyer_email,
        seller_email=model.seller_email,
        message=model.message,
        created_at=model.created_at,
    )


class SqlAlchemyMessageRepository(MessageRepository):
    """SQLAlchemy-backed implementation of MessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, draft: MessageDraft) -> Message:
        message = Message.from_draft(draft)
        model = MessageModel(
            id=message.id,
            listing_id=message.listing_id,
            buyer_email=message.buyer_email,
            seller_email=message.seller_email,
            message=message.message,
        )
        with storage_errors("create message", listing_id=str(draft.listing_id)):
            self._session.add(model)
            await self._session.flush()
            await self._session.refresh(model)
        return _to_domain(model)

    async def list_for_listing(self, listing_id: UUID | None = None) -> list[Message]:
        query = select(MessageModel)
        if listing_id is not None:
            query = query.where(MessageModel.listing_id == listing_id)
        query = query.order_by(MessageModel.created_at.asc())

        with storage_errors("list messages"):
            result = await self._session.execute(query)
            models = result.scalars().all()

        return [_to_domain(m) for m in models]
