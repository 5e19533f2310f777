from abc import ABC, abstractmethod
from uuid import UUID

from src.domain.entities.message import Message, MessageDraft


class MessageRepository(ABC):
    """Port for the append-only message log."""

    @abstractmethod
    async def add(self, draft: MessageDraft) -> Message:
        ...

    @abstractmethod
    async def list_for_listing(self, listing_id: UUID | None = None) -> list[Message]:
        """Return messages oldest first, scoped to one listing when given."""
        ...
