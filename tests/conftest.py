"""
Shared fixtures: in-memory stand-ins for the repositories and the image
container, plus a TestClient wired to them through dependency overrides.
"""
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import (
    get_image_storage,
    get_listing_repo,
    get_message_repo,
    get_principal,
)
from src.api.main import app
from src.application.interfaces.image_storage import BlobAlreadyExistsError, ImageStorage
from src.application.interfaces.listing_repository import ListingRepository
from src.application.interfaces.message_repository import MessageRepository
from src.domain.entities.listing import Listing, ListingDraft
from src.domain.entities.message import Message, MessageDraft
from src.domain.entities.principal import Principal
from src.domain.enums.listing_category import ListingCategory

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class _Clock:
    """Strictly increasing timestamps so ordering assertions are deterministic."""

    def __init__(self) -> None:
        self._ticks = 0

    def now(self) -> datetime:
        self._ticks += 1
        return _EPOCH + timedelta(seconds=self._ticks)


class InMemoryListingRepository(ListingRepository):
    def __init__(self) -> None:
        self.rows: dict[UUID, Listing] = {}
        self._clock = _Clock()

    async def add(self, draft: ListingDraft) -> Listing:
        listing = Listing.from_draft(draft)
        listing.created_at = listing.updated_at = self._clock.now()
        self.rows[listing.id] = listing
        return listing

    async def get_by_id(self, listing_id: UUID) -> Listing | None:
        return self.rows.get(listing_id)

    async def list_all(
        self,
        *,
        category: ListingCategory | None = None,
        seller_email: str | None = None,
        search: str | None = None,
    ) -> list[Listing]:
        def matches(listing: Listing) -> bool:
            if category is not None and listing.category != category:
                return False
            if seller_email is not None and listing.seller_email != seller_email:
                return False
            if search:
                haystack = " ".join(
                    filter(None, [listing.title, listing.description, listing.location])
                ).lower()
                return search.lower() in haystack
            return True

        return sorted(
            (l for l in self.rows.values() if matches(l)),
            key=lambda l: l.created_at,
            reverse=True,
        )

    async def update_owned(
        self, listing_id: UUID, owner_email: str, changes: dict[str, Any]
    ) -> Listing | None:
        listing = self.rows.get(listing_id)
        if listing is None or listing.seller_email != owner_email:
            return None
        for name, value in changes.items():
            setattr(listing, name, value)
        listing.updated_at = self._clock.now()
        return listing

    async def delete_owned(self, listing_id: UUID, owner_email: str) -> int:
        listing = self.rows.get(listing_id)
        if listing is None or listing.seller_email != owner_email:
            return 0
        del self.rows[listing_id]
        return 1


class InMemoryMessageRepository(MessageRepository):
    def __init__(self) -> None:
        self.rows: list[Message] = []
        self._clock = _Clock()

    async def add(self, draft: MessageDraft) -> Message:
        message = Message.from_draft(draft)
        message.created_at = self._clock.now()
        self.rows.append(message)
        return message

    async def list_for_listing(self, listing_id: UUID | None = None) -> list[Message]:
        rows = [m for m in self.rows if listing_id is None or m.listing_id == listing_id]
        return sorted(rows, key=lambda m: m.created_at)


class InMemoryImageStorage(ImageStorage):
    base_url = "https://images.example.test/listing-images"

    def __init__(self, fail_on_call: int | None = None) -> None:
        self.blobs: dict[str, tuple[bytes, str]] = {}
        self.deleted: list[str] = []
        self.fail_on_call = fail_on_call
        self.failure: Exception = RuntimeError("container unavailable")
        self._calls = 0

    async def put(self, name: str, data: bytes, content_type: str) -> None:
        self._calls += 1
        if self.fail_on_call == self._calls:
            raise self.failure
        if name in self.blobs:
            raise BlobAlreadyExistsError(name)
        self.blobs[name] = (data, content_type)

    async def delete(self, name: str) -> None:
        self.blobs.pop(name, None)
        self.deleted.append(name)

    def public_url(self, name: str) -> str:
        return f"{self.base_url}/{name}"


@pytest.fixture()
def listing_repo() -> InMemoryListingRepository:
    return InMemoryListingRepository()


@pytest.fixture()
def message_repo() -> InMemoryMessageRepository:
    return InMemoryMessageRepository()


@pytest.fixture()
def image_storage() -> InMemoryImageStorage:
    return InMemoryImageStorage()


@pytest.fixture()
def client(
    listing_repo: InMemoryListingRepository,
    message_repo: InMemoryMessageRepository,
    image_storage: InMemoryImageStorage,
) -> Iterator[TestClient]:
    app.dependency_overrides[get_listing_repo] = lambda: listing_repo
    app.dependency_overrides[get_message_repo] = lambda: message_repo
    app.dependency_overrides[get_image_storage] = lambda: image_storage
    app.dependency_overrides[get_principal] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def sign_in() -> Callable[[str], Principal]:
    """Make subsequent requests come from the given email."""

    def _sign_in(email: str) -> Principal:
        principal = Principal(email=email, subject=str(uuid4()))
        app.dependency_overrides[get_principal] = lambda: principal
        return principal

    return _sign_in
