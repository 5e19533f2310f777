"""
FastAPI dependency injection wiring.

Each dependency function returns a fully-constructed object with its
collaborators injected, so the route handlers stay thin.
"""
from collections.abc import AsyncGenerator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.image_storage import ImageStorage
from src.application.interfaces.listing_repository import ListingRepository
from src.application.interfaces.message_repository import MessageRepository
from src.application.use_cases.create_listing import CreateListing
from src.application.use_cases.delete_listing import DeleteListing
from src.application.use_cases.get_listing import GetListing
from src.application.use_cases.post_message import PostMessage
from src.application.use_cases.update_listing import UpdateListing
from src.application.use_cases.upload_listing_images import UploadListingImages
from src.domain.entities.principal import Principal
from src.infrastructure.auth.token_verifier import SupabaseTokenVerifier
from src.infrastructure.database.connection import get_db_session
from src.infrastructure.database.repositories.listing_repository import (
    SqlAlchemyListingRepository,
)
from src.infrastructure.database.repositories.message_repository import (
    SqlAlchemyMessageRepository,
)
from src.infrastructure.storage.azure_blob_storage import AzureBlobImageStorage

_bearer = HTTPBearer(auto_error=False)


# ---- Low-level dependencies ------------------------------------------------

def get_listing_repo(session: AsyncSession = Depends(get_db_session)) -> ListingRepository:
    return SqlAlchemyListingRepository(session)


def get_message_repo(session: AsyncSession = Depends(get_db_session)) -> MessageRepository:
    return SqlAlchemyMessageRepository(session)


async def get_image_storage() -> AsyncGenerator[ImageStorage, None]:
    storage = AzureBlobImageStorage()
    try:
        yield storage
    finally:
        await storage.close()


def get_token_verifier() -> SupabaseTokenVerifier:
    return SupabaseTokenVerifier()


# ---- Caller identity --------------------------------------------------------

def get_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    verifier: SupabaseTokenVerifier = Depends(get_token_verifier),
) -> Principal | None:
    """The authenticated caller, or None when no bearer token was sent."""
    if credentials is None:
        return None
    return verifier.verify(credentials.credentials)


# ---- Use-case dependencies -------------------------------------------------

def get_create_listing_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> CreateListing:
    return CreateListing(listing_repo)


def get_get_listing_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> GetListing:
    return GetListing(listing_repo)


def get_update_listing_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> UpdateListing:
    return UpdateListing(listing_repo)


def get_delete_listing_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> DeleteListing:
    return DeleteListing(listing_repo)


def get_post_message_use_case(
    message_repo: MessageRepository = Depends(get_message_repo),
) -> PostMessage:
    return PostMessage(message_repo)


def get_upload_images_use_case(
    storage: ImageStorage = Depends(get_image_storage),
) -> UploadListingImages:
    return UploadListingImages(storage)
