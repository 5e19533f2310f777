"""Unit tests for the token verifier and the blob storage adapter."""
from unittest.mock import AsyncMock, MagicMock

import pytest
from azure.core.exceptions import ResourceExistsError, ResourceNotFoundError
from jose import jwt

from src.application.errors import AuthenticationError
from src.application.interfaces.image_storage import BlobAlreadyExistsError
from src.infrastructure.auth.token_verifier import SupabaseTokenVerifier
from src.infrastructure.storage.azure_blob_storage import (
    AzureBlobImageStorage,
    ImageStorageConfigError,
)

SECRET = "unit-test-secret"
AZURITE = "UseDevelopmentStorage=true"


def _token(claims: dict, secret: str = SECRET) -> str:  # type: ignore[type-arg]
    return jwt.encode(claims, secret, algorithm="HS256")


class TestSupabaseTokenVerifier:
    def test_valid_token(self) -> None:
        verifier = SupabaseTokenVerifier(secret=SECRET, audience="authenticated")
        principal = verifier.verify(
            _token({"sub": "u1", "email": "a@x.com", "aud": "authenticated"})
        )
        assert principal.email == "a@x.com"
        assert principal.subject == "u1"

    def test_wrong_audience(self) -> None:
        verifier = SupabaseTokenVerifier(secret=SECRET, audience="authenticated")
        with pytest.raises(AuthenticationError):
            verifier.verify(_token({"sub": "u1", "email": "a@x.com", "aud": "anon"}))

    def test_expired_token(self) -> None:
        verifier = SupabaseTokenVerifier(secret=SECRET, audience=None)
        with pytest.raises(AuthenticationError, match="expired"):
            verifier.verify(_token({"sub": "u1", "email": "a@x.com", "exp": 1}))

    def test_missing_email_claim(self) -> None:
        verifier = SupabaseTokenVerifier(secret=SECRET, audience=None)
        with pytest.raises(AuthenticationError, match="email"):
            verifier.verify(_token({"sub": "u1"}))

    def test_unconfigured_secret(self) -> None:
        verifier = SupabaseTokenVerifier(secret="", audience=None)
        with pytest.raises(AuthenticationError, match="not configured"):
            verifier.verify(_token({"email": "a@x.com"}))


class TestAzureBlobImageStorage:
    def test_requires_connection_details(self) -> None:
        with pytest.raises(ImageStorageConfigError):
            AzureBlobImageStorage(container="c", connection_string="", account_url="")

    def test_public_url_is_the_blob_url(self) -> None:
        storage = AzureBlobImageStorage(container="listing-images", connection_string=AZURITE)
        url = storage.public_url("abc.png")
        assert url.endswith("/listing-images/abc.png")

    @pytest.mark.asyncio
    async def test_put_never_overwrites(self) -> None:
        storage = AzureBlobImageStorage(container="listing-images", connection_string=AZURITE)
        blob = MagicMock()
        blob.upload_blob = AsyncMock()
        storage._container = MagicMock()
        storage._container.get_blob_client.return_value = blob

        await storage.put("abc.png", b"data", "image/png")

        kwargs = blob.upload_blob.await_args.kwargs
        assert kwargs["overwrite"] is False
        assert kwargs["content_settings"].content_type == "image/png"

    @pytest.mark.asyncio
    async def test_existing_blob_is_reported(self) -> None:
        storage = AzureBlobImageStorage(container="listing-images", connection_string=AZURITE)
        blob = MagicMock()
        blob.upload_blob = AsyncMock(side_effect=ResourceExistsError("exists"))
        storage._container = MagicMock()
        storage._container.get_blob_client.return_value = blob

        with pytest.raises(BlobAlreadyExistsError):
            await storage.put("abc.png", b"data", "image/png")

    @pytest.mark.asyncio
    async def test_deleting_a_missing_blob_is_not_an_error(self) -> None:
        storage = AzureBlobImageStorage(container="listing-images", connection_string=AZURITE)
        storage._container = MagicMock()
        storage._container.delete_blob = AsyncMock(side_effect=ResourceNotFoundError("gone"))

        await storage.delete("abc.png")
        storage._container.delete_blob.assert_awaited_once_with("abc.png")
