"""
Azure Blob Storage adapter for listing images.

Uploads go through the async SDK with ``overwrite=False`` so an existing blob
is never replaced. The container is expected to allow anonymous blob reads;
the public URL is the blob's own URL.
"""
import structlog
from azure.core.exceptions import AzureError, ResourceExistsError, ResourceNotFoundError
from azure.identity.aio import DefaultAzureCredential
from azure.storage.blob import ContentSettings
from azure.storage.blob.aio import BlobServiceClient

from src.application.interfaces.image_storage import BlobAlreadyExistsError, ImageStorage
from src.config import settings

logger = structlog.get_logger(__name__)


class ImageStorageConfigError(Exception):
    """Raised when neither a connection string nor an account URL is configured."""


class AzureBlobImageStorage(ImageStorage):

    def __init__(
        self,
        container: str = settings.listing_images_container,
        connection_string: str = settings.azure_storage_connection_string,
        account_url: str = settings.azure_storage_account_url,
    ) -> None:
        self._credential: DefaultAzureCredential | None = None
        if connection_string:
            self._service = BlobServiceClient.from_connection_string(connection_string)
        elif account_url:
            self._credential = DefaultAzureCredential()
            self._service = BlobServiceClient(account_url=account_url, credential=self._credential)
        else:
            raise ImageStorageConfigError(
                "AZURE_STORAGE_CONNECTION_STRING or AZURE_STORAGE_ACCOUNT_URL must be set"
            )
        self._container = self._service.get_container_client(container)

    async def put(self, name: str, data: bytes, content_type: str) -> None:
        blob = self._container.get_blob_client(name)
        try:
            await blob.upload_blob(
                data,
                overwrite=False,
                content_settings=ContentSettings(content_type=content_type),
            )
        except ResourceExistsError as exc:
            logger.error("blob_already_exists", blob_name=name)
            raise BlobAlreadyExistsError(name) from exc
        except AzureError:
            logger.exception("blob_upload_failed", blob_name=name)
            raise
        logger.info("blob_uploaded", blob_name=name, size=len(data), content_type=content_type)

    async def delete(self, name: str) -> None:
        try:
            await self._container.delete_blob(name)
        except ResourceNotFoundError:
            logger.warning("blob_already_absent", blob_name=name)
            return
        logger.info("blob_deleted", blob_name=name)

    def public_url(self, name: str) -> str:
        return self._container.get_blob_client(name).url

    async def close(self) -> None:
        await self._service.close()
        if self._credential is not None:
            await self._credential.close()
