from dataclasses import dataclass
from pathlib import PurePosixPath
from uuid import uuid4

import structlog

from src.application.errors import InvalidRequestError, StorageError
from src.application.interfaces.image_storage import ImageStorage

logger = structlog.get_logger(__name__)

IMAGE_CONTENT_TYPE_PREFIX = "image/"


@dataclass
class ImageUpload:
    filename: str | None
    content_type: str | None
    data: bytes


@dataclass
class UploadListingImagesOutput:
    urls: list[str]


def generate_blob_name(filename: str) -> str:
    """A fresh UUID keeps the caller's extension but never the caller's name."""
    return f"{uuid4()}{PurePosixPath(filename).suffix.lower()}"


def is_acceptable_image(upload: ImageUpload) -> bool:
    return bool(upload.filename) and (upload.content_type or "").startswith(
        IMAGE_CONTENT_TYPE_PREFIX
    )


class UploadListingImages:
    """
    Use case: store a batch of listing images and return their public URLs.

    The batch is all-or-nothing: if any file fails, blobs already written for
    this request are removed before the failure is reported.
    """

    def __init__(self, storage: ImageStorage) -> None:
        self._storage = storage

    async def execute(self, uploads: list[ImageUpload]) -> UploadListingImagesOutput:
        stored: list[str] = []
        urls: list[str] = []

        for upload in uploads:
            if not is_acceptable_image(upload):
                logger.warning(
                    "skipping_non_image_upload",
                    filename=upload.filename or "unknown",
                    content_type=upload.content_type,
                )
                continue

            blob_name = generate_blob_name(upload.filename)  # type: ignore[arg-type]
            try:
                await self._storage.put(blob_name, upload.data, upload.content_type)  # type: ignore[arg-type]
                stored.append(blob_name)
                urls.append(self._storage.public_url(blob_name))
            except Exception as exc:
                logger.exception(
                    "image_upload_failed",
                    filename=upload.filename,
                    blob_name=blob_name,
                )
                await self._discard(stored)
                raise StorageError(f"Failed to upload {upload.filename}.") from exc

        if not urls:
            raise InvalidRequestError("No valid image files received.")

        logger.info("listing_images_uploaded", count=len(urls))
        return UploadListingImagesOutput(urls=urls)

    async def _discard(self, blob_names: list[str]) -> None:
        for name in blob_names:
            try:
                await self._storage.delete(name)
            except Exception:
                logger.exception("orphaned_image_cleanup_failed", blob_name=name)
