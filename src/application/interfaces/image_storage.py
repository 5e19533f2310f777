from abc import ABC, abstractmethod


class BlobAlreadyExistsError(Exception):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Blob {name} already exists.")


class ImageStorage(ABC):
    """Port for the blob container that holds listing images."""

    @abstractmethod
    async def put(self, name: str, data: bytes, content_type: str) -> None:
        """Store data under name. Must raise BlobAlreadyExistsError rather than overwrite."""
        ...

    @abstractmethod
    async def delete(self, name: str) -> None:
        ...

    @abstractmethod
    def public_url(self, name: str) -> str:
        ...
