"""
Error taxonomy shared by the use cases and the HTTP layer.

Each error carries the status code it maps to; the API's exception handlers
render them as ``{"error": <message>}``.
"""
from uuid import UUID


class MarketplaceError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRequestError(MarketplaceError):
    """Missing or malformed caller input."""

    status_code = 400


class AuthenticationError(MarketplaceError):
    """A bearer token was presented but could not be verified."""

    status_code = 401


class NotFoundError(MarketplaceError):
    status_code = 404


class ListingNotFoundError(NotFoundError):
    """
    Raised for a missing listing. Update/delete also raise it when the
    caller does not own the row, so existence is never leaked.
    """

    def __init__(self, listing_id: UUID | str, *, masked: bool = False) -> None:
        self.listing_id = listing_id
        message = "Listing not found or permission denied." if masked else "Listing not found."
        super().__init__(message)


class UnsupportedMediaTypeError(MarketplaceError):
    status_code = 415


class StorageError(MarketplaceError):
    """The relational or blob store reported a failure."""

    status_code = 500
