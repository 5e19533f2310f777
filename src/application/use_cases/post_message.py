from dataclasses import asdict, dataclass

import structlog

from src.application.errors import InvalidRequestError
from src.application.interfaces.message_repository import MessageRepository
from src.application.validation import parse_uuid, require_fields
from src.domain.entities.message import Message, MessageDraft
from src.domain.entities.principal import Principal

logger = structlog.get_logger(__name__)

REQUIRED_MESSAGE_FIELDS = ("listing_id", "buyer_email", "seller_email", "message")


@dataclass
class PostMessageInput:
    listing_id: str | None = None
    buyer_email: str | None = None
    seller_email: str | None = None
    message: str | None = None


class PostMessage:
    """Use case: append a buyer/seller message to a listing's conversation."""

    def __init__(self, message_repo: MessageRepository) -> None:
        self._message_repo = message_repo

    async def execute(
        self, input_data: PostMessageInput, principal: Principal | None = None
    ) -> Message:
        values = asdict(input_data)
        if not values.get("buyer_email") and principal is not None:
            values["buyer_email"] = principal.email

        require_fields(values, REQUIRED_MESSAGE_FIELDS)

        listing_id = parse_uuid(values["listing_id"])
        if listing_id is None:
            raise InvalidRequestError("listing_id is not a valid listing identifier.")

        message = await self._message_repo.add(
            MessageDraft(
                listing_id=listing_id,
                buyer_email=values["buyer_email"].strip(),
                seller_email=values["seller_email"].strip(),
                message=values["message"],
            )
        )

        logger.info(
            "message_posted",
            message_id=str(message.id),
            listing_id=str(listing_id),
        )
        return message
