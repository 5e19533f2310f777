from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import get_message_repo, get_post_message_use_case, get_principal
from src.api.schemas.error_schemas import error_responses
from src.api.schemas.message_schemas import MessageCreateRequest, MessageResponse
from src.application.interfaces.message_repository import MessageRepository
from src.application.use_cases.post_message import PostMessage, PostMessageInput
from src.application.validation import parse_uuid
from src.domain.entities.message import Message
from src.domain.entities.principal import Principal

router = APIRouter(prefix="/messages", tags=["messages"])


def _message_to_response(message: Message) -> MessageResponse:
    return MessageResponse(
        id=message.id,
        listing_id=message.listing_id,
        buyer_email=message.buyer_email,
        seller_email=message.seller_email,
        message=message.message,
        created_at=message.created_at,
    )


@router.get("", response_model=list[MessageResponse], responses=error_responses(500))
async def list_messages(
    listing_id: str | None = Query(default=None),
    repo: MessageRepository = Depends(get_message_repo),
) -> list[MessageResponse]:
    """Conversation for one listing, oldest first. Without listing_id, every message."""
    if not listing_id:
        messages = await repo.list_for_listing(None)
    else:
        parsed = parse_uuid(listing_id)
        # A malformed id cannot match any row
        messages = await repo.list_for_listing(parsed) if parsed is not None else []
    return [_message_to_response(m) for m in messages]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses=error_responses(400, 401, 500),
)
async def post_message(
    body: MessageCreateRequest,
    principal: Principal | None = Depends(get_principal),
    use_case: PostMessage = Depends(get_post_message_use_case),
) -> MessageResponse:
    message = await use_case.execute(PostMessageInput(**body.model_dump()), principal)
    return _message_to_response(message)
