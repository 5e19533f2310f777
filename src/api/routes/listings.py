from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import (
    get_create_listing_use_case,
    get_delete_listing_use_case,
    get_get_listing_use_case,
    get_listing_repo,
    get_principal,
    get_update_listing_use_case,
)
from src.api.schemas.error_schemas import error_responses
from src.api.schemas.listing_schemas import (
    DeleteListingResponse,
    ListingCreateRequest,
    ListingResponse,
    ListingUpdateRequest,
)
from src.application.interfaces.listing_repository import ListingRepository
from src.application.use_cases.create_listing import CreateListing, CreateListingInput
from src.application.use_cases.delete_listing import DeleteListing
from src.application.use_cases.get_listing import GetListing
from src.application.use_cases.update_listing import UpdateListing, UpdateListingInput
from src.domain.entities.listing import Listing
from src.domain.entities.principal import Principal
from src.domain.enums.listing_category import ListingCategory

router = APIRouter(prefix="/listings", tags=["listings"])


def _listing_to_response(listing: Listing) -> ListingResponse:
    return ListingResponse(
        id=listing.id,
        title=listing.title,
        description=listing.description,
        price=float(listing.price),
        category=listing.category,
        seller_email=listing.seller_email,
        image_url=listing.image_url,
        location=listing.location,
        created_at=listing.created_at,
        updated_at=listing.updated_at,
    )


@router.get("", response_model=list[ListingResponse], responses=error_responses(400, 500))
async def list_listings(
    category: ListingCategory | None = Query(default=None),
    seller_email: str | None = Query(default=None),
    search: str | None = Query(default=None),
    repo: ListingRepository = Depends(get_listing_repo),
) -> list[ListingResponse]:
    """List listings newest first, optionally narrowed by category, seller or text."""
    listings = await repo.list_all(
        category=category,
        seller_email=seller_email,
        search=search.strip() if search else None,
    )
    return [_listing_to_response(l) for l in listings]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ListingResponse,
    responses=error_responses(400, 401, 500),
)
async def create_listing(
    body: ListingCreateRequest,
    principal: Principal | None = Depends(get_principal),
    use_case: CreateListing = Depends(get_create_listing_use_case),
) -> ListingResponse:
    listing = await use_case.execute(
        CreateListingInput(**body.model_dump()),
        principal,
    )
    return _listing_to_response(listing)


@router.get(
    "/{listing_id}",
    response_model=ListingResponse,
    responses=error_responses(400, 404, 500),
)
async def get_listing(
    listing_id: str,
    use_case: GetListing = Depends(get_get_listing_use_case),
) -> ListingResponse:
    listing = await use_case.execute(listing_id)
    return _listing_to_response(listing)


@router.put(
    "/{listing_id}",
    response_model=ListingResponse,
    responses=error_responses(400, 401, 404, 500),
)
async def update_listing(
    listing_id: str,
    body: ListingUpdateRequest,
    principal: Principal | None = Depends(get_principal),
    use_case: UpdateListing = Depends(get_update_listing_use_case),
) -> ListingResponse:
    """Partially update a listing. Only its seller may do so."""
    listing = await use_case.execute(
        UpdateListingInput(listing_id=listing_id, changes=body.changes()),
        principal,
    )
    return _listing_to_response(listing)


@router.delete(
    "/{listing_id}",
    response_model=DeleteListingResponse,
    responses=error_responses(400, 401, 404, 500),
)
async def delete_listing(
    listing_id: str,
    principal: Principal | None = Depends(get_principal),
    use_case: DeleteListing = Depends(get_delete_listing_use_case),
) -> DeleteListingResponse:
    await use_case.execute(listing_id, principal)
    return DeleteListingResponse(message="Listing deleted successfully.")
