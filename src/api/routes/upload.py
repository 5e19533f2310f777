from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile

from src.api.dependencies import get_upload_images_use_case
from src.api.schemas.error_schemas import error_responses
from src.api.schemas.upload_schemas import UploadResponse
from src.application.errors import UnsupportedMediaTypeError
from src.application.use_cases.upload_listing_images import ImageUpload, UploadListingImages

router = APIRouter(tags=["upload"])

MULTIPART_FORM_DATA = "multipart/form-data"


def require_multipart(request: Request) -> None:
    """Reject non-multipart bodies before the image storage client is built."""
    content_type = request.headers.get("content-type", "")
    if MULTIPART_FORM_DATA not in content_type.lower():
        raise UnsupportedMediaTypeError("Invalid Content-Type. Expected multipart/form-data.")


async def _read_uploads(request: Request) -> list[ImageUpload]:
    form = await request.form()
    uploads: list[ImageUpload] = []
    try:
        for _, value in form.multi_items():
            # Plain text fields are not files
            if not isinstance(value, UploadFile):
                continue
            uploads.append(
                ImageUpload(
                    filename=value.filename,
                    content_type=value.content_type,
                    data=await value.read(),
                )
            )
    finally:
        await form.close()
    return uploads


# Route-level dependencies are resolved before the handler's own parameters
@router.post(
    "/upload",
    response_model=UploadResponse,
    responses=error_responses(400, 415, 500),
    dependencies=[Depends(require_multipart)],
)
async def upload_images(
    request: Request,
    use_case: UploadListingImages = Depends(get_upload_images_use_case),
) -> UploadResponse:
    """Store listing images and return their public URLs."""
    result = await use_case.execute(await _read_uploads(request))
    return UploadResponse(urls=result.urls)
