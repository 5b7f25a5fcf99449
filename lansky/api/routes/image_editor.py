"""Product photo editor endpoints."""

from fastapi import APIRouter, Depends, File, Form, UploadFile

from lansky.api.dependencies import get_edit_product_image_use_case
from lansky.application.dto.requests import EditImageRequest
from lansky.application.dto.responses import ErrorResponse, ImageEditResultResponse
from lansky.application.use_cases import EditProductImageUseCase
from lansky.config import get_settings
from lansky.core.entities import ImagePayload
from lansky.core.entities.image import DEFAULT_IMAGE_MIME
from lansky.core.exceptions import ValidationError

router = APIRouter(prefix="/api/image-editor", tags=["image-editor"])

_ERRORS = {
    400: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    413: {"model": ErrorResponse},
    415: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def _to_response(edited: ImagePayload | None) -> ImageEditResultResponse:
    if edited is None:
        return ImageEditResultResponse(edited=False)
    return ImageEditResultResponse(
        edited=True,
        image=edited.to_data_url(),
        mime_type=edited.mime_type,
    )


@router.post("/edit", response_model=ImageEditResultResponse, responses=_ERRORS)
async def edit_uploaded_image(
    file: UploadFile = File(...),
    prompt: str = Form(..., min_length=1),
    use_case: EditProductImageUseCase = Depends(get_edit_product_image_use_case),
) -> ImageEditResultResponse:
    """
    Edit an uploaded product photo.

    ``edited`` is false when the model answered without an image.
    """
    # One byte past the limit is enough for the size check to reject it
    limit = get_settings().api.max_upload_size
    image = ImagePayload(
        data=await file.read(limit + 1),
        mime_type=file.content_type or DEFAULT_IMAGE_MIME,
    )
    edited = await use_case.execute(image, prompt, filename=file.filename or "upload")
    return _to_response(edited)


@router.post("/edit-inline", response_model=ImageEditResultResponse, responses=_ERRORS)
async def edit_inline_image(
    request: EditImageRequest,
    use_case: EditProductImageUseCase = Depends(get_edit_product_image_use_case),
) -> ImageEditResultResponse:
    """Edit an image sent as a ``data:`` URL."""
    try:
        image = ImagePayload.from_data_url(request.image)
    except ValueError as e:
        raise ValidationError("image", str(e)) from e
    edited = await use_case.execute(image, request.prompt, filename="inline")
    return _to_response(edited)
