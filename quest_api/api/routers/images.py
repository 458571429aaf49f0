"""
Image upload endpoint.

Routes:
- POST /images - Upload an image to the public or private bucket

Dependencies: quest_api.application.services, quest_api.models
System role: Image asset HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile

from quest_api.api.deps.auth import get_current_user_id
from quest_api.api.deps.dependencies import get_image_service
from quest_api.application.services.image_service import ImageService
from quest_api.models.image import ImageUploadResponse

from .error_handling import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/images", tags=["images"])


@router.post("", response_model=ImageUploadResponse, status_code=201)
@handle_service_errors
async def upload_image(
    file: UploadFile = File(...),
    public: bool = Form(True),
    current_user_id: str = Depends(get_current_user_id),
    image_service: ImageService = Depends(get_image_service),
) -> ImageUploadResponse:
    """
    Upload an image.

    Raises:
        HTTPException(400): Unsupported type, empty or too large
        HTTPException(500): Upload failed
    """
    # Read at most one byte past the limit.
    data = await file.read(image_service.max_upload_bytes + 1)
    logger.info(
        "Uploading image",
        extra={"user_id": current_user_id, "image_name": file.filename, "public": public},
    )
    result = await image_service.upload_image(
        data=data,
        filename=file.filename,
        content_type=file.content_type,
        public=public,
    )
    return ImageUploadResponse(**result)
