"""
Image service orchestrator.

Validates uploaded images and stores them in the public or private
image bucket.

Dependencies: quest_api.boundary.aws, quest_api.configs
System role: Image asset use case orchestration
"""

import asyncio
import logging
import uuid

from quest_api.boundary.aws.s3_client import S3ImageClient
from quest_api.configs.s3_images import S3ImagesSettings
from quest_api.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Accepted content types and the object key extension each one gets.
IMAGE_EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


class ImageService:
    """Image service orchestrator."""

    def __init__(self, s3_client: S3ImageClient, settings: S3ImagesSettings) -> None:
        """
        Initialize image service.

        Args:
            s3_client: Client for the image buckets
            settings: Upload limits and presigned URL expiry
        """
        self._s3_client = s3_client
        self._settings = settings

    @property
    def max_upload_bytes(self) -> int:
        """Largest accepted image size in bytes."""
        return self._settings.max_upload_bytes

    def _validate(self, data: bytes, content_type: str | None) -> str:
        if content_type not in IMAGE_EXTENSIONS:
            raise ValidationError(
                f"Unsupported image type: {content_type}",
                field="content_type",
                details={"allowed": sorted(IMAGE_EXTENSIONS)},
            )
        if not data:
            raise ValidationError("Image is empty", field="file")
        if len(data) > self.max_upload_bytes:
            raise ValidationError(
                "Image exceeds upload limit",
                field="file",
                details={"size": len(data), "limit": self.max_upload_bytes},
            )
        return content_type

    async def upload_image(
        self,
        data: bytes,
        filename: str | None,
        content_type: str | None,
        public: bool = True,
    ) -> dict:
        """
        Validate and store an image.

        The object key is a fresh UUID with the extension of the validated
        content type; the client file name is only logged.

        Args:
            data: Image bytes
            filename: Original file name
            content_type: MIME type reported by the client
            public: Store in the public bucket when True

        Returns:
            dict: key, url, public and expires_at (None for public images)

        Raises:
            ValidationError: If the type or size is not accepted
            StorageError: If the upload fails
        """
        content_type = self._validate(data, content_type)
        key = f"images/{uuid.uuid4()}{IMAGE_EXTENSIONS[content_type]}"

        await asyncio.to_thread(
            self._s3_client.upload_image, key, data, content_type, public
        )

        if public:
            url, expires_at = self._s3_client.public_url(key), None
        else:
            url, expires_at = await asyncio.to_thread(
                self._s3_client.generate_presigned_download_url,
                key,
                self._settings.presigned_url_expiry,
            )

        logger.info(
            "Image uploaded",
            extra={"key": key, "image_name": filename, "public": public, "size": len(data)},
        )
        return {"key": key, "url": url, "public": public, "expires_at": expires_at}
