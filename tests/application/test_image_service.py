"""Test suite for ImageService with a mocked S3 client."""

from datetime import datetime, timezone

import pytest

from quest_api.application.services.image_service import ImageService
from quest_api.configs.s3_images import S3ImagesSettings
from quest_api.core.exceptions import StorageError, ValidationError


@pytest.fixture
def image_settings() -> S3ImagesSettings:
    return S3ImagesSettings(
        public_bucket="public",
        private_bucket="private",
        max_upload_bytes=16,
        presigned_url_expiry=600,
    )


@pytest.fixture
def image_service(mock_s3_client, image_settings) -> ImageService:
    return ImageService(s3_client=mock_s3_client, settings=image_settings)


async def test_public_upload_returns_plain_url(image_service, mock_s3_client):
    result = await image_service.upload_image(b"png", "Stamp.PNG", "image/png", public=True)

    assert result["key"].startswith("images/")
    assert result["key"].endswith(".png")
    assert result["url"].endswith(result["key"])
    assert result["expires_at"] is None
    mock_s3_client.upload_image.assert_called_once_with(result["key"], b"png", "image/png", True)


async def test_private_upload_returns_presigned_url(image_service, mock_s3_client):
    expires = datetime(2030, 1, 1, tzinfo=timezone.utc)
    mock_s3_client.generate_presigned_download_url.return_value = ("https://signed", expires)

    result = await image_service.upload_image(b"jpg", "photo.jpg", "image/jpeg", public=False)

    assert result == {
        "key": result["key"],
        "url": "https://signed",
        "public": False,
        "expires_at": expires,
    }
    mock_s3_client.generate_presigned_download_url.assert_called_once_with(result["key"], 600)


async def test_extension_from_content_type_when_filename_has_none(image_service):
    result = await image_service.upload_image(b"gif", "stamp", "image/gif")

    assert result["key"].endswith(".gif")


@pytest.mark.parametrize("filename", ["x.html", "a.png/b", "../../etc/passwd", None])
async def test_key_ignores_client_filename(image_service, filename):
    result = await image_service.upload_image(b"png", filename, "image/png")

    assert result["key"].startswith("images/")
    assert result["key"].endswith(".png")
    assert result["key"].count("/") == 1


async def test_jpeg_key_extension(image_service):
    result = await image_service.upload_image(b"jpg", "photo.jpeg", "image/jpeg")

    assert result["key"].endswith(".jpg")


def test_max_upload_bytes_comes_from_settings(image_service):
    assert image_service.max_upload_bytes == 16


async def test_rejects_unsupported_type(image_service, mock_s3_client):
    with pytest.raises(ValidationError) as exc_info:
        await image_service.upload_image(b"text", "notes.txt", "text/plain")

    assert exc_info.value.details["field"] == "content_type"
    mock_s3_client.upload_image.assert_not_called()


async def test_rejects_empty_file(image_service):
    with pytest.raises(ValidationError):
        await image_service.upload_image(b"", "stamp.png", "image/png")


async def test_rejects_oversized_file(image_service):
    with pytest.raises(ValidationError) as exc_info:
        await image_service.upload_image(b"x" * 17, "stamp.png", "image/png")

    assert exc_info.value.details["limit"] == 16


async def test_storage_error_propagates(image_service, mock_s3_client):
    mock_s3_client.upload_image.side_effect = StorageError("denied", operation="put_object")

    with pytest.raises(StorageError):
        await image_service.upload_image(b"png", "stamp.png", "image/png")
