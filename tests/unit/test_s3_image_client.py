"""Test suite for S3ImageClient with a mocked boto3 client."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from quest_api.boundary.aws.s3_client import S3ImageClient
from quest_api.core.exceptions import StorageError


@pytest.fixture
def boto_client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def s3_client(boto_client) -> S3ImageClient:
    return S3ImageClient("public-bucket", "private-bucket", client=boto_client)


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "HeadObject")


def test_upload_goes_to_bucket_by_visibility(s3_client, boto_client):
    s3_client.upload_image("images/a.png", b"data", "image/png", public=True)
    s3_client.upload_image("images/b.png", b"data", "image/png", public=False)

    buckets = [call.kwargs["Bucket"] for call in boto_client.put_object.call_args_list]
    assert buckets == ["public-bucket", "private-bucket"]
    assert boto_client.put_object.call_args.kwargs["ContentType"] == "image/png"


def test_upload_failure_is_storage_error(s3_client, boto_client):
    boto_client.put_object.side_effect = _client_error("AccessDenied")

    with pytest.raises(StorageError) as exc_info:
        s3_client.upload_image("images/a.png", b"data", "image/png", public=True)
    assert exc_info.value.details["bucket"] == "public-bucket"


def test_public_url_virtual_hosted(s3_client):
    assert (
        s3_client.public_url("images/a.png")
        == "https://public-bucket.s3.ap-northeast-1.amazonaws.com/images/a.png"
    )


def test_public_url_with_endpoint_override(boto_client):
    client = S3ImageClient(
        "public-bucket", "private-bucket", endpoint_url="http://localhost:4566/", client=boto_client
    )

    assert client.public_url("images/a.png") == "http://localhost:4566/public-bucket/images/a.png"


def test_presigned_url_targets_private_bucket(s3_client, boto_client):
    boto_client.generate_presigned_url.return_value = "https://signed"
    before = datetime.now(timezone.utc)

    url, expires_at = s3_client.generate_presigned_download_url("images/a.png", expires_in=60)

    assert url == "https://signed"
    assert boto_client.generate_presigned_url.call_args.kwargs["Params"]["Bucket"] == "private-bucket"
    assert (expires_at - before).total_seconds() >= 60


def test_file_exists(s3_client, boto_client):
    assert s3_client.file_exists("images/a.png", public=True)


@pytest.mark.parametrize("code", ["404", "NoSuchKey"])
def test_file_missing(s3_client, boto_client, code):
    boto_client.head_object.side_effect = _client_error(code)

    assert not s3_client.file_exists("images/a.png", public=False)


def test_file_exists_reraises_other_errors(s3_client, boto_client):
    boto_client.head_object.side_effect = _client_error("AccessDenied")

    with pytest.raises(ClientError):
        s3_client.file_exists("images/a.png", public=True)


def test_delete_image(s3_client, boto_client):
    s3_client.delete_image("images/a.png", public=False)

    boto_client.delete_object.assert_called_once_with(Bucket="private-bucket", Key="images/a.png")
