"""
S3 client for image bucket operations.

Stores image assets in one of two buckets: a public bucket whose
objects are served by plain URL, and a private bucket whose objects are
only reachable through presigned URLs.

Dependencies: boto3
System role: API-level S3 operations for image assets
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import boto3
from botocore.exceptions import ClientError

from quest_api.core.exceptions import StorageError


class S3ImageClient:
    """S3 client for public and private image buckets."""

    def __init__(
        self,
        public_bucket: str,
        private_bucket: str,
        region: str = "ap-northeast-1",
        endpoint_url: str | None = None,
        client: Any | None = None,
    ) -> None:
        """
        Initialize S3 client for the image buckets.

        Args:
            public_bucket: Bucket with a public-read policy
            private_bucket: Bucket with all public access blocked
            region: AWS region for both buckets
            endpoint_url: Endpoint override (LocalStack)
            client: Preconfigured boto3 client (built if None)
        """
        self._public_bucket = public_bucket
        self._private_bucket = private_bucket
        self._region = region
        self._endpoint_url = endpoint_url
        self._s3_client = client or boto3.client(
            "s3", region_name=region, endpoint_url=endpoint_url
        )

    def bucket_for(self, public: bool) -> str:
        """Return the bucket name for a visibility."""
        return self._public_bucket if public else self._private_bucket

    def upload_image(
        self,
        s3_key: str,
        data: bytes,
        content_type: str,
        public: bool,
    ) -> None:
        """
        Upload image bytes.

        Args:
            s3_key: S3 object key (path in bucket)
            data: Image content
            content_type: MIME type of the image
            public: Store in the public bucket when True

        Raises:
            StorageError: If the upload fails
        """
        bucket = self.bucket_for(public)
        try:
            self._s3_client.put_object(
                Bucket=bucket,
                Key=s3_key,
                Body=data,
                ContentType=content_type,
            )
        except ClientError as e:
            raise StorageError(
                str(e), operation="put_object", details={"bucket": bucket, "key": s3_key}
            ) from e

    def public_url(self, s3_key: str) -> str:
        """
        Build the plain URL of an object in the public bucket.

        Args:
            s3_key: S3 object key

        Returns:
            str: Virtual-hosted URL, or path-style under an endpoint override
        """
        if self._endpoint_url:
            return f"{self._endpoint_url.rstrip('/')}/{self._public_bucket}/{s3_key}"
        return f"https://{self._public_bucket}.s3.{self._region}.amazonaws.com/{s3_key}"

    def generate_presigned_download_url(
        self,
        s3_key: str,
        expires_in: int = 3600,
    ) -> tuple[str, datetime]:
        """
        Generate presigned URL for viewing a private image.

        Args:
            s3_key: S3 object key (path in bucket)
            expires_in: URL expiry in seconds (default 1 hour)

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)

        Raises:
            ClientError: If presigned URL generation fails
        """
        presigned_url = self._s3_client.generate_presigned_url(
            ClientMethod="get_object",
            Params={
                "Bucket": self._private_bucket,
                "Key": s3_key,
            },
            ExpiresIn=expires_in,
        )
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
        return presigned_url, expires_at

    def file_exists(self, s3_key: str, public: bool) -> bool:
        """
        Check if an image exists.

        Args:
            s3_key: S3 object key to check
            public: Look in the public bucket when True

        Returns:
            bool: True if file exists, False otherwise
        """
        try:
            self._s3_client.head_object(Bucket=self.bucket_for(public), Key=s3_key)
            return True
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("404", "NoSuchKey"):
                return False
            raise

    def delete_image(self, s3_key: str, public: bool) -> None:
        """
        Delete an image.

        Args:
            s3_key: S3 object key
            public: Delete from the public bucket when True

        Raises:
            StorageError: If the delete fails
        """
        bucket = self.bucket_for(public)
        try:
            self._s3_client.delete_object(Bucket=bucket, Key=s3_key)
        except ClientError as e:
            raise StorageError(
                str(e), operation="delete_object", details={"bucket": bucket, "key": s3_key}
            ) from e
