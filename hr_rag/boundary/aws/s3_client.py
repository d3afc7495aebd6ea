"""
S3 client for the policy documents bucket.

Handles presigned URL generation for direct browser uploads and downloads,
existence checks before registration, and blob deletion. Downloads for
text extraction are handled by S3DownloadTask in the pipeline.

Dependencies: boto3, botocore, hr_rag.core.exceptions
System role: API-level S3 operations for policy documents
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from hr_rag.core.exceptions import StorageError

logger = logging.getLogger(__name__)


def build_object_key(organization_id: UUID, upload_id: UUID, file_name: str) -> str:
    """
    Build the bucket key for an uploaded policy document.

    Keys are namespaced by organization so that a bucket listing can be
    audited per tenant.
    """
    safe_name = file_name.replace("/", "_").strip() or "document"
    return f"{organization_id}/{upload_id}/{safe_name}"


class S3DocumentClient:
    """S3 client for policy document bucket operations."""

    def __init__(self, bucket: str, region: str = "ap-southeast-2") -> None:
        """
        Initialize S3 client for document bucket.

        Args:
            bucket: S3 bucket name for document storage
            region: AWS region for S3 bucket
        """
        self._bucket = bucket
        self._region = region
        self._s3_client = boto3.client("s3", region_name=region)

    @property
    def bucket(self) -> str:
        return self._bucket

    def generate_presigned_upload_url(
        self,
        s3_key: str,
        content_type: str = "application/octet-stream",
        expires_in: int = 3600,
    ) -> tuple[str, datetime]:
        """
        Generate presigned URL for uploading a document.

        Args:
            s3_key: S3 object key (path in bucket)
            content_type: MIME type of the file
            expires_in: URL expiry in seconds (default 1 hour)

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)

        Raises:
            StorageError: If presigned URL generation fails
        """
        return self._presign(
            "put_object",
            {"Bucket": self._bucket, "Key": s3_key, "ContentType": content_type},
            expires_in,
        )

    def generate_presigned_download_url(
        self,
        s3_key: str,
        expires_in: int = 3600,
    ) -> tuple[str, datetime]:
        """
        Generate presigned URL for downloading/viewing a document.

        Args:
            s3_key: S3 object key (path in bucket)
            expires_in: URL expiry in seconds (default 1 hour)

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)

        Raises:
            StorageError: If presigned URL generation fails
        """
        return self._presign("get_object", {"Bucket": self._bucket, "Key": s3_key}, expires_in)

    def _presign(self, method: str, params: dict, expires_in: int) -> tuple[str, datetime]:
        try:
            presigned_url = self._s3_client.generate_presigned_url(
                ClientMethod=method,
                Params=params,
                ExpiresIn=expires_in,
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(
                f"Failed to generate presigned URL for {params['Key']}",
                details={"method": method, "error": str(e)},
            ) from e
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
        return presigned_url, expires_at

    def file_exists(self, s3_key: str) -> bool:
        """
        Check if a file exists in S3.

        Args:
            s3_key: S3 object key to check

        Returns:
            bool: True if file exists, False otherwise

        Raises:
            StorageError: If S3 fails for any reason other than a missing key
        """
        try:
            self._s3_client.head_object(Bucket=self._bucket, Key=s3_key)
            return True
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("404", "NoSuchKey", "NotFound"):
                return False
            raise StorageError(
                f"Failed to check object {s3_key}",
                details={"bucket": self._bucket, "error": str(e)},
            ) from e

    def delete_object(self, s3_key: str) -> None:
        """
        Delete a document blob. Deleting a missing key is not an error.

        Args:
            s3_key: S3 object key to delete

        Raises:
            StorageError: If the delete call fails
        """
        try:
            self._s3_client.delete_object(Bucket=self._bucket, Key=s3_key)
        except (ClientError, BotoCoreError) as e:
            logger.error(
                f"{__name__}:delete_object - Failed to delete object",
                extra={"bucket": self._bucket, "s3_key": s3_key, "error": str(e)},
            )
            raise StorageError(
                f"Failed to delete object {s3_key}",
                details={"bucket": self._bucket, "error": str(e)},
            ) from e
