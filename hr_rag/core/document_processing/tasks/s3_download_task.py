"""
S3 document download task.

Downloads policy documents from S3 to a local temp directory for text
extraction. Callers own the returned directory and remove it when done.

Dependencies: boto3, botocore, hr_rag.core.exceptions
System role: First stage of document ingestion pipeline (S3 source)
"""

import os
import shutil
import tempfile
from pathlib import Path

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from hr_rag.core.exceptions import StorageError


class S3DownloadTask:
    """Download documents from S3 to local temp directory."""

    def __init__(self, bucket: str, region: str = "ap-southeast-2") -> None:
        """
        Initialize S3 download task.

        Args:
            bucket: S3 bucket name for document storage
            region: AWS region for S3 bucket
        """
        self._bucket = bucket
        self._region = region
        self._s3_client = boto3.client("s3", region_name=region)

    def download(self, s3_key: str) -> str:
        """
        Download document from S3 to a fresh temp directory.

        Args:
            s3_key: S3 object key (e.g., "<org_id>/<upload_id>/handbook.pdf")

        Returns:
            str: Local file path to downloaded document

        Raises:
            StorageError: When the key is invalid or the download fails
        """
        filename = Path(s3_key).name if s3_key else ""
        if not filename:
            raise StorageError(f"Invalid S3 key: {s3_key!r}", details={"s3_key": s3_key})

        temp_dir = tempfile.mkdtemp(prefix="hr_doc_pipeline_")
        local_path = os.path.join(temp_dir, filename)

        try:
            self._s3_client.download_file(
                Bucket=self._bucket,
                Key=s3_key,
                Filename=local_path,
            )
            return local_path

        except ClientError as e:
            shutil.rmtree(temp_dir, ignore_errors=True)
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            if error_code in ("404", "NoSuchKey"):
                raise StorageError(
                    f"File not found in S3: {s3_key}",
                    details={"bucket": self._bucket, "s3_key": s3_key},
                ) from e
            raise StorageError(
                f"Failed to download from S3: {e}",
                details={"bucket": self._bucket, "s3_key": s3_key},
            ) from e
        except BotoCoreError as e:
            shutil.rmtree(temp_dir, ignore_errors=True)
            raise StorageError(
                f"Unexpected error downloading from S3: {e}",
                details={"bucket": self._bucket, "s3_key": s3_key},
            ) from e
