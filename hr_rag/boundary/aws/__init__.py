"""
AWS boundary layer.

Provides S3 operations for the policy documents bucket.

Dependencies: boto3
System role: Object storage adapter
"""

from hr_rag.boundary.aws.s3_client import S3DocumentClient, build_object_key

__all__ = ["S3DocumentClient", "build_object_key"]
