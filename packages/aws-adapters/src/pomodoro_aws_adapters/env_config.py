"""
Build AWS adapter instances from environment variables.

The bucket name itself is read by the skill settings (BUCKET_NAME); this module
only wires the S3 client.

Optional env vars:
- AWS_REGION (set by the Lambda runtime)
- AWS_ENDPOINT_URL (e.g. for LocalStack)
"""

import os

from .s3_storage import S3ObjectStorage


def _get_region() -> str | None:
    return os.environ.get("AWS_REGION") or None


def _get_endpoint_url() -> str | None:
    return os.environ.get("AWS_ENDPOINT_URL") or None


def object_storage_from_env(region_name: str | None = None) -> S3ObjectStorage:
    """Build S3ObjectStorage (uses default credentials; bucket names come from callers).
    An explicit region_name wins over AWS_REGION."""
    return S3ObjectStorage(
        region_name=region_name or _get_region(),
        endpoint_url=_get_endpoint_url(),
    )
