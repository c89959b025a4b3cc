"""S3 implementation of ObjectStorage."""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from pomodoro_shared.errors import MintingError, RetrievalError

logger = logging.getLogger(__name__)


class S3ObjectStorage:
    """ObjectStorage implementation using S3."""

    def __init__(
        self,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
        client=None,
    ) -> None:
        self._client = client or boto3.client(
            "s3",
            region_name=region_name,
            endpoint_url=endpoint_url,
        )

    def list_keys(self, bucket: str, prefix: str = "") -> list[str]:
        """Return all keys under prefix. Pages through list_objects_v2 until exhausted."""
        paginator = self._client.get_paginator("list_objects_v2")
        keys: list[str] = []
        try:
            for page in paginator.paginate(Bucket=bucket, Prefix=prefix):
                for obj in page.get("Contents") or []:
                    key = obj.get("Key")
                    if key:
                        keys.append(key)
        except (ClientError, BotoCoreError) as e:
            raise RetrievalError(
                f"Failed to list s3://{bucket}/{prefix}: {e}"
            ) from e
        logger.debug("s3: listed %d keys under s3://%s/%s", len(keys), bucket, prefix)
        return keys

    def presign_download(
        self,
        bucket: str,
        key: str,
        *,
        expires_in: int = 3600,
    ) -> str:
        """Return a presigned GET URL for the given bucket and key."""
        if not key:
            raise MintingError("Cannot presign an empty object key")
        try:
            return self._client.generate_presigned_url(
                "get_object",
                Params={"Bucket": bucket, "Key": key},
                ExpiresIn=expires_in,
            )
        except (ClientError, BotoCoreError) as e:
            raise MintingError(f"Failed to presign s3://{bucket}/{key}: {e}") from e
