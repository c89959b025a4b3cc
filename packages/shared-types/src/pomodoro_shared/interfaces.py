"""
Cloud-agnostic interface for the object storage the skill reads videos from.

The AWS implementation lives in aws-adapters. Playback logic depends on this
Protocol and receives the implementation by injection, so tests substitute a
fake without touching process-wide state.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ObjectStorage(Protocol):
    """Object storage: list keys and presign download URLs."""

    def list_keys(self, bucket: str, prefix: str = "") -> list[str]:
        """Return every object key under prefix, following pagination to the end.
        Raises RetrievalError when storage cannot be reached."""
        ...

    def presign_download(
        self,
        bucket: str,
        key: str,
        *,
        expires_in: int = 3600,
    ) -> str:
        """Return a presigned GET URL valid for expires_in seconds.
        Raises MintingError when the key is invalid or signing fails."""
        ...
