"""Access Minter: turn catalog keys into time-boxed retrieval URLs."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor

from pomodoro_shared import AccessGrant
from pomodoro_shared.errors import MintingError, PlaybackError
from pomodoro_shared.interfaces import ObjectStorage

logger = logging.getLogger(__name__)

URL_EXPIRES_IN = 3600
MAX_CONCURRENT_MINTS = 8


class AccessMinter:
    """Mints a fresh presigned URL per request. Grants are never cached."""

    def __init__(
        self,
        storage: ObjectStorage,
        bucket: str,
        *,
        expires_in: int = URL_EXPIRES_IN,
    ) -> None:
        self._storage = storage
        self._bucket = bucket
        self._expires_in = expires_in

    def mint(self, key: str) -> AccessGrant:
        """Presign one key. Raises MintingError for an empty key or a signing failure."""
        if not key:
            raise MintingError("Cannot mint access for an empty key")
        minted_at = int(time.time())
        try:
            url = self._storage.presign_download(
                self._bucket, key, expires_in=self._expires_in
            )
        except PlaybackError:
            raise
        except Exception as e:
            raise MintingError(f"Failed to mint access for {key!r}: {e}") from e
        logger.info(
            "mint: key=%s expires_in=%d", key, self._expires_in
        )
        return AccessGrant(
            key=key, url=url, expires_in=self._expires_in, minted_at=minted_at
        )

    def mint_all(self, keys: list[str]) -> list[AccessGrant]:
        """
        Presign every key concurrently; grants come back in catalog order.

        Waits for all mints. If any fails, its error is raised and no partial
        list is returned.
        """
        if not keys:
            return []
        workers = min(MAX_CONCURRENT_MINTS, len(keys))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self.mint, key) for key in keys]
            grants = [f.result() for f in futures]
        logger.info("mint: pre-minted %d grants", len(grants))
        return grants
