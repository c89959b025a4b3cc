"""
Catalog Resolver: list the bucket and order the playable videos.

The order is a pure function of the listing at call time. Nothing is cached,
so reordering or adding objects changes the playlist for the next request.
"""

import logging

from pomodoro_shared.interfaces import ObjectStorage

logger = logging.getLogger(__name__)


def is_media_key(key: str, suffix: str = ".mp4") -> bool:
    """True when key ends with suffix, compared case-insensitively."""
    return key.lower().endswith(suffix.lower())


def resolve_catalog(
    storage: ObjectStorage,
    bucket: str,
    prefix: str = "",
    suffix: str = ".mp4",
) -> list[str]:
    """
    Return the media keys under prefix, sorted by ascending byte order of the key.

    An empty result is valid. RetrievalError from storage propagates unchanged.
    """
    keys = storage.list_keys(bucket, prefix)
    catalog = sorted(
        (k for k in keys if is_media_key(k, suffix)),
        key=lambda k: k.encode("utf-8"),
    )
    logger.info(
        "catalog: resolved %d of %d keys under s3://%s/%s",
        len(catalog),
        len(keys),
        bucket,
        prefix,
    )
    return catalog
