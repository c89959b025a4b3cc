"""Pytest fixtures for playback-skill tests (in-memory storage, settings)."""

import pytest

from playback_skill.config import PlaybackSkillSettings
from playback_skill.sequencer import PlaybackSequencer

BUCKET = "media-bucket"


class FakeObjectStorage:
    """In-memory ObjectStorage recording every call."""

    def __init__(
        self,
        keys: list[str] | None = None,
        *,
        list_error: Exception | None = None,
        presign_error: Exception | None = None,
    ) -> None:
        self.keys = list(keys or [])
        self.list_error = list_error
        self.presign_error = presign_error
        self.list_calls: list[tuple[str, str]] = []
        self.presign_calls: list[tuple[str, str, int]] = []

    def list_keys(self, bucket: str, prefix: str = "") -> list[str]:
        self.list_calls.append((bucket, prefix))
        if self.list_error is not None:
            raise self.list_error
        return [k for k in self.keys if k.startswith(prefix)]

    def presign_download(self, bucket: str, key: str, *, expires_in: int = 3600) -> str:
        self.presign_calls.append((bucket, key, expires_in))
        if self.presign_error is not None:
            raise self.presign_error
        n = len(self.presign_calls)
        return f"https://{bucket}.s3.amazonaws.com/{key}?X-Amz-Expires={expires_in}&n={n}"


@pytest.fixture
def make_storage():
    """Factory for FakeObjectStorage with custom keys or errors."""
    return FakeObjectStorage


@pytest.fixture
def storage() -> FakeObjectStorage:
    """Three-video catalog, listed out of order, plus a non-media object."""
    return FakeObjectStorage(["c.mp4", "a.mp4", "notes.txt", "b.mp4"])


@pytest.fixture
def settings() -> PlaybackSkillSettings:
    return PlaybackSkillSettings(bucket_name=BUCKET, premint_playlist=False)


@pytest.fixture
def sequencer(storage, settings) -> PlaybackSequencer:
    return PlaybackSequencer(storage, settings)
