"""
Skill config from environment with defaults.
Uses pydantic-settings so all env vars are validated and documented in one model.
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlaybackSkillSettings(BaseSettings):
    """
    All environment variables used by the playback skill.
    Env vars are read from os.environ (UPPER_SNAKE_CASE by default).
    """

    model_config = SettingsConfigDict(extra="ignore")

    # Storage location of the playlist; checked for presence only
    bucket_name: str = ""
    aws_region: str = "ap-northeast-1"
    catalog_prefix: str = ""
    media_suffix: str = ".mp4"

    start_intent_name: str = "StartPomodoroIntent"

    # Mint URLs for the whole catalog on launch and list them in the datasource.
    # Playback is unchanged: the device still plays one URL per response.
    premint_playlist: bool = False

    log_level: str = "INFO"

    @field_validator("media_suffix")
    @classmethod
    def normalize_suffix(cls, v: str) -> str:
        v = v.strip().lower()
        if v and not v.startswith("."):
            v = "." + v
        return v

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    def require_bucket(self) -> str:
        """Return bucket_name or raise when BUCKET_NAME is unset."""
        if not self.bucket_name:
            raise ValueError("BUCKET_NAME must be set")
        return self.bucket_name


def get_settings() -> PlaybackSkillSettings:
    """Return validated settings from current environment."""
    return PlaybackSkillSettings()
