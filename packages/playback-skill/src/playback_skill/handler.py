"""
Lambda entrypoint for the pomodoro video skill.

Env vars (set by the deployment): BUCKET_NAME, and optionally AWS_REGION,
CATALOG_PREFIX, MEDIA_SUFFIX, START_INTENT_NAME,
PREMINT_PLAYLIST, LOG_LEVEL.
"""

import logging
from typing import Any

from pydantic import ValidationError

from pomodoro_aws_adapters.env_config import object_storage_from_env
from pomodoro_shared import SkillEvent, configure_logging

from . import responses
from .config import get_settings
from .sequencer import PlaybackSequencer

logger = logging.getLogger(__name__)

_sequencer: PlaybackSequencer | None = None


def build_sequencer_from_env() -> PlaybackSequencer:
    """Wire the S3 adapter and settings from the current environment."""
    settings = get_settings()
    settings.require_bucket()
    storage = object_storage_from_env(region_name=settings.aws_region)
    return PlaybackSequencer(storage, settings)


def _get_sequencer() -> PlaybackSequencer:
    """Build once per process; warm invocations reuse the S3 client."""
    global _sequencer
    if _sequencer is None:
        configure_logging(get_settings().log_level)
        _sequencer = build_sequencer_from_env()
    return _sequencer


def lambda_handler(
    event: dict,
    context: object,
    *,
    sequencer: PlaybackSequencer | None = None,
) -> dict[str, Any]:
    """Handle one skill request. Always returns a well-formed envelope."""
    try:
        skill_event = SkillEvent.model_validate(event)
    except ValidationError as e:
        logger.warning("handler: malformed request envelope: %s", e)
        return responses.error_response()
    try:
        seq = sequencer or _get_sequencer()
        return seq.handle(skill_event)
    except Exception as e:
        logger.exception("handler: request failed: %s", e)
        return responses.error_response()
