"""Shared types and conventions for the pomodoro video playback skill."""

from .errors import (
    IndexOutOfRangeError,
    MintingError,
    PlaybackError,
    RetrievalError,
)
from .interfaces import ObjectStorage
from .logging_config import configure_logging
from .models import (
    AccessGrant,
    BuiltInIntent,
    Intent,
    OutputSpeech,
    RenderDocumentDirective,
    RequestType,
    ResponseBody,
    SkillEvent,
    SkillRequest,
    SkillResponse,
)

__version__ = "0.1.0"
__all__ = [
    "AccessGrant",
    "BuiltInIntent",
    "IndexOutOfRangeError",
    "Intent",
    "MintingError",
    "ObjectStorage",
    "OutputSpeech",
    "PlaybackError",
    "RenderDocumentDirective",
    "RequestType",
    "ResponseBody",
    "RetrievalError",
    "SkillEvent",
    "SkillRequest",
    "SkillResponse",
    "configure_logging",
]
