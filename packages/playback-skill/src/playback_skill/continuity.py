"""
Session Continuity Codec: classify inbound events and decode the reported index.

The skill holds no server-side session. The video document echoes its own
index back in the onEnd event (["videoEnd", index]), and that index is the
only state carried between invocations.

The index argument's encoding is not stable across client versions: it may
arrive as a number, a numeric string, or an object with a value or
currentIndex field. decode_index accepts all of them; anything else is 0.
"""

import logging
import math
import re
from enum import Enum
from typing import Annotated, Any, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)

from pomodoro_shared import BuiltInIntent, RequestType, SkillEvent

from .constants import VIDEO_END_SIGNAL

logger = logging.getLogger(__name__)

DEFAULT_START_INTENT = "StartPomodoroIntent"

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class EventClass(str, Enum):
    """What the sequencer should do with an inbound event."""

    SESSION_START = "session-start"
    ADVANCE_PLAYBACK = "advance-playback"
    UNRELATED = "unrelated"
    IDLE = "idle"
    HELP = "help"
    STOP = "stop"
    SESSION_ENDED = "session-ended"


class AdvanceSignal(BaseModel):
    """A decoded videoEnd event: the index the client reports as finished."""

    reported_index: int

    @property
    def next_index(self) -> int:
        # Never before the first video, whatever the client reported
        return max(self.reported_index + 1, 0)


def _from_number(v: int | float) -> int:
    if isinstance(v, float):
        if not math.isfinite(v):
            return 0
        v = int(v)
    return v


def _from_text(v: str) -> int:
    """Base-10 leading integer, like "3" or " 3 videos"; 0 when none."""
    m = _LEADING_INT_RE.match(v)
    if not m:
        return 0
    return int(m.group(1))


class _StructuredIndex(BaseModel):
    """Object-shaped argument: {"value": n} or {"currentIndex": n}."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    value: Any = None
    current_index: Any = Field(None, alias="currentIndex")

    def to_index(self) -> int:
        # First non-falsy field wins
        raw = self.value or self.current_index
        if not raw:
            return 0
        return decode_index(raw)


_NumericIndex = Annotated[Union[StrictInt, StrictFloat], AfterValidator(_from_number)]
_TextIndex = Annotated[StrictStr, AfterValidator(_from_text)]
_ObjectIndex = Annotated[_StructuredIndex, AfterValidator(lambda m: m.to_index())]

_INDEX_ARGUMENT: TypeAdapter[int] = TypeAdapter(
    Union[_NumericIndex, _TextIndex, _ObjectIndex]
)


def decode_index(raw: object) -> int:
    """
    Decode a reported playback index.

    Numbers are used directly (floats truncated), strings are parsed as a
    leading base-10 integer, objects read value then currentIndex. Signs are
    kept. Missing, boolean or otherwise unknown values decode to 0.
    """
    try:
        return _INDEX_ARGUMENT.validate_python(raw)
    except ValidationError:
        return 0


def classify(event: SkillEvent, *, start_intent: str = DEFAULT_START_INTENT) -> EventClass:
    """Map an inbound event onto the sequencer path that handles it."""
    request = event.request
    if request.type == RequestType.APL_USER_EVENT.value:
        signal = request.arguments[0] if request.arguments else None
        if signal == VIDEO_END_SIGNAL:
            return EventClass.ADVANCE_PLAYBACK
        return EventClass.UNRELATED
    if request.type == RequestType.SESSION_ENDED.value:
        return EventClass.SESSION_ENDED
    intent_name = request.intent.name if request.intent else None
    if request.type == RequestType.LAUNCH.value or intent_name == start_intent:
        return EventClass.SESSION_START
    if intent_name in (BuiltInIntent.STOP.value, BuiltInIntent.CANCEL.value):
        return EventClass.STOP
    if intent_name == BuiltInIntent.HELP.value:
        return EventClass.HELP
    return EventClass.IDLE


def decode_advance(event: SkillEvent) -> AdvanceSignal:
    """Read the reported index from a videoEnd event (argument 1)."""
    args = event.request.arguments
    raw = args[1] if len(args) > 1 else None
    signal = AdvanceSignal(reported_index=decode_index(raw))
    logger.info(
        "decode: raw=%r reported_index=%d next_index=%d",
        raw,
        signal.reported_index,
        signal.next_index,
    )
    return signal
