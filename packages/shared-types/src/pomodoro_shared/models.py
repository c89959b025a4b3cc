"""Pydantic models for the voice-platform envelope, render directives, and access grants."""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RequestType(str, Enum):
    """Discriminant of the inbound request (request.type)."""

    LAUNCH = "LaunchRequest"
    INTENT = "IntentRequest"
    APL_USER_EVENT = "Alexa.Presentation.APL.UserEvent"
    SESSION_ENDED = "SessionEndedRequest"


class BuiltInIntent(str, Enum):
    """Platform built-in intents the skill answers besides its own start intent."""

    HELP = "AMAZON.HelpIntent"
    STOP = "AMAZON.StopIntent"
    CANCEL = "AMAZON.CancelIntent"


# --- Inbound envelope ---

class Intent(BaseModel):
    """Named intent carried by an IntentRequest."""

    model_config = ConfigDict(extra="ignore")

    name: str


class SkillRequest(BaseModel):
    """The request part of the envelope. Unknown request types are kept as plain strings."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str = Field(..., description="Request discriminant, e.g. LaunchRequest")
    request_id: str | None = Field(None, alias="requestId")
    locale: str | None = None
    intent: Intent | None = None
    arguments: list[Any] = Field(
        default_factory=list,
        description="APL UserEvent arguments: [signal, reported index, ...]",
    )
    reason: str | None = Field(None, description="Set on SessionEndedRequest")

    @field_validator("arguments", mode="before")
    @classmethod
    def none_to_empty(cls, v: object) -> object:
        return [] if v is None else v


class SkillEvent(BaseModel):
    """Inbound envelope. Session and context are opaque to the skill."""

    model_config = ConfigDict(extra="ignore")

    version: str | None = None
    session: dict[str, Any] | None = None
    context: dict[str, Any] | None = None
    request: SkillRequest


# --- Outbound envelope ---

class OutputSpeech(BaseModel):
    """Spoken text of a response."""

    type: Literal["PlainText"] = "PlainText"
    text: str


class RenderDocumentDirective(BaseModel):
    """APL RenderDocument directive bound to one video URL."""

    type: Literal["Alexa.Presentation.APL.RenderDocument"] = (
        "Alexa.Presentation.APL.RenderDocument"
    )
    token: str | None = None
    document: dict[str, Any]
    datasources: dict[str, Any]


class ResponseBody(BaseModel):
    """The response part of the envelope."""

    model_config = ConfigDict(populate_by_name=True)

    output_speech: OutputSpeech | None = Field(None, alias="outputSpeech")
    directives: list[RenderDocumentDirective] | None = None
    should_end_session: bool = Field(..., alias="shouldEndSession")


class SkillResponse(BaseModel):
    """Outbound envelope returned to the voice platform."""

    version: Literal["1.0"] = "1.0"
    response: ResponseBody

    def to_payload(self) -> dict[str, Any]:
        """Wire form: camelCase keys, optional fields omitted rather than null."""
        return self.model_dump(by_alias=True, exclude_none=True)


# --- Access grants ---

class AccessGrant(BaseModel):
    """Time-boxed retrieval URL for exactly one catalog key. Never stored."""

    key: str
    url: str
    expires_in: int = Field(..., gt=0, description="Seconds the URL stays valid")
    minted_at: int = Field(..., description="Unix timestamp when the URL was signed")

    @property
    def expires_at(self) -> int:
        return self.minted_at + self.expires_in
