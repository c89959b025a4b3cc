"""
Response Assembler: APL video document and outbound envelopes.

Mid-playlist advances carry no speech; speaking would interrupt the video.
Continuity rides on the document's onEnd callback, so no session attributes
are ever returned.
"""

from typing import Any

from pomodoro_shared import (
    AccessGrant,
    OutputSpeech,
    RenderDocumentDirective,
    ResponseBody,
    SkillResponse,
)

from . import constants


def build_video_document(video_url: str) -> dict[str, Any]:
    """Full-screen autoplaying video; onEnd reports ${videoData.currentIndex} back."""
    ds = constants.DATASOURCE_NAME
    return {
        "type": "APL",
        "version": constants.APL_VERSION,
        "mainTemplate": {
            "parameters": [ds],
            "item": {
                "type": "Video",
                "id": constants.VIDEO_COMPONENT_ID,
                "width": "100vw",
                "height": "100vh",
                "source": video_url,
                "scale": "best-fit",
                "autoplay": True,
                "audioTrack": "foreground",
                "backgroundColor": "black",
                "onEnd": [
                    {
                        "type": "SendEvent",
                        "arguments": [
                            constants.VIDEO_END_SIGNAL,
                            f"${{{ds}.currentIndex}}",
                        ],
                    }
                ],
            },
        },
    }


def build_render_directive(
    grant: AccessGrant,
    index: int,
    *,
    playlist: list[AccessGrant] | None = None,
) -> RenderDocumentDirective:
    """
    Directive playing grant.url, annotated with index for the onEnd callback.

    A pre-minted playlist is listed under videoUrls for inspection only; the
    document plays grant.url alone and each advance mints its own URL.
    """
    video_data: dict[str, Any] = {"currentIndex": index}
    if playlist is not None:
        video_data["videoUrls"] = [g.url for g in playlist]
    return RenderDocumentDirective(
        token=constants.DIRECTIVE_TOKEN,
        document=build_video_document(grant.url),
        datasources={constants.DATASOURCE_NAME: video_data},
    )


def build_response(
    *,
    should_end_session: bool,
    speech: str | None = None,
    directive: RenderDocumentDirective | None = None,
) -> dict[str, Any]:
    """Assemble the wire envelope. Absent speech and directives are omitted, not null."""
    body = ResponseBody(
        output_speech=OutputSpeech(text=speech) if speech else None,
        directives=[directive] if directive is not None else None,
        should_end_session=should_end_session,
    )
    return SkillResponse(response=body).to_payload()


def start_response(
    grant: AccessGrant,
    *,
    playlist: list[AccessGrant] | None = None,
) -> dict[str, Any]:
    return build_response(
        speech=constants.START_MESSAGE,
        directive=build_render_directive(grant, 0, playlist=playlist),
        should_end_session=False,
    )


def advance_response(grant: AccessGrant, index: int) -> dict[str, Any]:
    return build_response(
        directive=build_render_directive(grant, index),
        should_end_session=False,
    )


def empty_catalog_response() -> dict[str, Any]:
    return build_response(speech=constants.EMPTY_CATALOG_MESSAGE, should_end_session=True)


def completed_response() -> dict[str, Any]:
    return build_response(speech=constants.COMPLETED_MESSAGE, should_end_session=True)


def error_response() -> dict[str, Any]:
    return build_response(speech=constants.ERROR_MESSAGE, should_end_session=True)


def idle_response(speech: str | None = constants.IDLE_MESSAGE) -> dict[str, Any]:
    """Keep listening without touching the catalog. speech=None for silent no-ops."""
    return build_response(speech=speech, should_end_session=False)


def goodbye_response() -> dict[str, Any]:
    return build_response(speech=constants.GOODBYE_MESSAGE, should_end_session=True)


def session_ended_response() -> dict[str, Any]:
    return build_response(should_end_session=True)
