"""Tests for the Lambda entrypoint: injection, malformed input, env wiring against moto S3."""

from unittest.mock import MagicMock, patch

import boto3
import pytest
from moto import mock_aws

from playback_skill import constants, handler
from playback_skill.handler import lambda_handler


@pytest.fixture
def reset_sequencer():
    handler._sequencer = None
    yield
    handler._sequencer = None


@pytest.fixture
def s3_media_bucket(monkeypatch, reset_sequencer):
    """moto S3 bucket with three videos and a stray text file; env points at it."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("BUCKET_NAME", "test-pomodoro-bucket")
    monkeypatch.delenv("AWS_ENDPOINT_URL", raising=False)
    monkeypatch.delenv("PREMINT_PLAYLIST", raising=False)
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket="test-pomodoro-bucket")
        for key in ("02-break.mp4", "01-focus.MP4", "03-focus.mp4", "notes.txt"):
            client.put_object(Bucket="test-pomodoro-bucket", Key=key, Body=b"x")
        yield "test-pomodoro-bucket"


def _user_event(*arguments) -> dict:
    return {
        "version": "1.0",
        "request": {
            "type": "Alexa.Presentation.APL.UserEvent",
            "requestId": "req-1",
            "arguments": list(arguments),
        },
    }


def test_lambda_handler_delegates_to_injected_sequencer() -> None:
    sequencer = MagicMock()
    sequencer.handle.return_value = {"version": "1.0", "response": {"shouldEndSession": False}}
    event = {"request": {"type": "LaunchRequest"}}
    result = lambda_handler(event, None, sequencer=sequencer)
    assert result == sequencer.handle.return_value
    (skill_event,) = sequencer.handle.call_args[0]
    assert skill_event.request.type == "LaunchRequest"


@pytest.mark.parametrize("event", [{}, {"request": {}}, {"request": "LaunchRequest"}])
def test_lambda_handler_malformed_envelope_returns_error(event) -> None:
    sequencer = MagicMock()
    result = lambda_handler(event, None, sequencer=sequencer)
    assert result["response"]["outputSpeech"]["text"] == constants.ERROR_MESSAGE
    assert result["response"]["shouldEndSession"] is True
    sequencer.handle.assert_not_called()


def test_lambda_handler_never_raises_when_wiring_fails(reset_sequencer) -> None:
    with patch(
        "playback_skill.handler.build_sequencer_from_env",
        side_effect=ValueError("BUCKET_NAME must be set"),
    ), patch("playback_skill.handler.configure_logging"):
        result = lambda_handler({"request": {"type": "LaunchRequest"}}, None)
    assert result["response"]["outputSpeech"]["text"] == constants.ERROR_MESSAGE
    assert result["response"]["shouldEndSession"] is True


def test_lambda_handler_plays_s3_bucket_in_order(s3_media_bucket) -> None:
    out = lambda_handler({"request": {"type": "LaunchRequest"}}, None)
    directive = out["response"]["directives"][0]
    source = directive["document"]["mainTemplate"]["item"]["source"]
    assert "01-focus.MP4" in source
    assert "X-Amz-" in source or "Signature=" in source
    assert directive["datasources"]["videoData"]["currentIndex"] == 0

    out = lambda_handler(_user_event("videoEnd", "0"), None)
    source = out["response"]["directives"][0]["document"]["mainTemplate"]["item"]["source"]
    assert "02-break.mp4" in source

    out = lambda_handler(_user_event("videoEnd", {"value": 1}), None)
    source = out["response"]["directives"][0]["document"]["mainTemplate"]["item"]["source"]
    assert "03-focus.mp4" in source

    out = lambda_handler(_user_event("videoEnd", 2), None)
    assert out["response"]["outputSpeech"]["text"] == constants.COMPLETED_MESSAGE
    assert out["response"]["shouldEndSession"] is True


def test_lambda_handler_reuses_sequencer_across_invocations(s3_media_bucket) -> None:
    lambda_handler({"request": {"type": "LaunchRequest"}}, None)
    first = handler._sequencer
    lambda_handler(_user_event("videoEnd", 0), None)
    assert handler._sequencer is first


def test_lambda_handler_missing_bucket_returns_error(s3_media_bucket, monkeypatch) -> None:
    monkeypatch.setenv("BUCKET_NAME", "no-such-bucket")
    out = lambda_handler({"request": {"type": "LaunchRequest"}}, None)
    assert out["response"]["outputSpeech"]["text"] == constants.ERROR_MESSAGE
    assert out["response"]["shouldEndSession"] is True
