#!/usr/bin/env python3
"""
Play a full skill session against the real bucket and print every response.

Sends a LaunchRequest, then one videoEnd event per video, echoing back the
index each response carries, the same way a device does. Useful after uploading
new MP4s to check the playlist order and that presigned URLs are minted.

Prerequisites:
  - pip install -e . (from repo root)
  - AWS credentials (env or profile) with s3:ListBucket and s3:GetObject
  - BUCKET_NAME in env (or in .env at the repo root)

Usage:
  python scripts/simulate_session.py [--env-file PATH] [--max-steps N] [--quiet]
"""

import argparse
import json
import sys

from env_helpers import apply_env, default_env_path, load_env

from playback_skill import constants
from playback_skill.handler import build_sequencer_from_env
from pomodoro_shared import SkillEvent, configure_logging


def _launch_event() -> dict:
    return {"version": "1.0", "request": {"type": "LaunchRequest", "requestId": "simulate-0"}}


def _video_end_event(index: int, step: int) -> dict:
    return {
        "version": "1.0",
        "request": {
            "type": "Alexa.Presentation.APL.UserEvent",
            "requestId": f"simulate-{step}",
            "arguments": [constants.VIDEO_END_SIGNAL, str(index)],
        },
    }


def _reported_index(response: dict) -> int | None:
    directives = response["response"].get("directives") or []
    if not directives:
        return None
    return directives[0]["datasources"][constants.DATASOURCE_NAME]["currentIndex"]


def _is_error(response: dict) -> bool:
    speech = response["response"].get("outputSpeech") or {}
    return speech.get("text") == constants.ERROR_MESSAGE


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Simulate a pomodoro skill session: launch, then videoEnd until completion."
    )
    parser.add_argument(
        "--env-file",
        default=str(default_env_path()),
        help="Optional .env file with BUCKET_NAME, AWS_REGION (default: repo root .env)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=1000,
        help="Stop after this many videoEnd events (default: 1000)",
    )
    parser.add_argument("--quiet", "-q", action="store_true", help="Print only a summary")
    args = parser.parse_args()

    apply_env(load_env(args.env_file))
    configure_logging()
    try:
        sequencer = build_sequencer_from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    response = sequencer.handle(SkillEvent.model_validate(_launch_event()))
    played = 0
    for step in range(1, args.max_steps + 2):
        if not args.quiet:
            print(json.dumps(response, indent=2, ensure_ascii=False))
        if _is_error(response):
            print(f"Error response at step {step - 1}", file=sys.stderr)
            return 1
        index = _reported_index(response)
        if index is None:
            break
        played += 1
        if step > args.max_steps:
            print(f"Stopped after {args.max_steps} steps", file=sys.stderr)
            return 1
        response = sequencer.handle(SkillEvent.model_validate(_video_end_event(index, step)))

    print(f"Session finished: {played} video(s) played", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
