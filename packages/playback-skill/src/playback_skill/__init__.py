"""Playback sequencer for the pomodoro video skill."""

from .handler import lambda_handler
from .sequencer import PlaybackSequencer

__all__ = ["PlaybackSequencer", "lambda_handler"]
