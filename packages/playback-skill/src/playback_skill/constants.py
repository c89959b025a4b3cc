"""Spoken messages and APL constants."""

START_MESSAGE = "Starting your pomodoro."
EMPTY_CATALOG_MESSAGE = "No pomodoro videos were found."
COMPLETED_MESSAGE = "Your pomodoro session is complete. Good work."
ERROR_MESSAGE = "An error occurred. Please try again."
IDLE_MESSAGE = "Hello. Say start pomodoro to begin."
HELP_MESSAGE = "Say start pomodoro to play your videos in order."
GOODBYE_MESSAGE = "Goodbye."

# Signal the video sends back when playback finishes
VIDEO_END_SIGNAL = "videoEnd"

APL_VERSION = "1.8"
VIDEO_COMPONENT_ID = "pomodoroVideo"
DATASOURCE_NAME = "videoData"
DIRECTIVE_TOKEN = "pomodoroVideoToken"
