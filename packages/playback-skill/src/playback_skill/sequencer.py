"""
Playback Sequencer: route an inbound event to a path and produce one envelope.

Each invocation is a pure function of (event, storage contents). The catalog
is re-resolved on every start and advance; nothing is cached between calls.

States: Idle -> Playing(0) -> Playing(i + 1) ... -> Completed. Start and
advance never raise: any fault on those paths becomes the generic error
response with the session ended.
"""

import logging
from typing import Any

from pomodoro_shared import SkillEvent
from pomodoro_shared.errors import IndexOutOfRangeError
from pomodoro_shared.interfaces import ObjectStorage

from . import constants, responses
from .access import AccessMinter
from .catalog import resolve_catalog
from .config import PlaybackSkillSettings
from .continuity import AdvanceSignal, EventClass, classify, decode_advance

logger = logging.getLogger(__name__)


def key_at(catalog: list[str], index: int) -> str:
    """Return catalog[index]; a missing entry raises IndexOutOfRangeError."""
    if not 0 <= index < len(catalog):
        raise IndexOutOfRangeError(index, len(catalog))
    return catalog[index]


class PlaybackSequencer:
    """Stateless handler; storage is injected so tests can pass a fake."""

    def __init__(self, storage: ObjectStorage, settings: PlaybackSkillSettings) -> None:
        self._storage = storage
        self._settings = settings

    def handle(self, event: SkillEvent) -> dict[str, Any]:
        event_class = classify(event, start_intent=self._settings.start_intent_name)
        logger.info(
            "sequencer: request_type=%s event_class=%s",
            event.request.type,
            event_class.value,
        )
        if event_class == EventClass.SESSION_START:
            return self.start()
        if event_class == EventClass.ADVANCE_PLAYBACK:
            return self.advance(decode_advance(event))
        if event_class == EventClass.UNRELATED:
            signal = event.request.arguments[0] if event.request.arguments else None
            logger.info("sequencer: ignoring user event signal=%r", signal)
            return responses.idle_response(speech=None)
        if event_class == EventClass.STOP:
            return responses.goodbye_response()
        if event_class == EventClass.SESSION_ENDED:
            logger.info("sequencer: session ended reason=%s", event.request.reason)
            return responses.session_ended_response()
        if event_class == EventClass.HELP:
            return responses.idle_response(speech=constants.HELP_MESSAGE)
        return responses.idle_response()

    def _catalog(self) -> list[str]:
        return resolve_catalog(
            self._storage,
            self._settings.require_bucket(),
            prefix=self._settings.catalog_prefix,
            suffix=self._settings.media_suffix,
        )

    def _minter(self) -> AccessMinter:
        return AccessMinter(self._storage, self._settings.require_bucket())

    def start(self) -> dict[str, Any]:
        """Idle -> Playing(0), or end with "nothing to play" when the catalog is empty."""
        try:
            catalog = self._catalog()
            if not catalog:
                logger.info("transition: idle -> empty_catalog")
                return responses.empty_catalog_response()
            minter = self._minter()
            if self._settings.premint_playlist:
                playlist = minter.mint_all(catalog)
                first = playlist[0]
            else:
                playlist = None
                first = minter.mint(catalog[0])
            logger.info("transition: idle -> playing index=0 key=%s", first.key)
            return responses.start_response(first, playlist=playlist)
        except Exception as e:
            logger.exception("sequencer: start failed: %s", e)
            return responses.error_response()

    def advance(self, signal: AdvanceSignal) -> dict[str, Any]:
        """Playing(i) -> Playing(i + 1), or Completed once i + 1 runs past the catalog."""
        next_index = signal.next_index
        try:
            catalog = self._catalog()
            if next_index >= len(catalog):
                logger.info(
                    "transition: playing index=%d -> completed (catalog size %d)",
                    signal.reported_index,
                    len(catalog),
                )
                return responses.completed_response()
            grant = self._minter().mint(key_at(catalog, next_index))
            logger.info(
                "transition: playing index=%d -> playing index=%d key=%s",
                signal.reported_index,
                next_index,
                grant.key,
            )
            return responses.advance_response(grant, next_index)
        except Exception as e:
            logger.exception(
                "sequencer: advance failed next_index=%d: %s", next_index, e
            )
            return responses.error_response()
