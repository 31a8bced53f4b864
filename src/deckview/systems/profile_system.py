from __future__ import annotations

import logging
from typing import Sequence

from esper import World

from deckview.events.bus import (
    EVENT_DECK_RESOLVED,
    EVENT_PROFILE_LOADED,
    EVENT_USER_LOAD_FINISHED,
    EVENT_USER_LOAD_REQUEST,
    EventBus,
)
from deckview.models import UserProfile
from deckview.net.api_client import DeckApiClient
from deckview.net.scheduler import FetchScheduler
from deckview.utils.ui_state import get_header_label

logger = logging.getLogger(__name__)


class ProfileSystem:
    """Fetches the selected user's profile and decides which characters to show.

    The profile fetch is the only step that holds the loading flag. Whatever
    happens, ``EVENT_USER_LOAD_FINISHED`` is emitted once the fetch resolves;
    card loading continues on its own afterwards.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        scheduler: FetchScheduler,
        api: DeckApiClient,
        fallback_ids: Sequence[int],
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.scheduler = scheduler
        self.api = api
        self.fallback_ids = tuple(fallback_ids)
        self.event_bus.subscribe(EVENT_USER_LOAD_REQUEST, self._on_load_requested)

    def _on_load_requested(self, sender, **payload) -> None:
        user_id = payload.get("user_id")
        if user_id is None:
            return
        self.scheduler.submit(
            self.api.fetch_user,
            user_id,
            on_success=lambda profile: self._on_profile(user_id, profile),
            on_error=lambda exc: self._on_profile_failed(user_id, exc),
        )

    def _on_profile(self, user_id: int, profile: UserProfile) -> None:
        who = profile.display_name
        label = get_header_label(self.world)
        if label is not None:
            label.text = who

        deck_str = ",".join(str(i) for i in profile.deck) if profile.has_deck else "no deck"
        logger.info('[user shown] id=%s, username="%s", deck=[%s]', profile.id, who, deck_str)
        self.event_bus.emit(EVENT_PROFILE_LOADED, profile=profile)

        if profile.has_deck:
            self._resolve(user_id, profile.deck, source="deck")
        else:
            self._resolve(user_id, self.fallback_ids, source="fallback")
        self.event_bus.emit(EVENT_USER_LOAD_FINISHED, user_id=user_id, ok=True)

    def _on_profile_failed(self, user_id: int, exc: BaseException) -> None:
        logger.error("[user] %s", exc)
        self._resolve(user_id, self.fallback_ids, source="fallback")
        self.event_bus.emit(EVENT_USER_LOAD_FINISHED, user_id=user_id, ok=False)

    def _resolve(self, user_id: int, ids: Sequence[int], *, source: str) -> None:
        self.event_bus.emit(
            EVENT_DECK_RESOLVED,
            user_id=user_id,
            character_ids=tuple(ids),
            source=source,
        )
