from __future__ import annotations

import logging

from esper import World

from deckview.components.navigation_state import NavigationState
from deckview.events.bus import (
    EVENT_LOADING_CHANGED,
    EVENT_USER_ADVANCE_REQUEST,
    EVENT_USER_LOAD_FINISHED,
    EVENT_USER_LOAD_REQUEST,
    EVENT_USER_SELECT_REQUEST,
    EventBus,
)
from deckview.net.scheduler import FetchScheduler
from deckview.utils.ui_state import get_navigation_state, set_advance_enabled

logger = logging.getLogger(__name__)


class NavigationSystem:
    """Chooses which user is shown and gates navigation while a profile loads."""

    def __init__(self, world: World, event_bus: EventBus, scheduler: FetchScheduler) -> None:
        self.world = world
        self.event_bus = event_bus
        self.scheduler = scheduler
        self.event_bus.subscribe(EVENT_USER_SELECT_REQUEST, self._on_select_requested)
        self.event_bus.subscribe(EVENT_USER_ADVANCE_REQUEST, self._on_advance_requested)
        self.event_bus.subscribe(EVENT_USER_LOAD_FINISHED, self._on_load_finished)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def start(self) -> bool:
        """Load the user the navigation state currently points at."""
        state = self._state()
        if state is None:
            return False
        return self.select_user(state.current_user_id)

    def select_user(self, user_id: int) -> bool:
        state = self._state()
        if state is None:
            return False
        if not state.is_valid_user(user_id):
            logger.debug("Ignoring user %s outside 1..%s", user_id, state.total_users)
            return False
        if state.is_loading:
            return False

        state.is_loading = True
        set_advance_enabled(self.world, False)
        state.current_user_id = user_id
        self.scheduler.begin_cycle()
        self.event_bus.emit(EVENT_LOADING_CHANGED, is_loading=True)
        self.event_bus.emit(EVENT_USER_LOAD_REQUEST, user_id=user_id)
        return True

    def advance_user(self) -> bool:
        state = self._state()
        if state is None:
            return False
        return self.select_user(state.next_user_id())

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def _on_select_requested(self, sender, **payload) -> None:
        user_id = payload.get("user_id")
        try:
            user_id = int(user_id)
        except (TypeError, ValueError):
            return
        self.select_user(user_id)

    def _on_advance_requested(self, sender, **payload) -> None:
        self.advance_user()

    def _on_load_finished(self, sender, **payload) -> None:
        state = self._state()
        if state is None or not state.is_loading:
            return
        state.is_loading = False
        set_advance_enabled(self.world, True)
        self.event_bus.emit(EVENT_LOADING_CHANGED, is_loading=False)

    def _state(self) -> NavigationState | None:
        return get_navigation_state(self.world)
