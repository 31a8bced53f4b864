from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems nobody else references alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"  # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_KEY_PRESS = "key_press"        # payload: symbol=int, modifiers=int
EVENT_MOUSE_PRESS = "mouse_press"    # payload: x, y, button


# ============================================================================
# NAVIGATION
# ============================================================================
EVENT_USER_SELECT_REQUEST = "user_select_request"      # payload: user_id=int
EVENT_USER_ADVANCE_REQUEST = "user_advance_request"    # payload: None
EVENT_USER_LOAD_REQUEST = "user_load_request"          # payload: user_id=int
EVENT_USER_LOAD_FINISHED = "user_load_finished"        # payload: user_id=int, ok=bool
EVENT_LOADING_CHANGED = "loading_changed"              # payload: is_loading=bool


# ============================================================================
# PROFILE & DECK
# ============================================================================
EVENT_PROFILE_LOADED = "profile_loaded"    # payload: profile=UserProfile
EVENT_DECK_RESOLVED = "deck_resolved"      # payload: user_id=int, character_ids=tuple[int,...], source="deck"|"fallback"


# ============================================================================
# CARDS
# ============================================================================
EVENT_CARD_TEXT_PAINTED = "card_text_painted"      # payload: slot_index=int, record=CharacterRecord
EVENT_CARD_IMAGE_PAINTED = "card_image_painted"    # payload: slot_index=int, character_id=int
EVENT_CARD_FAILED = "card_failed"                  # payload: slot_index=int, character_id=int, stage=str, error=DeckviewError
EVENT_CARDS_CLEARED = "cards_cleared"              # payload: slot_indexes=list[int]
