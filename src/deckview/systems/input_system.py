from esper import World

from deckview.constants import KEY_RIGHT, MOUSE_BUTTON_LEFT
from deckview.events.bus import (
    EventBus,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_USER_ADVANCE_REQUEST,
)
from deckview.ui.layout import compute_card_layout
from deckview.utils.slots import ordered_slots
from deckview.utils.ui_state import get_advance_button


class InputSystem:
    """Turns discrete key and mouse presses into navigation requests.

    arcade reports ``on_key_press`` once per press, so holding the key does
    not re-trigger navigation every frame.
    """

    def __init__(self, event_bus: EventBus, window, world: World):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol == KEY_RIGHT:
            self.event_bus.emit(EVENT_USER_ADVANCE_REQUEST)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None or button != MOUSE_BUTTON_LEFT:
            return
        advance = get_advance_button(self.world)
        if advance is None or not advance.enabled:
            return
        layout = compute_card_layout(
            self.window.width,
            self.window.height,
            len(ordered_slots(self.world)),
        )
        if layout.advance_button.contains(float(x), float(y)):
            self.event_bus.emit(EVENT_USER_ADVANCE_REQUEST)
