from deckview.constants import KEY_RIGHT
from deckview.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_USER_ADVANCE_REQUEST, EventBus
from deckview.systems.input_system import InputSystem
from deckview.ui.layout import compute_card_layout
from deckview.utils.ui_state import get_advance_button
from deckview.world import create_world
from tests.helpers import DummyWindow, make_config


def _setup():
    bus = EventBus()
    world = create_world(make_config())
    window = DummyWindow()
    InputSystem(bus, window, world)
    advances = []
    bus.subscribe(EVENT_USER_ADVANCE_REQUEST, lambda sender, **p: advances.append(p))
    button_rect = compute_card_layout(window.width, window.height, 3).advance_button
    return bus, world, advances, button_rect


def test_right_arrow_press_requests_one_advance():
    bus, world, advances, _ = _setup()
    bus.emit(EVENT_KEY_PRESS, symbol=KEY_RIGHT, modifiers=0)
    assert len(advances) == 1


def test_other_keys_are_ignored():
    bus, world, advances, _ = _setup()
    bus.emit(EVENT_KEY_PRESS, symbol=65361, modifiers=0)  # left arrow
    bus.emit(EVENT_KEY_PRESS, symbol=32, modifiers=0)
    assert advances == []


def test_click_on_enabled_button_advances():
    bus, world, advances, rect = _setup()
    bus.emit(EVENT_MOUSE_PRESS, x=rect.center_x, y=rect.center_y, button=1)
    assert len(advances) == 1


def test_click_on_disabled_button_is_ignored():
    bus, world, advances, rect = _setup()
    get_advance_button(world).enabled = False
    bus.emit(EVENT_MOUSE_PRESS, x=rect.center_x, y=rect.center_y, button=1)
    assert advances == []


def test_click_outside_button_or_with_right_button_is_ignored():
    bus, world, advances, rect = _setup()
    bus.emit(EVENT_MOUSE_PRESS, x=5, y=5, button=1)
    bus.emit(EVENT_MOUSE_PRESS, x=rect.center_x, y=rect.center_y, button=4)
    assert advances == []
