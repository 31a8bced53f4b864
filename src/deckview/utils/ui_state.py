from __future__ import annotations

from esper import World

from deckview.components.advance_button import AdvanceButton
from deckview.components.header_label import HeaderLabel
from deckview.components.navigation_state import NavigationState


def get_navigation_state(world: World) -> NavigationState | None:
    for _, state in world.get_component(NavigationState):
        return state
    return None


def get_header_label(world: World) -> HeaderLabel | None:
    for _, label in world.get_component(HeaderLabel):
        return label
    return None


def get_advance_button(world: World) -> AdvanceButton | None:
    for _, button in world.get_component(AdvanceButton):
        return button
    return None


def set_advance_enabled(world: World, enabled: bool) -> None:
    """Toggle the advance affordance; silently skipped when the scene has none."""
    button = get_advance_button(world)
    if button is not None:
        button.enabled = enabled
