from esper import World

from deckview.components.advance_button import AdvanceButton
from deckview.components.card_slot import CardSlot
from deckview.components.header_label import HeaderLabel
from deckview.components.navigation_state import NavigationState
from deckview.config import ViewerConfig


def create_world(
    config: ViewerConfig,
    *,
    placeholder=None,
    slots: list[CardSlot] | None = None,
) -> World:
    """Build the deck view scene: navigation resource, header, button and card slots.

    ``slots`` overrides the default of ``config.slot_count`` fully wired slots,
    which lets a scene omit some targets.
    """
    world = World()

    state_entity = world.create_entity()
    world.add_component(
        state_entity,
        NavigationState(current_user_id=config.initial_user_id, total_users=config.total_users),
    )
    world.create_entity(HeaderLabel())
    world.create_entity(AdvanceButton())

    if slots is None:
        slots = [CardSlot(index=i) for i in range(config.slot_count)]
    for slot in slots:
        slot.reset(placeholder)
        world.create_entity(slot)
    return world
