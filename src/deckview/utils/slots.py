from __future__ import annotations

from typing import Any, Sequence

from esper import World

from deckview.components.card_slot import CardSlot


def ordered_slots(world: World) -> list[CardSlot]:
    """All card slots sorted by their display index."""
    return sorted((slot for _, slot in world.get_component(CardSlot)), key=lambda s: s.index)


def slot_at(world: World, index: int) -> CardSlot | None:
    for _, slot in world.get_component(CardSlot):
        if slot.index == index:
            return slot
    return None


def usable_slot_count(ids: Sequence[Any], slots: Sequence[CardSlot]) -> int:
    """Number of ids that can be painted: bounded by every kind of slot target."""
    images = sum(1 for s in slots if s.has_image)
    titles = sum(1 for s in slots if s.has_title)
    subtitles = sum(1 for s in slots if s.has_subtitle)
    return max(0, min(len(ids), images, titles, subtitles))
