from __future__ import annotations

import logging
from typing import Sequence

from esper import World

from deckview.events.bus import EVENT_CARDS_CLEARED, EVENT_DECK_RESOLVED, EventBus
from deckview.systems.card_painter_system import CardPainterSystem
from deckview.utils.slots import ordered_slots, usable_slot_count

logger = logging.getLogger(__name__)


class CardLoaderSystem:
    """Spreads a resolved id list over the card slots."""

    def __init__(self, world: World, event_bus: EventBus, painter: CardPainterSystem) -> None:
        self.world = world
        self.event_bus = event_bus
        self.painter = painter
        self.event_bus.subscribe(EVENT_DECK_RESOLVED, self._on_deck_resolved)

    def load(self, character_ids: Sequence[int]) -> int:
        """Start painting the first usable ids and clear the rest. Returns the painted count."""
        slots = ordered_slots(self.world)
        n = usable_slot_count(character_ids, slots)
        for i in range(n):
            self.painter.paint(character_ids[i], i)

        cleared: list[int] = []
        for slot in slots:
            if slot.index >= n:
                slot.reset(self.painter.placeholder)
                cleared.append(slot.index)
        if cleared:
            self.event_bus.emit(EVENT_CARDS_CLEARED, slot_indexes=cleared)
        logger.debug("Loading %d of %d ids into %d slots", n, len(character_ids), len(slots))
        return n

    def _on_deck_resolved(self, sender, **payload) -> None:
        ids = payload.get("character_ids") or ()
        self.load(tuple(ids))
