from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from esper import World
from PIL import Image

from deckview.components.card_slot import CardSlot, SlotState
from deckview.errors import SlotConfigError
from deckview.events.bus import (
    EVENT_CARD_FAILED,
    EVENT_CARD_IMAGE_PAINTED,
    EVENT_CARD_TEXT_PAINTED,
    EventBus,
)
from deckview.models import CharacterRecord
from deckview.net.api_client import DeckApiClient
from deckview.net.scheduler import FetchScheduler
from deckview.rendering.textures import decode_image
from deckview.utils.slots import slot_at

logger = logging.getLogger(__name__)

TextureFactory = Callable[[Image.Image, str], Any]


def _keep_image(image: Image.Image, key: str) -> Image.Image:
    return image


class CardPainterSystem:
    """Fills one slot: character text first, then its image once downloaded.

    Each stage fails on its own. A failed character fetch leaves the slot as
    it was; a failed image fetch swaps in the placeholder (when there is one)
    and keeps the text already painted.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        scheduler: FetchScheduler,
        api: DeckApiClient,
        *,
        texture_factory: Optional[TextureFactory] = None,
        placeholder: Any = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.scheduler = scheduler
        self.api = api
        self.texture_factory = texture_factory or _keep_image
        self.placeholder = placeholder

    def paint(self, character_id: int, slot_index: int) -> bool:
        slot = slot_at(self.world, slot_index) if slot_index >= 0 else None
        if slot is None or not slot.has_image:
            err = SlotConfigError(slot_index)
            logger.warning("%s", err)
            self.event_bus.emit(
                EVENT_CARD_FAILED,
                slot_index=slot_index,
                character_id=character_id,
                stage="slot",
                error=err,
            )
            return False
        slot.state = SlotState.LOADING
        self.scheduler.submit(
            self.api.fetch_character,
            character_id,
            on_success=lambda record: self._on_character(slot, record),
            on_error=lambda exc: self._on_character_failed(slot, character_id, exc),
        )
        return True

    # ------------------------------------------------------------------
    # Character stage
    # ------------------------------------------------------------------
    def _on_character(self, slot: CardSlot, record: CharacterRecord) -> None:
        if slot.has_title:
            slot.title = record.name
        if slot.has_subtitle:
            slot.subtitle = record.subtitle
        slot.character_id = record.id
        slot.state = SlotState.TEXT_READY
        self.event_bus.emit(EVENT_CARD_TEXT_PAINTED, slot_index=slot.index, record=record)
        self.scheduler.submit(
            self._download_image,
            record.image,
            on_success=lambda image: self._on_image(slot, record, image),
            on_error=lambda exc: self._on_image_failed(slot, record, exc),
        )

    def _on_character_failed(self, slot: CardSlot, character_id: int, exc: BaseException) -> None:
        logger.error("[char] %s (id=%s)", exc, character_id)
        slot.state = SlotState.FAILED
        self.event_bus.emit(
            EVENT_CARD_FAILED,
            slot_index=slot.index,
            character_id=character_id,
            stage="character",
            error=exc,
        )

    # ------------------------------------------------------------------
    # Image stage
    # ------------------------------------------------------------------
    def _download_image(self, url: str) -> Image.Image:
        # Worker thread: network and decode only, no component access.
        return decode_image(self.api.fetch_image(url))

    def _on_image(self, slot: CardSlot, record: CharacterRecord, image: Image.Image) -> None:
        slot.texture = self.texture_factory(image, f"character:{record.id}")
        slot.state = SlotState.READY
        self.event_bus.emit(EVENT_CARD_IMAGE_PAINTED, slot_index=slot.index, character_id=record.id)

    def _on_image_failed(self, slot: CardSlot, record: CharacterRecord, exc: BaseException) -> None:
        logger.error("[img] %s (url=%s)", exc, record.image)
        if self.placeholder is not None:
            slot.texture = self.placeholder
        slot.state = SlotState.IMAGE_FAILED
        self.event_bus.emit(
            EVENT_CARD_FAILED,
            slot_index=slot.index,
            character_id=record.id,
            stage="image",
            error=exc,
        )
