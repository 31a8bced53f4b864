from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional


class SlotState(Enum):
    """Load progress of a single card slot."""
    EMPTY = auto()
    LOADING = auto()
    TEXT_READY = auto()
    READY = auto()
    IMAGE_FAILED = auto()
    FAILED = auto()


@dataclass
class CardSlot:
    """One visual card: owns its image, title and subtitle targets."""
    index: int
    has_image: bool = True
    has_title: bool = True
    has_subtitle: bool = True
    texture: Any = None
    title: str = ""
    subtitle: str = ""
    character_id: Optional[int] = None
    state: SlotState = SlotState.EMPTY

    def reset(self, placeholder: Any = None) -> None:
        """Return the slot to its placeholder look."""
        if self.has_image:
            self.texture = placeholder
        if self.has_title:
            self.title = ""
        if self.has_subtitle:
            self.subtitle = ""
        self.character_id = None
        self.state = SlotState.EMPTY

    @property
    def is_busy(self) -> bool:
        return self.state in (SlotState.LOADING, SlotState.TEXT_READY)
