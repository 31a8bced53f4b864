from __future__ import annotations

from dataclasses import dataclass

from deckview.constants import (
    ADVANCE_BUTTON_HEIGHT,
    ADVANCE_BUTTON_MARGIN,
    ADVANCE_BUTTON_WIDTH,
    CARD_ASPECT,
    CARD_GAP,
    CARD_MAX_WIDTH,
    CARD_MIN_WIDTH,
    CARD_ROW_MAX_HEIGHT_PCT,
    CARD_ROW_MAX_WIDTH_PCT,
    CARD_TEXT_BAND,
    HEADER_HEIGHT,
    HEADER_TOP_MARGIN,
)


@dataclass(frozen=True, slots=True)
class Rect:
    left: float
    bottom: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    @property
    def center_y(self) -> float:
        return self.bottom + self.height / 2

    @property
    def top(self) -> float:
        return self.bottom + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.left + self.width and self.bottom <= y <= self.top


@dataclass(frozen=True, slots=True)
class CardLayout:
    """Screen rectangles for one frame; rebuilt whenever the window size changes."""
    cards: tuple[Rect, ...]
    images: tuple[Rect, ...]
    header: Rect
    advance_button: Rect


def compute_card_layout(window_width: int, window_height: int, slot_count: int) -> CardLayout:
    """Lay the cards out in one centred row below the header.

    The card width is the largest that fits both the width and height caps,
    clamped to [CARD_MIN_WIDTH, CARD_MAX_WIDTH].
    """
    header = Rect(
        0.0,
        window_height - HEADER_TOP_MARGIN - HEADER_HEIGHT,
        float(window_width),
        float(HEADER_HEIGHT),
    )
    button = Rect(
        window_width - ADVANCE_BUTTON_MARGIN - ADVANCE_BUTTON_WIDTH,
        float(ADVANCE_BUTTON_MARGIN),
        float(ADVANCE_BUTTON_WIDTH),
        float(ADVANCE_BUTTON_HEIGHT),
    )
    if slot_count <= 0:
        return CardLayout(cards=(), images=(), header=header, advance_button=button)

    max_row_w = window_width * CARD_ROW_MAX_WIDTH_PCT
    max_card_h = window_height * CARD_ROW_MAX_HEIGHT_PCT
    by_w = (max_row_w - CARD_GAP * (slot_count - 1)) / slot_count
    by_h = max_card_h / CARD_ASPECT
    card_w = max(CARD_MIN_WIDTH, min(by_w, by_h, CARD_MAX_WIDTH))
    card_h = card_w * CARD_ASPECT

    row_w = card_w * slot_count + CARD_GAP * (slot_count - 1)
    start_x = (window_width - row_w) / 2
    # Centre the row in the band between the button and the header.
    band_bottom = button.top
    band_top = header.bottom
    bottom = band_bottom + max(0.0, (band_top - band_bottom - card_h) / 2)

    cards: list[Rect] = []
    images: list[Rect] = []
    for i in range(slot_count):
        left = start_x + i * (card_w + CARD_GAP)
        card = Rect(left, bottom, card_w, card_h)
        cards.append(card)
        image_h = max(0.0, card_h - CARD_TEXT_BAND)
        images.append(Rect(left, bottom + CARD_TEXT_BAND, card_w, image_h))
    return CardLayout(cards=tuple(cards), images=tuple(images), header=header, advance_button=button)
