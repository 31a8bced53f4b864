"""Draws the header, card slots and the advance button."""
import arcade
from esper import World

from deckview.components.card_slot import CardSlot, SlotState
from deckview.ui.layout import CardLayout, Rect, compute_card_layout
from deckview.utils.slots import ordered_slots
from deckview.utils.ui_state import get_advance_button, get_header_label, get_navigation_state

BACKGROUND_COLOR = (20, 30, 50)
CARD_FILL = (34, 40, 58)
CARD_OUTLINE = (120, 130, 160)
CARD_PADDING = 8


class CardRenderSystem:
    """Renders the deck view from component state; never mutates it."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window
        self._layout: CardLayout | None = None
        self._layout_key: tuple[int, int, int] | None = None

    def process(self) -> None:
        slots = ordered_slots(self.world)
        layout = self._current_layout(len(slots))

        arcade.draw_lrbt_rectangle_filled(0, self.window.width, 0, self.window.height, BACKGROUND_COLOR)
        self._draw_header(layout.header)
        for slot, card_rect, image_rect in zip(slots, layout.cards, layout.images):
            self._draw_card(slot, card_rect, image_rect)
        self._draw_advance_button(layout.advance_button)

    def _current_layout(self, slot_count: int) -> CardLayout:
        key = (self.window.width, self.window.height, slot_count)
        if self._layout is None or key != self._layout_key:
            self._layout = compute_card_layout(self.window.width, self.window.height, slot_count)
            self._layout_key = key
        return self._layout

    def _draw_header(self, rect: Rect) -> None:
        label = get_header_label(self.world)
        text = label.text if label is not None else ""
        arcade.draw_text(
            text,
            rect.center_x,
            rect.center_y,
            arcade.color.WHITE,
            28,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
        state = get_navigation_state(self.world)
        if state is not None and state.is_loading:
            arcade.draw_text(
                "Loading...",
                rect.center_x,
                rect.bottom - 6,
                arcade.color.SILVER,
                14,
                anchor_x="center",
                anchor_y="top",
            )

    def _draw_card(self, slot: CardSlot, card: Rect, image: Rect) -> None:
        arcade.draw_lbwh_rectangle_filled(card.left, card.bottom, card.width, card.height, CARD_FILL)
        outline = arcade.color.ORANGE_PEEL if slot.is_busy else CARD_OUTLINE
        arcade.draw_lbwh_rectangle_outline(card.left, card.bottom, card.width, card.height, outline, border_width=2)

        texture = slot.texture if slot.has_image else None
        if isinstance(texture, arcade.Texture) and texture.width and texture.height:
            self._draw_fitted_texture(texture, image)

        if slot.has_title and slot.title:
            arcade.draw_text(
                slot.title,
                card.center_x,
                card.bottom + 36,
                arcade.color.WHITE,
                14,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
        if slot.has_subtitle and slot.subtitle:
            color = arcade.color.LIGHT_GRAY if slot.state != SlotState.IMAGE_FAILED else arcade.color.LIGHT_CORAL
            arcade.draw_text(
                slot.subtitle,
                card.center_x,
                card.bottom + 16,
                color,
                11,
                anchor_x="center",
                anchor_y="center",
            )

    @staticmethod
    def _draw_fitted_texture(texture, area: Rect) -> None:
        avail_w = max(1.0, area.width - 2 * CARD_PADDING)
        avail_h = max(1.0, area.height - 2 * CARD_PADDING)
        scale = min(avail_w / texture.width, avail_h / texture.height)
        w = texture.width * scale
        h = texture.height * scale
        left = area.center_x - w / 2
        bottom = area.center_y - h / 2
        arcade.draw_texture_rect(texture, arcade.LBWH(left, bottom, w, h))

    def _draw_advance_button(self, rect: Rect) -> None:
        button = get_advance_button(self.world)
        if button is None:
            return
        fill = arcade.color.DARK_SLATE_BLUE if button.enabled else arcade.color.GRAY_BLUE
        text_color = arcade.color.WHITE if button.enabled else arcade.color.SILVER
        arcade.draw_lbwh_rectangle_filled(rect.left, rect.bottom, rect.width, rect.height, fill)
        arcade.draw_lbwh_rectangle_outline(rect.left, rect.bottom, rect.width, rect.height, text_color, border_width=2)
        arcade.draw_text(
            f"{button.label}  >",
            rect.center_x,
            rect.center_y,
            text_color,
            18,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
