"""Entry point for the deck viewer.

Sets up logging, the ECS world, event bus, systems and the Arcade window.
"""
import logging
from functools import partial

import arcade
from arcade import Window, run

from deckview.app import DeckViewApp
from deckview.config import load_config
from deckview.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from deckview.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_TICK
from deckview.rendering.card_renderer import CardRenderSystem
from deckview.rendering.textures import load_placeholder_image, texture_from_image


class DeckViewWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        config = load_config()
        placeholder = texture_from_image(arcade, load_placeholder_image(config.placeholder_path), "placeholder")
        self.app = DeckViewApp(
            config,
            self,
            texture_factory=partial(texture_from_image, arcade),
            placeholder=placeholder,
        )
        self.event_bus = self.app.event_bus
        self.render_system = CardRenderSystem(self.app.world, self)
        self.app.start()

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button, modifiers=modifiers)

    def on_close(self):
        self.app.shutdown()
        super().on_close()


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")
    DeckViewWindow()
    run()

if __name__ == "__main__":
    main()
