"""Wires the deck view: event bus, ECS world, fetch scheduler and systems."""
from __future__ import annotations

from concurrent.futures import Executor
from typing import Any, Optional

from deckview.config import ViewerConfig
from deckview.events.bus import EventBus
from deckview.net.api_client import DeckApiClient
from deckview.net.scheduler import FetchScheduler
from deckview.systems.card_loader_system import CardLoaderSystem
from deckview.systems.card_painter_system import CardPainterSystem, TextureFactory
from deckview.systems.input_system import InputSystem
from deckview.systems.navigation_system import NavigationSystem
from deckview.systems.profile_system import ProfileSystem
from deckview.world import create_world


class DeckViewApp:
    """Everything but the window: owns the systems and the scheduler."""

    def __init__(
        self,
        config: ViewerConfig,
        window,
        *,
        api: Optional[DeckApiClient] = None,
        executor: Optional[Executor] = None,
        texture_factory: Optional[TextureFactory] = None,
        placeholder: Any = None,
    ) -> None:
        self.config = config
        self.event_bus = EventBus()
        self.world = create_world(config, placeholder=placeholder)
        self.api = api or DeckApiClient(config)
        self.scheduler = FetchScheduler(
            self.event_bus,
            executor=executor,
            max_workers=config.http_workers,
        )

        # Navigation and input
        self.navigation_system = NavigationSystem(self.world, self.event_bus, self.scheduler)
        self.input_system = InputSystem(self.event_bus, window, self.world)

        # Fetching and painting
        self.profile_system = ProfileSystem(
            self.world,
            self.event_bus,
            self.scheduler,
            self.api,
            config.fallback_ids,
        )
        self.card_painter_system = CardPainterSystem(
            self.world,
            self.event_bus,
            self.scheduler,
            self.api,
            texture_factory=texture_factory,
            placeholder=placeholder,
        )
        self.card_loader_system = CardLoaderSystem(self.world, self.event_bus, self.card_painter_system)

    def start(self) -> None:
        self.navigation_system.start()

    def shutdown(self) -> None:
        self.scheduler.shutdown()
        self.api.close()
