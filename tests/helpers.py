from __future__ import annotations

import io
from concurrent.futures import Executor, Future
from typing import Any, Callable

from PIL import Image

from deckview.config import ViewerConfig
from deckview.errors import NetworkError
from deckview.models import CharacterRecord, UserProfile


def png_bytes(size: tuple[int, int] = (4, 4), color=(200, 30, 30, 255)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGBA", size, color).save(buf, format="PNG")
    return buf.getvalue()


def make_config(**overrides: Any) -> ViewerConfig:
    values: dict[str, Any] = {
        "user_base_url": "http://users.test/users",
        "character_base_url": "http://chars.test/character",
        "fallback_ids": (300, 2, 47),
        "total_users": 4,
        "initial_user_id": 1,
        "slot_count": 3,
    }
    values.update(overrides)
    return ViewerConfig(**values)


def make_character(character_id: int, name: str | None = None) -> CharacterRecord:
    return CharacterRecord(
        id=character_id,
        name=name or f"Character {character_id}",
        status="Alive",
        species="Human",
        image=f"http://img.test/{character_id}.png",
    )


def fake_texture(image, key: str):
    return ("texture", key)


class ManualExecutor(Executor):
    """Holds submitted calls until the test runs them, in any order."""

    def __init__(self) -> None:
        self.queue: list[tuple[Future, Callable, tuple, dict]] = []

    def submit(self, fn, /, *args, **kwargs):
        future: Future = Future()
        self.queue.append((future, fn, args, kwargs))
        return future

    def run_one(self, index: int = 0) -> None:
        future, fn, args, kwargs = self.queue.pop(index)
        if not future.set_running_or_notify_cancel():
            return
        try:
            future.set_result(fn(*args, **kwargs))
        except BaseException as exc:
            future.set_exception(exc)

    def run_all(self) -> None:
        while self.queue:
            self.run_one(0)


class InlineExecutor(ManualExecutor):
    """Runs every call as soon as it is submitted."""

    def submit(self, fn, /, *args, **kwargs):
        future = super().submit(fn, *args, **kwargs)
        self.run_one(len(self.queue) - 1)
        return future


class FakeApi:
    """Stands in for DeckApiClient; values that are exceptions get raised."""

    def __init__(
        self,
        users: dict[int, Any] | None = None,
        characters: dict[int, Any] | None = None,
        images: dict[str, Any] | None = None,
    ) -> None:
        self.users = users or {}
        self.characters = characters or {}
        self.images = images or {}
        self.calls: list[tuple[str, Any]] = []
        self.closed = False

    def fetch_user(self, user_id: int) -> UserProfile:
        self.calls.append(("user", user_id))
        return self._answer(self.users, user_id)

    def fetch_character(self, character_id: int) -> CharacterRecord:
        self.calls.append(("character", character_id))
        if character_id not in self.characters:
            raise NetworkError("Not Found", status_code=404)
        return self._answer(self.characters, character_id)

    def fetch_image(self, url: str) -> bytes:
        self.calls.append(("image", url))
        if url not in self.images:
            return png_bytes()
        return self._answer(self.images, url)

    def close(self) -> None:
        self.closed = True

    def called(self, kind: str) -> list[Any]:
        return [arg for k, arg in self.calls if k == kind]

    @staticmethod
    def _answer(table: dict, key: Any) -> Any:
        if key not in table:
            raise NetworkError("Not Found", status_code=404)
        value = table[key]
        if isinstance(value, BaseException):
            raise value
        return value


class DummyWindow:
    width = 960
    height = 600
