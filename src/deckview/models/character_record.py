"""Character record returned by the character endpoint."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from deckview.errors import ParseError

_TEXT_FIELDS = ("name", "status", "species", "image")


@dataclass(frozen=True)
class CharacterRecord:
    """Character data painted into one card slot."""
    id: int
    name: str
    status: str
    species: str
    image: str  # absolute image URL

    @property
    def subtitle(self) -> str:
        return f"{self.status} - {self.species}"

    @classmethod
    def from_payload(cls, payload: Any, *, fallback_id: int = 0) -> "CharacterRecord":
        if not isinstance(payload, dict):
            raise ParseError(f"character payload must be an object, got {type(payload).__name__}")
        raw_id = payload.get("id", fallback_id)
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise ParseError(f"character id must be an integer, got {raw_id!r}")
        values: dict[str, str] = {}
        for key in _TEXT_FIELDS:
            value = payload.get(key)
            if value is None:
                values[key] = ""
            elif isinstance(value, str):
                values[key] = value
            else:
                raise ParseError(f"{key} must be a string, got {value!r}")
        return cls(id=raw_id, **values)
