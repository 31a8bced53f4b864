"""User profile returned by the users endpoint."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from deckview.errors import ParseError


@dataclass(frozen=True)
class UserProfile:
    """Transient user profile; lives for one navigation only."""
    id: int
    username: Optional[str]
    name: Optional[str]
    deck: tuple[int, ...] = ()

    @property
    def display_name(self) -> str:
        if self.username:
            return self.username
        return self.name or ""

    @property
    def has_deck(self) -> bool:
        return len(self.deck) > 0

    @classmethod
    def from_payload(cls, payload: Any) -> "UserProfile":
        """Build a profile from decoded JSON; raises ParseError on a bad shape."""
        if not isinstance(payload, dict):
            raise ParseError(f"user payload must be an object, got {type(payload).__name__}")
        raw_id = payload.get("id", 0)
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise ParseError(f"user id must be an integer, got {raw_id!r}")
        raw_deck = payload.get("deck")
        if raw_deck is None:
            deck: tuple[int, ...] = ()
        elif isinstance(raw_deck, list):
            for entry in raw_deck:
                if isinstance(entry, bool) or not isinstance(entry, int):
                    raise ParseError(f"deck entries must be integers, got {entry!r}")
            deck = tuple(raw_deck)
        else:
            raise ParseError("deck must be an array")
        return cls(
            id=raw_id,
            username=_optional_str(payload, "username"),
            name=_optional_str(payload, "name"),
            deck=deck,
        )


def _optional_str(payload: dict, key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ParseError(f"{key} must be a string, got {value!r}")
    return value
