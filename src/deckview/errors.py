"""Exceptions raised by the deck viewer's network and slot handling."""
from __future__ import annotations


class DeckviewError(Exception):
    """Base class for recoverable deck viewer failures."""


class NetworkError(DeckviewError):
    """A request failed in transport or returned a non-success status."""

    def __init__(self, reason: str, *, status_code: int | None = None, url: str | None = None) -> None:
        self.reason = reason
        self.status_code = status_code
        self.url = url
        super().__init__(self.__str__())

    def __str__(self) -> str:
        code = self.status_code if self.status_code is not None else "-"
        return f"{code} - {self.reason}"


class ParseError(DeckviewError):
    """A response body could not be turned into the expected shape."""


class ImageDecodeError(ParseError):
    """Image bytes could not be decoded."""


class SlotConfigError(DeckviewError):
    """A card slot index is out of range or the slot has no image target."""

    def __init__(self, slot_index: int) -> None:
        self.slot_index = slot_index
        super().__init__(f"invalid slot: {slot_index}")
