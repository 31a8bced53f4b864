"""HTTP client for the users, character and image endpoints."""
from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from deckview.config import ViewerConfig
from deckview.errors import NetworkError, ParseError
from deckview.models import CharacterRecord, UserProfile

logger = logging.getLogger(__name__)


def build_session(user_agent: str) -> requests.Session:
    """Return a requests Session with the viewer's default headers. No retries."""
    sess = requests.Session()
    sess.headers.update({
        "User-Agent": user_agent,
        "Accept": "application/json",
    })
    return sess


class DeckApiClient:
    """Blocking client; calls are meant to run on the fetch scheduler's workers."""

    def __init__(self, config: ViewerConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self.session = session or build_session(config.user_agent)

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------
    def fetch_user(self, user_id: int) -> UserProfile:
        payload = self._get_json(self.config.user_url(user_id), tag="user")
        return UserProfile.from_payload(payload)

    def fetch_character(self, character_id: int) -> CharacterRecord:
        payload = self._get_json(self.config.character_url(character_id), tag="char")
        return CharacterRecord.from_payload(payload, fallback_id=character_id)

    def fetch_image(self, url: str) -> bytes:
        response = self._get(url, headers={"Accept": "image/*"})
        return response.content

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _get(self, url: str, *, headers: Optional[dict] = None) -> requests.Response:
        try:
            response = self.session.get(url, headers=headers, timeout=self.config.http_timeout)
        except requests.RequestException as exc:
            raise NetworkError(str(exc) or exc.__class__.__name__, url=url) from exc
        if not response.ok:
            raise NetworkError(response.reason or "HTTP error", status_code=response.status_code, url=url)
        return response

    def _get_json(self, url: str, *, tag: str) -> Any:
        response = self._get(url)
        raw = response.text
        logger.debug("[%s json] %s", tag, raw)
        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(f"malformed JSON from {url}: {exc}") from exc

    def close(self) -> None:
        self.session.close()
