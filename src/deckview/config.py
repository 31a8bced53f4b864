"""Configuration: endpoints, navigation bounds, slot count and HTTP settings."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

# Project root = parent of src/
BASE_DIR = Path(__file__).resolve().parents[2]

load_dotenv(BASE_DIR / ".env")

DEFAULT_USER_URL = "https://my-json-server.typicode.com/WatermelonSuggar/jsonDB-Wendy/users/"
DEFAULT_CHARACTER_URL = "https://rickandmortyapi.com/api/character/"
DEFAULT_FALLBACK_IDS = (300, 2, 47)
DEFAULT_TOTAL_USERS = 4
DEFAULT_INITIAL_USER = 1
DEFAULT_SLOT_COUNT = 3
DEFAULT_HTTP_TIMEOUT = 10.0
DEFAULT_HTTP_WORKERS = 4
DEFAULT_USER_AGENT = "deckview/0.1"


def normalize_base_url(url: str) -> str:
    """Append a trailing slash so ids can be concatenated directly."""
    url = (url or "").strip()
    if url and not url.endswith("/"):
        url += "/"
    return url


def parse_id_list(raw: str | None, default: tuple[int, ...] = DEFAULT_FALLBACK_IDS) -> tuple[int, ...]:
    """Parse a comma separated id list; any malformed token yields ``default``."""
    if raw is None or not raw.strip():
        return tuple(default)
    ids: list[int] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            ids.append(int(token))
        except ValueError:
            return tuple(default)
    return tuple(ids) if ids else tuple(default)


def _int_env(env: Mapping[str, str], name: str, default: int, *, minimum: int = 1) -> int:
    try:
        value = int(env.get(name, default))
    except (TypeError, ValueError):
        return default
    return value if value >= minimum else default


def _float_env(env: Mapping[str, str], name: str, default: float) -> float:
    try:
        value = float(env.get(name, default))
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class ViewerConfig:
    user_base_url: str = DEFAULT_USER_URL
    character_base_url: str = DEFAULT_CHARACTER_URL
    fallback_ids: tuple[int, ...] = DEFAULT_FALLBACK_IDS
    total_users: int = DEFAULT_TOTAL_USERS
    initial_user_id: int = DEFAULT_INITIAL_USER
    slot_count: int = DEFAULT_SLOT_COUNT
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    http_workers: int = DEFAULT_HTTP_WORKERS
    user_agent: str = DEFAULT_USER_AGENT
    placeholder_path: Path | None = field(default=None)

    def __post_init__(self) -> None:
        # Frozen dataclass; normalise through object.__setattr__.
        object.__setattr__(self, "user_base_url", normalize_base_url(self.user_base_url))
        object.__setattr__(self, "character_base_url", normalize_base_url(self.character_base_url))
        object.__setattr__(self, "fallback_ids", tuple(int(i) for i in self.fallback_ids))

    def user_url(self, user_id: int) -> str:
        return f"{self.user_base_url}{user_id}"

    def character_url(self, character_id: int) -> str:
        return f"{self.character_base_url}{character_id}"


def load_config(env: Mapping[str, str] | None = None) -> ViewerConfig:
    """Build a ViewerConfig from ``env`` (defaults to ``os.environ``)."""
    env = os.environ if env is None else env
    placeholder = (env.get("DECKVIEW_PLACEHOLDER") or "").strip()
    total_users = _int_env(env, "DECKVIEW_TOTAL_USERS", DEFAULT_TOTAL_USERS)
    initial_user = _int_env(env, "DECKVIEW_INITIAL_USER", DEFAULT_INITIAL_USER)
    if initial_user > total_users:
        initial_user = DEFAULT_INITIAL_USER
    return ViewerConfig(
        user_base_url=env.get("DECKVIEW_USER_URL", DEFAULT_USER_URL),
        character_base_url=env.get("DECKVIEW_CHARACTER_URL", DEFAULT_CHARACTER_URL),
        fallback_ids=parse_id_list(env.get("DECKVIEW_FALLBACK_IDS")),
        total_users=total_users,
        initial_user_id=initial_user,
        slot_count=_int_env(env, "DECKVIEW_SLOT_COUNT", DEFAULT_SLOT_COUNT, minimum=0),
        http_timeout=_float_env(env, "DECKVIEW_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
        http_workers=_int_env(env, "DECKVIEW_HTTP_WORKERS", DEFAULT_HTTP_WORKERS),
        user_agent=env.get("DECKVIEW_USER_AGENT", DEFAULT_USER_AGENT),
        placeholder_path=Path(placeholder) if placeholder else None,
    )
