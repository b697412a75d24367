"""
Server-side admin sessions.

The client only holds an opaque random token (in a cookie). The store keeps
`{admin_id, username}` keyed by the SHA-256 digest of that token, so a dump of
the store never contains usable cookies.

Each app owns its store (`create_app(session_store=...)`) and handlers reach it
through `request.app.state.sessions`.
"""

from __future__ import annotations

import hashlib
import secrets
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SessionData:
    admin_id: int
    username: str


class SessionStore(Protocol):
    async def create(self, data: SessionData) -> str: ...

    async def get(self, token: str | None) -> SessionData | None: ...

    async def destroy(self, token: str | None) -> bool: ...


def build_session_token() -> str:
    return secrets.token_urlsafe(32)


def hash_session_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


@dataclass
class _Entry:
    data: SessionData
    expires_at: float


class MemorySessionStore:
    """
    In-process store with idle expiry.

    Every successful `get` pushes the expiry forward by `ttl_seconds`.
    Expired entries are dropped when touched and on each `create`.
    """

    def __init__(self, ttl_seconds: int, *, clock: Callable[[], float] = time.monotonic) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive.")
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _Entry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def _purge_expired(self, now: float) -> None:
        expired = [key for key, entry in self._entries.items() if entry.expires_at <= now]
        for key in expired:
            del self._entries[key]

    async def create(self, data: SessionData) -> str:
        now = self._clock()
        self._purge_expired(now)
        token = build_session_token()
        self._entries[hash_session_token(token)] = _Entry(data=data, expires_at=now + self._ttl)
        return token

    async def get(self, token: str | None) -> SessionData | None:
        if not token:
            return None
        key = hash_session_token(token)
        entry = self._entries.get(key)
        if entry is None:
            return None

        now = self._clock()
        if entry.expires_at <= now:
            del self._entries[key]
            return None

        entry.expires_at = now + self._ttl
        return entry.data

    async def destroy(self, token: str | None) -> bool:
        if not token:
            return False
        return self._entries.pop(hash_session_token(token), None) is not None
