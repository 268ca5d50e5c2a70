"""Short-lived cache for decrypted credentials.

The cache is an explicit object handed to whichever component needs
credentials. Entries expire after a TTL and can be dropped with
``invalidate`` (e.g. after the store rejects a key).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from cashcast.domain.shared.time import utc_now
from cashcast.domain.shared.value_objects import SecureString

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(minutes=5)


@dataclass(frozen=True)
class _Entry:
    value: SecureString
    expires_at: datetime


class CredentialCache:
    """Keyed TTL cache of ``SecureString`` values."""

    def __init__(
        self,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[str, _Entry] = {}

    def get(self, key: str) -> SecureString | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._entries[key]
            return None
        return entry.value

    def put(self, key: str, value: SecureString) -> None:
        self._entries[key] = _Entry(value=value, expires_at=self._clock() + self._ttl)

    def get_or_load(self, key: str, loader: Callable[[], SecureString]) -> SecureString:
        cached = self.get(key)
        if cached is not None:
            return cached

        logger.debug("Loading credential %r", key)
        value = loader()
        self.put(key, value)
        return value

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
