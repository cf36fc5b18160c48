"""In-memory cache store."""

from __future__ import annotations

import copy
from typing import Any

from volunteermap.models.cache import CacheEntry


class MemoryCacheStore:
    """Process-local cache; values are deep-copied on the way in and out."""

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}

    async def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        return copy.deepcopy(entry.value)

    async def set(self, key: str, value: Any) -> None:
        self._entries[key] = CacheEntry(key=key, value=copy.deepcopy(value))

    def entry(self, key: str) -> CacheEntry | None:
        """Return the raw slot for *key* (inspection only)."""
        return self._entries.get(key)
