"""Structural cache interface used by the resilient fetcher."""

from __future__ import annotations

from typing import Any, Protocol


class CacheStore(Protocol):
    """Atomic get/set per key.

    ``get`` returns ``None`` when nothing was ever stored under *key* and
    raises :class:`~volunteermap.exceptions.CacheError` when the slot
    exists but cannot be read. ``set`` replaces the slot wholesale.
    """

    async def get(self, key: str) -> Any | None:
        ...

    async def set(self, key: str, value: Any) -> None:
        ...
