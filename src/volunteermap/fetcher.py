"""Network-first fetch with cache fallback.

The remote source is always tried first. A successful result overwrites
the cache slot for its resource key; a failed one is answered from that
slot. Only when both are unavailable does the caller see an error, and
then it is always :class:`NoDataAvailableError`.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from volunteermap.cache.store import CacheStore
from volunteermap.exceptions import CacheMissError, NoDataAvailableError

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResilientFetcher:
    """Serve remote reads through a durable per-key cache.

    Staleness of a cached answer is unbounded and not reported; callers
    that care must track timestamps themselves.
    """

    def __init__(self, store: CacheStore) -> None:
        self._store = store

    @property
    def store(self) -> CacheStore:
        return self._store

    async def fetch(self, key: str, remote_operation: Callable[[], Awaitable[T]]) -> T:
        """Resolve *key* from the network, falling back to the cache.

        Parameters
        ----------
        key : str
            Cache slot name (resource key), e.g. ``"events"``.
        remote_operation : callable
            Zero-argument callable returning an awaitable that yields the
            authoritative value.

        Raises
        ------
        NoDataAvailableError
            The remote operation failed and nothing could be read from the
            cache slot.
        """
        try:
            value = await remote_operation()
        except Exception as network_exc:  # noqa: BLE001
            _logger.info("Remote read for %s failed (%s); falling back to cache", key, network_exc)
            _logger.debug("Remote read failure for %s", key, exc_info=True)
            return await self._from_cache(key, network_exc)

        await self._store_quietly(key, value)
        return value

    async def _from_cache(self, key: str, network_exc: Exception) -> Any:
        try:
            cached = await self._store.get(key)
            if cached is None:
                raise CacheMissError(key)
        except Exception as cache_exc:  # noqa: BLE001
            _logger.info("No cached value for %s: %s", key, cache_exc)
            raise NoDataAvailableError(key) from network_exc
        _logger.debug("Serving %s from cache", key)
        return cached

    async def _store_quietly(self, key: str, value: Any) -> None:
        try:
            await self._store.set(key, value)
        except Exception:  # noqa: BLE001
            _logger.warning("Could not update cache slot %s", key, exc_info=True)
