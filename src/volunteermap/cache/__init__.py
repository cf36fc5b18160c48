"""Key-value cache shadowing the last successful server responses.

One slot per resource key, whole-value overwrite, no eviction.
"""

from volunteermap.cache.file import FileCacheStore
from volunteermap.cache.memory import MemoryCacheStore
from volunteermap.cache.store import CacheStore

__all__ = ["CacheStore", "FileCacheStore", "MemoryCacheStore"]
