"""Durable cache store: one JSON document per resource key."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import tempfile
from pathlib import Path
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from volunteermap.exceptions import CacheError
from volunteermap.models.cache import CacheEntry

_logger = logging.getLogger(__name__)


class FileCacheStore:
    """Persist each cache slot as ``<directory>/<percent-encoded key>.json``.

    Writes go to a temporary file in the same directory and are moved into
    place with :func:`os.replace`, so readers never observe a partial write.
    Blocking file I/O is pushed to a worker thread.
    """

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        if not key.strip():
            raise CacheError("Cache key must be non-empty", key=key)
        # Percent-encoding is reversible, so distinct keys never share a file.
        return self._directory / f"{quote(key, safe='')}.json"

    async def get(self, key: str) -> Any | None:
        return await asyncio.to_thread(self._read, key)

    async def set(self, key: str, value: Any) -> None:
        await asyncio.to_thread(self._write, key, value)

    def _read(self, key: str) -> Any | None:
        path = self.path_for(key)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise CacheError(f"Could not read cache slot {key!r}: {exc}", key=key) from exc

        try:
            entry = CacheEntry.model_validate_json(text)
        except ValidationError as exc:
            raise CacheError(f"Corrupt cache slot {key!r}", key=key) from exc
        if entry.key != key.strip():
            _logger.warning("Cache file %s holds slot %r, not %r", path, entry.key, key)
            return None
        return entry.value

    def _write(self, key: str, value: Any) -> None:
        path = self.path_for(key)
        entry = CacheEntry(key=key, value=value)
        try:
            payload = entry.model_dump_json()
        except (TypeError, ValueError) as exc:
            raise CacheError(f"Value for {key!r} is not JSON serialisable", key=key) from exc

        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=f".{path.stem}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, path)
            except BaseException:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise CacheError(f"Could not write cache slot {key!r}: {exc}", key=key) from exc

        _logger.debug("Cache slot %s written to %s", key, path)
