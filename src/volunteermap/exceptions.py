"""Custom exception hierarchy for volunteermap."""

from __future__ import annotations


class VolunteerMapError(Exception):
    """Base exception for all volunteermap errors."""


class ConfigError(VolunteerMapError):
    """Invalid or missing configuration."""


class TransportError(VolunteerMapError):
    """HTTP-level failure (network, non-2xx, timeout, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class CacheError(VolunteerMapError):
    """Cache slot could not be read or written."""

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class CacheMissError(CacheError):
    """No value has ever been stored under the requested key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No cached value for {key!r}", key=key)


class NoDataAvailableError(VolunteerMapError):
    """Both the remote source and the local cache failed for a fetch.

    Terminal for a single fetch call. Callers are expected to present an
    empty state rather than crash.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No data available for {key!r} (network failed and cache is empty)")
