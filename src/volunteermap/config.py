"""Client configuration for volunteermap."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from volunteermap.exceptions import ConfigError


def _env_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class MapEdgePadding:
    """Padding (in screen points) kept around fitted map coordinates."""

    top: int = 100
    right: int = 24
    bottom: int = 150
    left: int = 24


@dataclasses.dataclass(frozen=True)
class MapRegion:
    """Initial map region shown before any events are fitted."""

    latitude: float = 51.03
    longitude: float = -114.093
    latitude_delta: float = 0.1
    longitude_delta: float = 0.1


@dataclasses.dataclass(frozen=True)
class VolunteerMapConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Events backend base URL (a json-server style REST API).
    request_timeout : float
        Total timeout in seconds for a single HTTP request.
    cache_dir : Path or None
        Directory holding one JSON file per cache key. ``None`` keeps the
        cache in memory for the lifetime of the client.
    events_cache_key : str
        Resource key of the event list cache slot.
    edge_padding : MapEdgePadding
        Padding used when fitting the camera to all events.
    default_region : MapRegion
        Region shown before the first camera fit.
    """

    base_url: str = "http://localhost:3333"
    request_timeout: float = 10.0
    cache_dir: Path | None = None
    events_cache_key: str = "events"
    edge_padding: MapEdgePadding = dataclasses.field(default_factory=MapEdgePadding)
    default_region: MapRegion = dataclasses.field(default_factory=MapRegion)

    def __post_init__(self) -> None:
        if not self.base_url.strip():
            raise ConfigError("base_url must be non-empty")
        if self.request_timeout <= 0:
            raise ConfigError("request_timeout must be positive")
        if not self.events_cache_key.strip():
            raise ConfigError("events_cache_key must be non-empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> VolunteerMapConfig:
        """Create configuration from ``VOLUNTEERMAP_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("VOLUNTEERMAP_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url.rstrip("/")

        timeout_env = env.get("VOLUNTEERMAP_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_float("VOLUNTEERMAP_REQUEST_TIMEOUT", timeout_env)

        cache_dir = env.get("VOLUNTEERMAP_CACHE_DIR")
        if cache_dir:
            config_kwargs["cache_dir"] = Path(cache_dir).expanduser()

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
