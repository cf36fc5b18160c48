"""volunteermap - resilient data access for a volunteer events map client."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("volunteermap")
except PackageNotFoundError:
    __version__ = "0+local"
from volunteermap.cache import CacheStore, FileCacheStore, MemoryCacheStore
from volunteermap.client import EventsClient
from volunteermap.config import MapEdgePadding, MapRegion, VolunteerMapConfig
from volunteermap.exceptions import (
    CacheError,
    CacheMissError,
    ConfigError,
    NoDataAvailableError,
    TransportError,
    VolunteerMapError,
)
from volunteermap.fetcher import ResilientFetcher
from volunteermap.filters import upcoming_events
from volunteermap.map_controller import EventsMapController
from volunteermap.models import CacheEntry, Event, NewEventRequest, PendingLocation, Position
from volunteermap.selection import (
    Idle,
    LocationChosen,
    LocationSelection,
    SelectingLocation,
    SelectionPhase,
)
from volunteermap.session import AuthenticationContext, UserSession

__all__ = [
    "__version__",
    "AuthenticationContext",
    "CacheEntry",
    "CacheError",
    "CacheMissError",
    "CacheStore",
    "ConfigError",
    "Event",
    "EventsClient",
    "EventsMapController",
    "FileCacheStore",
    "Idle",
    "LocationChosen",
    "LocationSelection",
    "MapEdgePadding",
    "MapRegion",
    "MemoryCacheStore",
    "NewEventRequest",
    "NoDataAvailableError",
    "PendingLocation",
    "Position",
    "ResilientFetcher",
    "SelectingLocation",
    "SelectionPhase",
    "TransportError",
    "UserSession",
    "VolunteerMapConfig",
    "VolunteerMapError",
    "upcoming_events",
]
