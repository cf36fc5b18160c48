"""Data models for the volunteer events backend."""

from volunteermap.models._base import AwareTimestamp, VolunteerMapBaseModel, ensure_utc
from volunteermap.models.cache import CacheEntry
from volunteermap.models.event import Event, PendingLocation, Position
from volunteermap.models.requests import NewEventRequest

__all__ = [
    "AwareTimestamp",
    "CacheEntry",
    "Event",
    "NewEventRequest",
    "PendingLocation",
    "Position",
    "VolunteerMapBaseModel",
    "ensure_utc",
]
