"""Time-window filtering applied to event listings."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime

from volunteermap.models._base import ensure_utc
from volunteermap.models.event import Event


def upcoming_events(events: Iterable[Event], *, now: datetime | None = None) -> list[Event]:
    """Keep only events starting strictly after *now*.

    The clock is read once per call so every event in one listing is
    compared against the same instant. Records are returned unchanged.
    """
    cutoff = ensure_utc(now) if now is not None else datetime.now(UTC)
    return [event for event in events if event.date_time > cutoff]
