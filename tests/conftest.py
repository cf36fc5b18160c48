from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from volunteermap.models.event import Event

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def event_payload(event_id: str, *, offset: timedelta, latitude: float = 51.0, longitude: float = -114.0) -> dict[str, Any]:
    return {
        "id": event_id,
        "name": f"Event {event_id}",
        "description": "Park clean-up",
        "dateTime": (NOW + offset).isoformat(),
        "organizerId": "user-1",
        "position": {"latitude": latitude, "longitude": longitude},
        "volunteersNeeded": 5,
        "volunteersIds": [],
    }


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_event():
    def _make(event_id: str, *, offset: timedelta, **kwargs: Any) -> Event:
        return Event.model_validate(event_payload(event_id, offset=offset, **kwargs))

    return _make


@pytest.fixture
def make_payload():
    return event_payload
