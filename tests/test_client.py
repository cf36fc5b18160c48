from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from volunteermap.cache import MemoryCacheStore
from volunteermap.client import EVENTS_ENDPOINT, EventsClient
from volunteermap.config import VolunteerMapConfig
from volunteermap.exceptions import NoDataAvailableError, TransportError, VolunteerMapError
from volunteermap.models.event import Event, PendingLocation
from volunteermap.models.requests import NewEventRequest
from volunteermap.session import AuthenticationContext, UserSession


class _FakeTransport:
    def __init__(self, listing: Any = None, *, fail: bool = False) -> None:
        self.listing = listing
        self.fail = fail
        self.posts: list[tuple[str, Any]] = []

    async def get_json(self, endpoint: str) -> Any:
        assert endpoint == EVENTS_ENDPOINT
        if self.fail:
            raise TransportError("offline", endpoint=endpoint)
        return self.listing

    async def post_json(self, endpoint: str, payload: Any) -> Any:
        if self.fail:
            raise TransportError("offline", endpoint=endpoint)
        self.posts.append((endpoint, payload))
        return payload


def _client(transport: _FakeTransport, cache: MemoryCacheStore | None = None, **kwargs: Any) -> EventsClient:
    return EventsClient(VolunteerMapConfig(), transport=transport, cache=cache or MemoryCacheStore(), **kwargs)


@pytest.mark.asyncio
async def test_fetch_events_parses_and_caches_listing(make_payload) -> None:
    listing = [make_payload("a", offset=timedelta(hours=1))]
    cache = MemoryCacheStore()

    async with _client(_FakeTransport(listing), cache) as client:
        events = await client.fetch_events()

    assert [e.id for e in events] == ["a"]
    assert events[0].organizer_id == "user-1"
    assert await cache.get("events") == listing


@pytest.mark.asyncio
async def test_fetch_events_falls_back_to_cached_listing(make_payload) -> None:
    cache = MemoryCacheStore()
    await cache.set("events", [make_payload("cached", offset=timedelta(hours=1))])

    async with _client(_FakeTransport(fail=True), cache) as client:
        events = await client.fetch_events()

    assert [e.id for e in events] == ["cached"]


@pytest.mark.asyncio
async def test_fetch_events_without_network_or_cache() -> None:
    async with _client(_FakeTransport(fail=True)) as client:
        with pytest.raises(NoDataAvailableError):
            await client.fetch_events()


@pytest.mark.asyncio
async def test_non_list_body_does_not_replace_cache(make_payload) -> None:
    cache = MemoryCacheStore()
    good = [make_payload("good", offset=timedelta(hours=1))]
    await cache.set("events", good)

    async with _client(_FakeTransport({"error": "oops"}), cache) as client:
        events = await client.fetch_events()

    assert [e.id for e in events] == ["good"]
    assert await cache.get("events") == good


@pytest.mark.asyncio
async def test_malformed_records_are_skipped(make_payload) -> None:
    listing = [make_payload("ok", offset=timedelta(hours=1)), {"id": "broken"}]

    async with _client(_FakeTransport(listing)) as client:
        events = await client.fetch_events()

    assert [e.id for e in events] == ["ok"]


@pytest.mark.asyncio
async def test_create_event_posts_camel_case_and_skips_cache() -> None:
    transport = _FakeTransport([])
    cache = MemoryCacheStore()
    event = Event(
        id="e-1",
        name="Beach clean-up",
        description="Bring gloves",
        date_time=datetime(2026, 6, 1, 9, 30, tzinfo=UTC),
        organizer_id="user-9",
        position={"latitude": 5, "longitude": 6},
        volunteers_needed=3,
    )

    async with _client(transport, cache) as client:
        await client.create_event(event)

    ((endpoint, payload),) = transport.posts
    assert endpoint == EVENTS_ENDPOINT
    assert payload["dateTime"].startswith("2026-06-01T09:30:00")
    assert payload["organizerId"] == "user-9"
    assert payload["volunteersNeeded"] == 3
    assert payload["volunteersIds"] == []
    assert "imageUrl" not in payload
    assert await cache.get("events") is None


@pytest.mark.asyncio
async def test_create_event_failure_propagates(make_payload) -> None:
    event = Event.model_validate(make_payload("a", offset=timedelta(hours=1)))

    async with _client(_FakeTransport(fail=True)) as client:
        with pytest.raises(TransportError):
            await client.create_event(event)


@pytest.mark.asyncio
async def test_submit_new_event_stamps_signed_in_organizer() -> None:
    transport = _FakeTransport([])
    auth = AuthenticationContext(UserSession(user_id="user-42"))
    request = NewEventRequest(
        location=PendingLocation(latitude=5, longitude=5),
        name=" Food drive ",
        description="Sort donations",
        date_time="2026-12-31T14:30:00Z",
        volunteers_needed=4,
    )

    async with _client(transport, auth=auth) as client:
        event = await client.submit_new_event(request)

    assert event.organizer_id == "user-42"
    assert event.name == "Food drive"
    assert event.position.latitude == 5.0
    assert event.volunteers_ids == ()
    assert transport.posts[0][1]["id"] == event.id


@pytest.mark.asyncio
async def test_calls_require_context_manager() -> None:
    client = EventsClient(VolunteerMapConfig(), cache=MemoryCacheStore())

    with pytest.raises(VolunteerMapError):
        await client.fetch_events()


@pytest.mark.asyncio
async def test_cached_value_of_wrong_shape_means_no_data() -> None:
    cache = MemoryCacheStore()
    await cache.set("events", {"not": "a list"})

    async with _client(_FakeTransport(fail=True), cache) as client:
        with pytest.raises(NoDataAvailableError):
            await client.fetch_events()
