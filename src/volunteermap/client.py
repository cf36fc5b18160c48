"""High-level async client for the volunteer events backend."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from volunteermap._transport import HttpTransport, Transport
from volunteermap.cache import CacheStore, FileCacheStore, MemoryCacheStore
from volunteermap.config import VolunteerMapConfig
from volunteermap.exceptions import NoDataAvailableError, TransportError, VolunteerMapError
from volunteermap.fetcher import ResilientFetcher
from volunteermap.models.event import Event
from volunteermap.models.requests import NewEventRequest
from volunteermap.session import AuthenticationContext

_logger = logging.getLogger(__name__)

EVENTS_ENDPOINT = "/events"


def _default_cache(config: VolunteerMapConfig) -> CacheStore:
    if config.cache_dir is not None:
        return FileCacheStore(config.cache_dir)
    return MemoryCacheStore()


def parse_events(data: Any) -> list[Event]:
    """Validate a raw event listing into :class:`Event` models.

    Malformed records are skipped with a warning so one bad row cannot
    blank the whole map.
    """
    if not isinstance(data, list):
        raise TransportError(f"Expected a list of events, got {type(data).__name__}", endpoint=EVENTS_ENDPOINT)
    events: list[Event] = []
    for item in data:
        try:
            events.append(Event.model_validate(item))
        except ValidationError as exc:
            _logger.warning("Skipping malformed event record: %s", exc.errors(include_url=False))
    return events


class EventsClient:
    """Async client for the volunteer events API.

    Usage::

        async with EventsClient(config) as client:
            events = await client.fetch_events()
    """

    def __init__(
        self,
        config: VolunteerMapConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        cache: CacheStore | None = None,
        transport: Transport | None = None,
        auth: AuthenticationContext | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._external_transport = transport is not None
        self._fetcher = ResilientFetcher(cache if cache is not None else _default_cache(config))
        self.auth = auth if auth is not None else AuthenticationContext()

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> EventsClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise VolunteerMapError("Client not initialized. Use 'async with EventsClient(...) as client:'")
        return self._transport

    @property
    def fetcher(self) -> ResilientFetcher:
        return self._fetcher

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def fetch_events(self) -> list[Event]:
        """Return all events, from the network or else the last cached listing.

        Raises
        ------
        NoDataAvailableError
            The backend is unreachable and nothing usable was cached.
        """
        transport = self._require_transport()

        async def _remote() -> list[Any]:
            data = await transport.get_json(EVENTS_ENDPOINT)
            # Validate before caching so a garbage body never replaces a good listing.
            parse_events(data)
            return data

        key = self._config.events_cache_key
        raw = await self._fetcher.fetch(key, _remote)
        try:
            return parse_events(raw)
        except TransportError as exc:
            # Network bodies are checked in _remote, so this is a cached value of the wrong shape.
            _logger.warning("Cache slot %s does not hold an event listing", key)
            raise NoDataAvailableError(key) from exc

    async def create_event(self, event: Event) -> None:
        """Submit a new event. Not cached and not retried."""
        transport = self._require_transport()
        await transport.post_json(EVENTS_ENDPOINT, event.to_payload())
        _logger.info("Created event %s", event.id)

    async def submit_new_event(self, request: NewEventRequest) -> Event:
        """Build an :class:`Event` from form input, stamp the organizer, and create it."""
        event = request.build_event(organizer_id=self.auth.organizer_id)
        await self.create_event(event)
        return event
