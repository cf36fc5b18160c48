"""Presentation logic of the events map screen, free of any UI toolkit.

The screen itself (map widget, buttons, spinner) is a thin view that
forwards gestures here and renders :attr:`EventsMapController.events`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any, Protocol

from volunteermap.config import MapEdgePadding, VolunteerMapConfig
from volunteermap.exceptions import NoDataAvailableError
from volunteermap.filters import upcoming_events
from volunteermap.models.event import Event, PendingLocation
from volunteermap.selection import LocationSelection, SelectionState

_logger = logging.getLogger(__name__)

CREATE_EVENT_ROUTE = "CreateEvent"


class EventSource(Protocol):
    async def fetch_events(self) -> list[Event]:
        ...


class Camera(Protocol):
    """The map surface's camera."""

    def fit_to_coordinates(
        self,
        coordinates: list[dict[str, float]],
        *,
        edge_padding: MapEdgePadding,
        animated: bool,
    ) -> None:
        ...


class Navigator(Protocol):
    def navigate(self, route: str, params: Mapping[str, Any]) -> None:
        ...


def _utcnow() -> datetime:
    return datetime.now(UTC)


class EventsMapController:
    """Loads upcoming events and runs the pin-drop creation flow."""

    def __init__(
        self,
        source: EventSource,
        *,
        camera: Camera | None = None,
        navigator: Navigator | None = None,
        config: VolunteerMapConfig | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._source = source
        self._camera = camera
        self._navigator = navigator
        self._config = config if config is not None else VolunteerMapConfig()
        self._clock = clock
        self.events: list[Event] = []
        self.is_loading = False
        self.selection = LocationSelection(
            on_hand_off=self._hand_off,
            on_change=self._on_selection_change,
        )

    @property
    def footer_text(self) -> str:
        return f"{len(self.events)} event(s) found"

    async def load_events(self) -> list[Event]:
        """Fetch, keep only upcoming events, and refit the camera.

        An unavailable backend with an empty cache yields an empty list.
        """
        self.is_loading = True
        try:
            try:
                fetched = await self._source.fetch_events()
            except NoDataAvailableError:
                _logger.info("No events available from network or cache")
                fetched = []
            upcoming = upcoming_events(fetched, now=self._clock())
            _logger.debug("Kept %d upcoming events out of %d", len(upcoming), len(fetched))
            self._set_events(upcoming)
        finally:
            self.is_loading = False
        return self.events

    def _set_events(self, events: list[Event]) -> None:
        self.events = events
        self._fit_camera()

    def _fit_camera(self) -> bool:
        if not self.events or self._camera is None:
            return False
        if not self.selection.allows_camera_fit:
            return False
        coordinates = [event.position.as_coordinate() for event in self.events]
        self._camera.fit_to_coordinates(
            coordinates,
            edge_padding=self._config.edge_padding,
            animated=True,
        )
        return True

    def _on_selection_change(self, state: SelectionState) -> None:
        self._fit_camera()

    def _hand_off(self, location: PendingLocation) -> None:
        if self._navigator is None:
            return
        self._navigator.navigate(
            CREATE_EVENT_ROUTE,
            {"latitude": location.latitude, "longitude": location.longitude},
        )

    # Gesture entry points

    def start_creation(self) -> None:
        self.selection.start_creation()

    def map_pressed(self, latitude: float, longitude: float) -> bool:
        return self.selection.tap(latitude, longitude)

    def cancel_location_selection(self) -> None:
        self.selection.cancel()

    def confirm_location(self) -> PendingLocation | None:
        return self.selection.confirm()

    def leave(self) -> None:
        self.selection.reset()
