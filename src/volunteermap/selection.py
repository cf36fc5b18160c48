"""Location selection state machine for the event creation flow.

Drives the map screen through pin drop, confirmation and hand-off to the
creation form::

    Idle --start_creation--> SelectingLocation --tap--> LocationChosen
    LocationChosen --confirm--> (hand off) --> Idle
    SelectingLocation / LocationChosen --cancel--> Idle

Inputs that do not apply to the current state are ignored; no transition
raises. A pending location exists if and only if the state is
:class:`LocationChosen`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from pydantic import ValidationError

from volunteermap.models.event import PendingLocation

_logger = logging.getLogger(__name__)


class SelectionPhase(StrEnum):
    IDLE = "idle"
    SELECTING_LOCATION = "selecting_location"
    LOCATION_CHOSEN = "location_chosen"


@dataclass(frozen=True, slots=True)
class Idle:
    phase: SelectionPhase = SelectionPhase.IDLE


@dataclass(frozen=True, slots=True)
class SelectingLocation:
    phase: SelectionPhase = SelectionPhase.SELECTING_LOCATION


@dataclass(frozen=True, slots=True)
class LocationChosen:
    location: PendingLocation
    phase: SelectionPhase = SelectionPhase.LOCATION_CHOSEN


SelectionState = Idle | SelectingLocation | LocationChosen

HandOff = Callable[[PendingLocation], None]
StateListener = Callable[[SelectionState], None]


class LocationSelection:
    """Holds exactly one :data:`SelectionState` and applies user inputs to it."""

    def __init__(
        self,
        *,
        on_hand_off: HandOff | None = None,
        on_change: StateListener | None = None,
    ) -> None:
        self._state: SelectionState = Idle()
        self._on_hand_off = on_hand_off
        self._on_change = on_change

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def phase(self) -> SelectionPhase:
        return self._state.phase

    @property
    def pending_location(self) -> PendingLocation | None:
        if isinstance(self._state, LocationChosen):
            return self._state.location
        return None

    @property
    def is_idle(self) -> bool:
        return isinstance(self._state, Idle)

    @property
    def allows_camera_fit(self) -> bool:
        """Automatic camera moves would fight the user's pin placement."""
        return self.is_idle

    def _transition(self, state: SelectionState) -> None:
        previous = self._state
        self._state = state
        _logger.debug("Location selection %s -> %s", previous.phase, state.phase)
        if self._on_change is not None and state != previous:
            self._on_change(state)

    def start_creation(self) -> None:
        """Enter pin-drop mode, discarding any pin already placed.

        Accepted from every state, so it doubles as the explicit pin clear.
        """
        self._transition(SelectingLocation())

    def tap(self, latitude: float, longitude: float) -> bool:
        """Record the first map tap; return whether it was accepted."""
        if not isinstance(self._state, SelectingLocation):
            return False
        try:
            location = PendingLocation(latitude=latitude, longitude=longitude)
        except ValidationError:
            _logger.debug("Ignoring non-finite map point (%r, %r)", latitude, longitude)
            return False
        self._transition(LocationChosen(location))
        return True

    def cancel(self) -> None:
        if isinstance(self._state, Idle):
            return
        self._transition(Idle())

    def confirm(self) -> PendingLocation | None:
        """Hand the chosen pin to the creation form and reset.

        Returns the handed-off location, or ``None`` when no pin was chosen or
        the creation form could not be opened. A chosen pin always ends in
        :class:`Idle`, even when the hand-off fails.
        """
        if not isinstance(self._state, LocationChosen):
            return None
        location = self._state.location
        handed_off = True
        if self._on_hand_off is not None:
            try:
                self._on_hand_off(location)
            except Exception:  # noqa: BLE001
                _logger.exception("Hand-off of location %s failed", location)
                handed_off = False
        self._transition(Idle())
        return location if handed_off else None

    def reset(self) -> None:
        """Return to :class:`Idle` (screen left, or back from the form)."""
        self.cancel()
