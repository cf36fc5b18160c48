"""Pydantic request models for client entrypoints.

These models provide a consistent "validate → normalize → execute" flow.
"""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

from volunteermap.models._base import AwareTimestamp
from volunteermap.models.event import Event, PendingLocation, Position


class NewEventRequest(BaseModel):
    """Everything the creation form collects for a new event.

    ``location`` is the read-only hand-off from the location selection
    flow; the remaining fields come from the form itself.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )

    location: PendingLocation
    name: str
    description: str
    date_time: AwareTimestamp
    volunteers_needed: int = Field(ge=0)
    image_url: str | None = None

    @field_validator("name", "description")
    @classmethod
    def _text_non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must be non-empty")
        return value

    def build_event(self, *, organizer_id: str, event_id: str | None = None) -> Event:
        """Create the immutable :class:`Event` record for submission."""
        return Event(
            id=event_id or str(uuid.uuid4()),
            name=self.name,
            description=self.description,
            date_time=self.date_time,
            organizer_id=organizer_id,
            position=Position(latitude=self.location.latitude, longitude=self.location.longitude),
            volunteers_needed=self.volunteers_needed,
            volunteers_ids=(),
            image_url=self.image_url,
        )
