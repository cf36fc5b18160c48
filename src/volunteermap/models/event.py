"""Volunteer event and coordinate models."""

from __future__ import annotations

from pydantic import Field, field_validator

from volunteermap.models._base import AwareTimestamp, VolunteerMapBaseModel


class Position(VolunteerMapBaseModel):
    """Geographic point in degrees."""

    latitude: float = Field(allow_inf_nan=False)
    longitude: float = Field(allow_inf_nan=False)

    def as_coordinate(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


class PendingLocation(Position):
    """Pin dropped on the map while choosing where a new event takes place."""


class Event(VolunteerMapBaseModel):
    """A location-tagged volunteer event.

    Parameters
    ----------
    id : str
        Opaque client-generated identifier.
    name : str
        Event title.
    description : str
        Free-form description.
    date_time : datetime
        Absolute start instant (timezone-aware).
    organizer_id : str
        Id of the user who created the event.
    position : Position
        Where the event takes place.
    volunteers_needed : int
        Number of volunteers wanted, never negative.
    volunteers_ids : tuple[str, ...]
        Ids of users who signed up, in sign-up order.
    image_url : str or None
        Optional cover image.
    """

    id: str
    name: str
    description: str = ""
    date_time: AwareTimestamp
    organizer_id: str = ""
    position: Position
    volunteers_needed: int = Field(default=0, ge=0)
    volunteers_ids: tuple[str, ...] = ()
    image_url: str | None = None

    @field_validator("id")
    @classmethod
    def _id_non_empty(cls, value: str) -> str:
        event_id = value.strip()
        if not event_id:
            raise ValueError("id must be non-empty")
        return event_id

    @field_validator("image_url")
    @classmethod
    def _blank_image_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped = value.strip()
        return stripped or None
