"""Base model for volunteermap wire records.

Every record exchanged with the events backend inherits from
:class:`VolunteerMapBaseModel` which provides:

* ``alias_generator=to_camel`` so camelCase API keys map
  automatically to snake_case fields.
* Frozen instances, so records can be shared between the cache, the
  fetcher and the presentation layer without defensive copies.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; leave aware ones untouched."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


AwareTimestamp = Annotated[datetime, AfterValidator(ensure_utc)]
"""Annotated type for absolute instants; naive input is interpreted as UTC."""


class VolunteerMapBaseModel(BaseModel):
    """Base for records exchanged with the events backend."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialise to the backend's camelCase JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
