"""Cache slot model."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CacheEntry(BaseModel):
    """Most recent successfully fetched value for one resource key.

    ``stored_at`` is informational only; nothing in the fetch path uses it
    to judge staleness.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str
    value: Any
    stored_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("key")
    @classmethod
    def _key_non_empty(cls, value: str) -> str:
        key = value.strip()
        if not key:
            raise ValueError("key must be non-empty")
        return key
