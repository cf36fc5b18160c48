"""Signed-in user context, read by the core to stamp new events."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UserSession(BaseModel):
    """The authenticated user as far as this package cares.

    Parameters
    ----------
    user_id : str
        Id stamped into ``organizerId`` of events the user creates.
    email : str or None
        Account e-mail, informational.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    user_id: str
    email: str | None = None


class AuthenticationContext:
    """Process-wide holder of the current :class:`UserSession`.

    Login and logout live outside this package; they call :meth:`set_value`.
    Everything here only reads :attr:`value`.
    """

    def __init__(self, value: UserSession | None = None) -> None:
        self._value = value

    @property
    def value(self) -> UserSession | None:
        return self._value

    def set_value(self, value: UserSession | None) -> None:
        self._value = value

    @property
    def organizer_id(self) -> str:
        """Id to stamp on new events, ``""`` when nobody is signed in."""
        return self._value.user_id if self._value is not None else ""
