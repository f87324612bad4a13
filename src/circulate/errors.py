"""Circulate exception hierarchy.

Shared across routing, middleware, the API client, and the error
normalizer so every module raises and catches the same types.
"""

from __future__ import annotations

from dataclasses import dataclass


class CirculateError(Exception):
    """Base for all circulate-specific errors."""


class ConfigurationError(CirculateError):
    """Raised when a route table or session configuration is invalid.

    Raised at construction time so a misconfigured gate never serves a
    request.
    """


@dataclass(frozen=True, slots=True)
class ApiError(CirculateError):
    """A domain failure that already knows its status and user message.

    Raised by the domain layer (e.g. a failed profile update) when the
    failure maps cleanly to a status code. ``normalize()`` returns it
    verbatim.
    """

    status: int
    message: str

    def __str__(self) -> str:
        return f"{self.status}: {self.message}"


@dataclass(frozen=True, slots=True)
class RedirectError(CirculateError):
    """A failure that tells the caller where to go next.

    Typically raised when an action discovers the session is gone and
    the user should be sent back to the login page.
    """

    status: int
    message: str
    location: str

    def __str__(self) -> str:
        return f"{self.status}: {self.message} -> {self.location}"


class FetchError(CirculateError):
    """Raised by ``ApiClient`` when a remote call fails.

    The message text is the contract: ``normalize()`` parses it, so
    non-2xx responses always read
    ``HTTP error! status: <code> message: <body>``.
    """

    def __init__(self, message: str, *, status: int | None = None) -> None:
        self.status_code = status
        super().__init__(message)

    @classmethod
    def from_response(cls, status: int, body: str) -> FetchError:
        return cls(f"HTTP error! status: {status} message: {body}", status=status)
