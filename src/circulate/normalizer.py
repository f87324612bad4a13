"""Error normalization — any failure value to ``{status, message, location?}``.

Failures reach a user-facing handler from three layers with no common
shape: the domain layer (``ApiError`` / ``RedirectError``), the network
wrapper (``FetchError`` whose text embeds the HTTP status and body), and
ordinary runtime exceptions. ``normalize()`` is the one place that turns
all of them into a ``NormalizedError``.

Two steps:

1. ``classify()`` tags the raw value as one of four variants.
2. ``normalize()`` matches on the variant. Generic messages go through
   the text rules below, first match wins.

The fallback strings are shown to users and must not change.
"""

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from circulate.errors import ApiError, RedirectError

logger = logging.getLogger("circulate.errors")

INVALID_DATA_MESSAGE = "Invalid data format received from the server."
PASSWORD_MISMATCH_MESSAGE = "Password did not match"
HTTP_FALLBACK_MESSAGE = "An error occurred."
UNEXPECTED_MESSAGE = "An unexpected error occured."

_JSON_DESERIALIZE_MARKER = "Json deserialize error"
_HTTP_ERROR_MARKER = "HTTP error! status:"
_STATUS_RE = re.compile(r"status: (\d+)")
_MESSAGE_RE = re.compile(r"message: (.+)")


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class NormalizedError:
    """Uniform failure description for display.

    ``location`` is set only when the failure asks for a redirect.
    """

    status: int
    message: str
    location: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Plain dict, omitting ``location`` when absent."""
        data: dict[str, Any] = {"status": self.status, "message": self.message}
        if self.location is not None:
            data["location"] = self.location
        return data


# ---------------------------------------------------------------------------
# Failure variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Structured:
    status: int
    message: str


@dataclass(frozen=True, slots=True)
class StructuredWithLocation:
    status: int
    message: str
    location: str


@dataclass(frozen=True, slots=True)
class GenericWithMessage:
    message: str


@dataclass(frozen=True, slots=True)
class Opaque:
    value: object


type Failure = Structured | StructuredWithLocation | GenericWithMessage | Opaque


def _structured_from_mapping(data: Mapping[Any, Any]) -> Failure | None:
    status = data.get("status")
    message = data.get("message")
    # bool is an int subclass; True is not a status code
    if not isinstance(status, int) or isinstance(status, bool):
        return None
    if not isinstance(message, str):
        return None
    location = data.get("location")
    if isinstance(location, str):
        return StructuredWithLocation(status, message, location)
    return Structured(status, message)


def classify(err: object) -> Failure:
    """Tag a raw failure value with its variant.

    - ``RedirectError``, or a mapping with int ``status``, str ``message``
      and str ``location``: ``StructuredWithLocation``
    - ``ApiError``, or a mapping with int ``status`` and str ``message``:
      ``Structured``
    - Any other exception: ``GenericWithMessage`` carrying ``str(err)``
    - Everything else (strings, ``None``, numbers, other mappings):
      ``Opaque``
    """
    match err:
        case RedirectError(status=status, message=message, location=location):
            return StructuredWithLocation(status, message, location)
        case ApiError(status=status, message=message):
            return Structured(status, message)
        case BaseException():
            return GenericWithMessage(str(err))
        case Mapping():
            structured = _structured_from_mapping(err)
            if structured is not None:
                return structured
            return Opaque(err)
        case _:
            return Opaque(err)


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def _message_from_body(candidate: str) -> str:
    """Pull ``message`` out of an HTTP error body.

    Undecodable text and any decoded value without a truthy ``message``
    collapse to the generic fallback. A literal ``null`` body keeps the
    raw text.
    """
    try:
        payload = json.loads(candidate)
    except ValueError:
        logger.debug("HTTP error body is not JSON: %r", candidate)
        return HTTP_FALLBACK_MESSAGE

    if payload is None:
        logger.debug("HTTP error body is JSON null: %r", candidate)
        return candidate

    nested = payload.get("message") if isinstance(payload, dict) else None
    if not nested:
        return HTTP_FALLBACK_MESSAGE
    return nested if isinstance(nested, str) else str(nested)


def _normalize_http_error(text: str) -> NormalizedError:
    status_match = _STATUS_RE.search(text)
    message_match = _MESSAGE_RE.search(text)
    status = int(status_match.group(1)) if status_match else 400
    if message_match is None:
        return NormalizedError(status=status, message=HTTP_FALLBACK_MESSAGE)
    return NormalizedError(status=status, message=_message_from_body(message_match.group(1)))


def _normalize_message(text: str) -> NormalizedError:
    if _JSON_DESERIALIZE_MARKER in text:
        # Server-side deserialization detail is not for end users
        return NormalizedError(status=400, message=INVALID_DATA_MESSAGE)
    if PASSWORD_MISMATCH_MESSAGE in text:
        return NormalizedError(status=400, message=PASSWORD_MISMATCH_MESSAGE)
    if _HTTP_ERROR_MARKER in text:
        return _normalize_http_error(text)
    return NormalizedError(status=400, message=text)


def normalize(err: object) -> NormalizedError:
    """Normalize any thrown or rejected value. Never raises.

    Examples::

        >>> normalize(ApiError(403, "Forbidden"))
        NormalizedError(status=403, message='Forbidden', location=None)
        >>> normalize(FetchError('HTTP error! status: 404 message: {"message":"Not found"}'))
        NormalizedError(status=404, message='Not found', location=None)
        >>> normalize("boom")
        NormalizedError(status=500, message='An unexpected error occured.', location=None)

    Apply once per raw failure; normalizing a ``NormalizedError`` again
    is not supported.
    """
    match classify(err):
        case Structured(status=status, message=message):
            return NormalizedError(status=status, message=message)
        case StructuredWithLocation(status=status, message=message, location=location):
            return NormalizedError(status=status, message=message, location=location)
        case GenericWithMessage(message=message):
            return _normalize_message(message)
        case Opaque():
            return NormalizedError(status=500, message=UNEXPECTED_MESSAGE)
