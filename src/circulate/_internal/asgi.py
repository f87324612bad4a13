"""Typed ASGI definitions.

Raw ASGI callable types, plus the two messages the gate sends when it
answers a request itself. Users never see these.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})
# Temporary redirect that keeps the request method
DEFAULT_REDIRECT_STATUS = 307


async def send_redirect(send: Send, location: str, status: int = DEFAULT_REDIRECT_STATUS) -> None:
    """Answer with an empty-bodied redirect to *location*."""
    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": [
                (b"location", location.encode("latin-1")),
                (b"content-length", b"0"),
            ],
        }
    )
    await send({"type": "http.response.body", "body": b"", "more_body": False})
