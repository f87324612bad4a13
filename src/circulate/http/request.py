"""Immutable request metadata seen by the gate.

Only what the gate and the session signal need: method, path, headers
and cookies. The body is never read.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from circulate._internal.asgi import Scope
from circulate.http.cookies import parse_cookies


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable view of an incoming HTTP request.

    Header names are lower-cased; the first value of a repeated header
    wins. Cookies are parsed once at creation time.
    """

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    cookies: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        headers: dict[str, str] = {}
        for raw_name, raw_value in scope.get("headers", ()):
            name = raw_name.decode("latin-1").lower()
            headers.setdefault(name, raw_value.decode("latin-1"))
        return cls(
            method=scope.get("method", "GET"),
            path=scope["path"],
            headers=MappingProxyType(headers),
            cookies=MappingProxyType(parse_cookies(headers.get("cookie", ""))),
        )
