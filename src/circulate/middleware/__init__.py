"""Middleware — gate requests on session state.

    GateMiddleware -- ASGI wrapper applying a RouteGate to every HTTP request
    SignedSessionSignal -- Access-token check over a signed session cookie
    StaticSignal -- Fixed authentication answer
"""

from circulate.middleware.gate import GateMiddleware
from circulate.middleware.sessions import (
    SessionConfig,
    SessionSignal,
    SignedSessionSignal,
    StaticSignal,
    issue_session,
)

__all__ = [
    "GateMiddleware",
    "SessionConfig",
    "SessionSignal",
    "SignedSessionSignal",
    "StaticSignal",
    "issue_session",
]
