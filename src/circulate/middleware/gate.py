"""Gate middleware — run ``RouteGate`` in front of any ASGI app.

Every HTTP request is classified before the wrapped app sees it. An
``Allow`` decision forwards the request untouched; a ``Redirect``
decision is answered directly with a 3xx and an empty body.

Usage::

    from circulate.middleware.gate import GateMiddleware
    from circulate.middleware.sessions import SessionConfig, SignedSessionSignal
    from circulate.routing import RouteGate, RouteTable

    app = GateMiddleware(
        app,
        gate=RouteGate(RouteTable()),
        signal=SignedSessionSignal(SessionConfig(secret_key="...")),
    )

Lifespan and websocket scopes pass straight through.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from circulate._internal.asgi import (
    DEFAULT_REDIRECT_STATUS,
    REDIRECT_STATUSES,
    ASGIApp,
    Receive,
    Scope,
    Send,
    send_redirect,
)
from circulate.errors import ConfigurationError
from circulate.http.request import Request
from circulate.middleware.sessions import SessionSignal, SignedSessionSignal, StaticSignal
from circulate.routing.gate import Redirect, RouteGate, RoutingDecision

if TYPE_CHECKING:
    from circulate.config import GateConfig

logger = logging.getLogger("circulate.gate")


class GateMiddleware:
    """ASGI middleware applying a ``RouteGate`` to every HTTP request."""

    __slots__ = ("_app", "_gate", "_redirect_status", "_signal")

    def __init__(
        self,
        app: ASGIApp,
        *,
        gate: RouteGate,
        signal: SessionSignal,
        redirect_status: int = DEFAULT_REDIRECT_STATUS,
    ) -> None:
        if redirect_status not in REDIRECT_STATUSES:
            msg = (
                f"GateMiddleware redirect_status must be one of "
                f"{sorted(REDIRECT_STATUSES)}, got {redirect_status}."
            )
            raise ConfigurationError(msg)
        self._app = app
        self._gate = gate
        self._signal = signal
        self._redirect_status = redirect_status

    @classmethod
    def from_config(cls, app: ASGIApp, config: GateConfig) -> GateMiddleware:
        """Wire the gate from a ``GateConfig``.

        Without a session config every caller is anonymous.
        """
        signal: SessionSignal = (
            SignedSessionSignal(config.session)
            if config.session is not None
            else StaticSignal(authenticated=False)
        )
        return cls(
            app,
            gate=RouteGate(config.routes),
            signal=signal,
            redirect_status=config.redirect_status,
        )

    def evaluate(self, request: Request) -> RoutingDecision:
        """Decide for *request* using the configured session signal."""
        return self._gate.decide(request.path, self._signal.is_authenticated(request))

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self._app(scope, receive, send)
            return

        request = Request.from_asgi(scope)
        decision = self.evaluate(request)

        if isinstance(decision, Redirect):
            logger.debug(
                "%s %s redirected to %s", request.method, request.path, decision.location
            )
            await send_redirect(send, decision.location, self._redirect_status)
            return

        await self._app(scope, receive, send)
