"""RouteGate — the allow/redirect decision for a single request.

Pure and synchronous: the gate only looks at the path and the caller's
authentication state. Performing the redirect is the host's job (see
``circulate.middleware.gate.GateMiddleware``).

Precedence, highest first:

1. Root path: always redirects (login or the authenticated landing page).
2. Protected path without a session: redirect to login.
3. Public prefix: allow, skipping the auth-only check.
4. Auth-only path: redirect authenticated users away, allow the rest.
5. Anything else: allow.
"""

from dataclasses import dataclass

from circulate.routing.table import RouteTable


@dataclass(frozen=True, slots=True)
class Allow:
    """Pass the request through unchanged."""


@dataclass(frozen=True, slots=True)
class Redirect:
    """Send the caller to ``location`` instead."""

    location: str


type RoutingDecision = Allow | Redirect

ALLOW = Allow()


class RouteGate:
    """Session-gated routing policy over a static ``RouteTable``.

    Usage::

        gate = RouteGate(RouteTable(protected_routes={"/profile"}))
        gate.decide("/profile", is_authenticated=False)
        # Redirect(location="/login")
    """

    __slots__ = ("_table",)

    def __init__(self, table: RouteTable | None = None) -> None:
        self._table = table or RouteTable()

    @property
    def table(self) -> RouteTable:
        return self._table

    def decide(self, path: str, is_authenticated: bool) -> RoutingDecision:
        """Return the routing decision for *path*. Never raises."""
        table = self._table

        if table.is_root(path):
            if not is_authenticated:
                return Redirect(table.login_path)
            return Redirect(table.default_authenticated_redirect)

        if table.is_protected(path) and not is_authenticated:
            return Redirect(table.login_path)

        if table.is_public(path):
            return ALLOW

        if table.is_auth_only(path):
            if is_authenticated:
                return Redirect(table.default_authenticated_redirect)
            return ALLOW

        return ALLOW


def decide(
    path: str,
    is_authenticated: bool,
    table: RouteTable | None = None,
) -> RoutingDecision:
    """Functional form of ``RouteGate.decide`` for one-off checks."""
    return RouteGate(table).decide(path, is_authenticated)
