"""Route classification table.

RouteTable is a frozen dataclass: built once at process start, passed
into ``RouteGate``, never mutated. Validation happens in
``__post_init__`` so an inconsistent table fails at startup rather than
misrouting requests later.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from circulate.errors import ConfigurationError
from circulate.security.urls import is_safe_url


def _frozen(paths: Iterable[str]) -> frozenset[str]:
    if isinstance(paths, str):
        # A bare string would otherwise become a set of characters
        return frozenset({paths})
    return frozenset(paths)


@dataclass(frozen=True, slots=True)
class RouteTable:
    """Static classification of request paths.

    Attributes:
        public_prefixes: Path prefixes always passed through, whatever
            the auth state (e.g. the auth-handler prefix).
        auth_only_routes: Exact paths of the login/register flow. Only
            meaningful to unauthenticated users.
        protected_routes: Exact paths that require authentication.
            Matching is exact-string; every gated path is enumerated.
        root_path: Landing path. Always redirects.
        default_authenticated_redirect: Where an authenticated user is
            sent from the root path or an auth-only path.
        login_path: Where an unauthenticated user is sent.
    """

    public_prefixes: tuple[str, ...] = ("/api/auth",)
    auth_only_routes: frozenset[str] = frozenset({"/login", "/register"})
    protected_routes: frozenset[str] = frozenset(
        {"/upload", "/upload/new", "/receive", "/profile"}
    )
    root_path: str = "/"
    default_authenticated_redirect: str = "/upload"
    login_path: str = "/login"

    def __post_init__(self) -> None:
        prefixes = (
            (self.public_prefixes,)
            if isinstance(self.public_prefixes, str)
            else tuple(self.public_prefixes)
        )
        object.__setattr__(self, "public_prefixes", prefixes)
        object.__setattr__(self, "auth_only_routes", _frozen(self.auth_only_routes))
        object.__setattr__(self, "protected_routes", _frozen(self.protected_routes))

        if "" in prefixes:
            msg = "RouteTable.public_prefixes must not contain an empty prefix."
            raise ConfigurationError(msg)

        overlap = self.auth_only_routes & self.protected_routes
        if overlap:
            msg = (
                "RouteTable: paths cannot be both auth-only and protected: "
                f"{', '.join(sorted(overlap))}"
            )
            raise ConfigurationError(msg)

        for name in ("default_authenticated_redirect", "login_path", "root_path"):
            value = getattr(self, name)
            if not is_safe_url(value):
                msg = f"RouteTable.{name} must be a same-origin path, got {value!r}."
                raise ConfigurationError(msg)
            if not value.isascii():
                # Sent verbatim in the Location header
                msg = f"RouteTable.{name} must be percent-encoded ASCII, got {value!r}."
                raise ConfigurationError(msg)

    def is_root(self, path: str) -> bool:
        return path == self.root_path

    def is_protected(self, path: str) -> bool:
        return path in self.protected_routes

    def is_public(self, path: str) -> bool:
        return path.startswith(self.public_prefixes)

    def is_auth_only(self, path: str) -> bool:
        return path in self.auth_only_routes
