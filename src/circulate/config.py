"""Process configuration.

GateConfig is a frozen dataclass — immutable after creation, built once
at process start. ``from_env()`` reads ``CIRCULATE_*`` variables and
falls back to the ``RouteTable`` / ``SessionConfig`` defaults for
anything unset.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from circulate._internal.asgi import DEFAULT_REDIRECT_STATUS, REDIRECT_STATUSES
from circulate.errors import ConfigurationError
from circulate.middleware.sessions import SessionConfig
from circulate.routing.table import RouteTable

ENV_PREFIX = "CIRCULATE_"
DEFAULT_API_BASE_URL = "http://localhost:8000/api"


def _split(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True, slots=True)
class GateConfig:
    """Everything needed to wire the gate into an app.

    ``session`` is ``None`` when no secret key is configured; the gate
    then has no way to recognise a session and every caller is treated
    as anonymous.
    """

    routes: RouteTable = field(default_factory=RouteTable)
    session: SessionConfig | None = None
    api_base_url: str = DEFAULT_API_BASE_URL
    redirect_status: int = DEFAULT_REDIRECT_STATUS

    def __post_init__(self) -> None:
        if self.redirect_status not in REDIRECT_STATUSES:
            msg = (
                f"GateConfig.redirect_status must be one of "
                f"{sorted(REDIRECT_STATUSES)}, got {self.redirect_status}."
            )
            raise ConfigurationError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GateConfig:
        """Build a config from ``CIRCULATE_*`` environment variables.

        Recognised variables: ``SECRET_KEY``, ``SESSION_COOKIE``,
        ``API_BASE_URL``, ``REDIRECT_STATUS``, ``PROTECTED_ROUTES``,
        ``AUTH_ROUTES``, ``PUBLIC_PREFIXES`` (comma-separated),
        ``ROOT_PATH``, ``DEFAULT_REDIRECT``, ``LOGIN_PATH``.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            value = env.get(ENV_PREFIX + name)
            return value if value else None

        route_kwargs: dict[str, object] = {}
        if (value := get("PROTECTED_ROUTES")) is not None:
            route_kwargs["protected_routes"] = frozenset(_split(value))
        if (value := get("AUTH_ROUTES")) is not None:
            route_kwargs["auth_only_routes"] = frozenset(_split(value))
        if (value := get("PUBLIC_PREFIXES")) is not None:
            route_kwargs["public_prefixes"] = _split(value)
        if (value := get("ROOT_PATH")) is not None:
            route_kwargs["root_path"] = value
        if (value := get("DEFAULT_REDIRECT")) is not None:
            route_kwargs["default_authenticated_redirect"] = value
        if (value := get("LOGIN_PATH")) is not None:
            route_kwargs["login_path"] = value

        session = None
        if (secret := get("SECRET_KEY")) is not None:
            cookie_name = get("SESSION_COOKIE")
            session = (
                SessionConfig(secret_key=secret, cookie_name=cookie_name)
                if cookie_name
                else SessionConfig(secret_key=secret)
            )

        redirect_status = DEFAULT_REDIRECT_STATUS
        if (value := get("REDIRECT_STATUS")) is not None:
            try:
                redirect_status = int(value)
            except ValueError:
                msg = f"{ENV_PREFIX}REDIRECT_STATUS must be an integer, got {value!r}."
                raise ConfigurationError(msg) from None

        return cls(
            routes=RouteTable(**route_kwargs),  # type: ignore[arg-type]
            session=session,
            api_base_url=get("API_BASE_URL") or DEFAULT_API_BASE_URL,
            redirect_status=redirect_status,
        )
