"""Session signals — "is there a valid access token for this request?".

The gate never inspects tokens itself. It asks a ``SessionSignal``, any
object with ``is_authenticated(request) -> bool``. Absence of a valid
session is ``False``, never an exception.

``SignedSessionSignal`` reads a JSON session cookie signed with
``itsdangerous`` and looks for a non-empty access token in it::

    from circulate.middleware.sessions import SessionConfig, SignedSessionSignal

    signal = SignedSessionSignal(SessionConfig(secret_key="..."))
    signal.is_authenticated(request)
"""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from itsdangerous import BadData, URLSafeTimedSerializer

from circulate.errors import ConfigurationError
from circulate.http.request import Request


@runtime_checkable
class SessionSignal(Protocol):
    """Anything that can tell whether a request carries a valid session."""

    def is_authenticated(self, request: Request) -> bool: ...


@dataclass(frozen=True, slots=True)
class StaticSignal:
    """A signal with a fixed answer. Handy for tests and the CLI."""

    authenticated: bool = False

    def is_authenticated(self, request: Request) -> bool:
        return self.authenticated


# -- Configuration --


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Signed session cookie configuration.

    ``secret_key`` is required — sessions are signed, not encrypted.
    """

    secret_key: str
    cookie_name: str = "circulate_session"
    max_age: int = 86400  # 24 hours
    access_token_key: str = "access_token"
    salt: str = "circulate.session"


def _serializer(config: SessionConfig) -> URLSafeTimedSerializer:
    if not config.secret_key:
        msg = "SessionConfig.secret_key must not be empty."
        raise ConfigurationError(msg)

    return URLSafeTimedSerializer(config.secret_key, salt=config.salt)


def issue_session(config: SessionConfig, access_token: str, **extra: Any) -> str:
    """Sign a session payload carrying *access_token*.

    Returns the cookie value. Called by the login flow after a
    successful credential exchange.
    """
    payload = {**extra, config.access_token_key: access_token}
    return _serializer(config).dumps(payload)


class SignedSessionSignal:
    """Authenticated when the signed session holds a non-empty access token."""

    __slots__ = ("_config", "_serializer")

    def __init__(self, config: SessionConfig) -> None:
        self._config = config
        self._serializer = _serializer(config)

    def load_session(self, request: Request) -> dict[str, Any]:
        """Deserialize and verify the session cookie.

        Missing, tampered, expired, or non-dict sessions load as ``{}``.
        """
        cookie_value = request.cookies.get(self._config.cookie_name)
        if not cookie_value:
            return {}

        try:
            data = self._serializer.loads(cookie_value, max_age=self._config.max_age)
        except BadData:
            return {}

        if not isinstance(data, dict):
            return {}
        return data

    def is_authenticated(self, request: Request) -> bool:
        token = self.load_session(request).get(self._config.access_token_key)
        return isinstance(token, str) and bool(token)
