"""Circulate — session-gated routing and error normalization.

Decides, for every request, whether a browser may proceed or must be
redirected, and turns any failure into ``{status, message, location?}``
for display.

Gating an ASGI app::

    from circulate import GateConfig, GateMiddleware

    app = GateMiddleware.from_config(app, GateConfig.from_env())

Normalizing a failure::

    from circulate import normalize

    try:
        await api.request_json("POST", "/users/me/password", json=payload)
    except Exception as exc:
        error = normalize(exc)
        flash(error.message)
"""

__version__ = "0.1.0"
__all__ = [
    "ALLOW",
    "Allow",
    "ApiClient",
    "ApiError",
    "CirculateError",
    "ConfigurationError",
    "FetchError",
    "GateConfig",
    "GateMiddleware",
    "NormalizedError",
    "Redirect",
    "RedirectError",
    "Request",
    "RouteGate",
    "RouteTable",
    "SessionConfig",
    "SignedSessionSignal",
    "StaticSignal",
    "classify",
    "decide",
    "exchange_credentials",
    "normalize",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import circulate`` cheap; ``httpx`` and ``itsdangerous`` load
    only when their features are used.
    """
    if name in ("ALLOW", "Allow", "Redirect", "RouteGate", "RouteTable", "decide"):
        from circulate import routing as _routing

        return getattr(_routing, name)

    if name in ("NormalizedError", "classify", "normalize"):
        from circulate import normalizer as _normalizer

        return getattr(_normalizer, name)

    if name in ("ApiError", "CirculateError", "ConfigurationError", "FetchError", "RedirectError"):
        from circulate import errors as _errors

        return getattr(_errors, name)

    if name in ("GateMiddleware", "SessionConfig", "SignedSessionSignal", "StaticSignal"):
        from circulate import middleware as _mw

        return getattr(_mw, name)

    if name in ("ApiClient", "exchange_credentials"):
        from circulate import client as _client

        return getattr(_client, name)

    if name == "GateConfig":
        from circulate.config import GateConfig

        return GateConfig

    if name == "Request":
        from circulate.http.request import Request

        return Request

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
