"""Thin async client for the remote account API.

Failures are flattened into ``FetchError`` text that ``normalize()``
knows how to read:

- non-2xx responses: ``HTTP error! status: <code> message: <body>``
- 2xx responses whose body is not JSON: ``Json deserialize error: ...``

Usage::

    from circulate.client import ApiClient, exchange_credentials

    async with ApiClient("https://api.example.com") as api:
        token = await exchange_credentials(api, "a@b.co", "secret")
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from circulate.errors import FetchError

logger = logging.getLogger("circulate.client")


class ApiClient:
    """JSON-over-HTTP wrapper around ``httpx.AsyncClient``.

    A client passed in is borrowed and never closed here; one created
    internally is closed by ``aclose()`` or on ``async with`` exit.
    """

    __slots__ = ("_base_url", "_client", "_owns_client", "_timeout", "_token")

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def with_token(self, token: str | None) -> ApiClient:
        """Return a client sharing this connection pool with another token."""
        return ApiClient(
            self._base_url, token=token, client=self._client, timeout=self._timeout
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Returns ``None`` for an empty 2xx body.

        Raises:
            FetchError: On a non-2xx status or an undecodable body.
        """
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        response = await self._client.request(
            method,
            self._url(path),
            json=json,
            params=params,
            headers=headers,
            timeout=self._timeout,
        )

        if not response.is_success:
            logger.debug("%s %s failed with %d", method, path, response.status_code)
            raise FetchError.from_response(response.status_code, response.text)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            msg = f"Json deserialize error: {exc}"
            raise FetchError(msg, status=response.status_code) from exc


async def exchange_credentials(api: ApiClient, email: str, password: str) -> str | None:
    """Trade an email and password for an access token.

    Returns ``None`` when the API rejects the credentials or answers
    without a token. Transport failures propagate.
    """
    try:
        data = await api.request_json(
            "POST", "/auth/login", json={"email": email, "password": password}
        )
    except FetchError as exc:
        logger.info("Credential exchange rejected: %s", exc)
        return None

    token = data.get("token") if isinstance(data, dict) else None
    if isinstance(token, str) and token:
        return token
    return None
