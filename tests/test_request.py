"""Tests for circulate.http.request — Request.from_asgi."""

import pytest

from circulate.http.request import Request


def _scope(**overrides) -> dict:
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/profile",
        "query_string": b"tab=password",
        "headers": [
            (b"Host", b"example.com"),
            (b"Cookie", b"circulate_session=abc.def; theme=dark"),
            (b"X-Forwarded-For", b"10.0.0.1"),
            (b"x-forwarded-for", b"10.0.0.2"),
        ],
    }
    scope.update(overrides)
    return scope


class TestFromAsgi:
    def test_method_and_path(self) -> None:
        request = Request.from_asgi(_scope())
        assert request.method == "POST"
        assert request.path == "/profile"

    def test_headers_lower_cased_first_wins(self) -> None:
        request = Request.from_asgi(_scope())
        assert request.headers["host"] == "example.com"
        assert request.headers["x-forwarded-for"] == "10.0.0.1"

    def test_cookies_parsed(self) -> None:
        request = Request.from_asgi(_scope())
        assert request.cookies == {"circulate_session": "abc.def", "theme": "dark"}

    def test_no_headers(self) -> None:
        request = Request.from_asgi({"type": "http", "path": "/"})
        assert request.method == "GET"
        assert dict(request.headers) == {}
        assert dict(request.cookies) == {}

    def test_mappings_read_only(self) -> None:
        request = Request.from_asgi(_scope())
        with pytest.raises(TypeError):
            request.cookies["theme"] = "light"  # type: ignore[index]

    def test_frozen(self) -> None:
        request = Request.from_asgi(_scope())
        with pytest.raises(AttributeError):
            request.path = "/other"  # type: ignore[misc]
