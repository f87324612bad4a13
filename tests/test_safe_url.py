"""Tests for is_safe_url — redirect targets stay on the same origin."""

import pytest

from circulate.security.urls import is_safe_url


class TestIsSafeUrl:
    @pytest.mark.parametrize(
        "url", ["/", "/upload", "/upload/new", "/login?next=/profile", "/page#section"]
    )
    def test_safe(self, url: str) -> None:
        assert is_safe_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "upload",
            "//evil.com",
            "https://evil.com",
            "/redirect?to=https://evil.com",
            "/\\evil.com",
        ],
    )
    def test_unsafe(self, url: str) -> None:
        assert is_safe_url(url) is False

    def test_none_value(self) -> None:
        assert is_safe_url(None) is False  # type: ignore[arg-type]
