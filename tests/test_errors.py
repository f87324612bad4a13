"""Tests for circulate.errors — exception hierarchy and error messages."""

import pytest

from circulate.errors import (
    ApiError,
    CirculateError,
    ConfigurationError,
    FetchError,
    RedirectError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls", [ApiError, ConfigurationError, FetchError, RedirectError]
    )
    def test_is_circulate_error(self, cls: type) -> None:
        assert issubclass(cls, CirculateError)


class TestApiError:
    def test_status_and_message(self) -> None:
        err = ApiError(status=400, message="Name is required")
        assert err.status == 400
        assert err.message == "Name is required"

    def test_str(self) -> None:
        assert str(ApiError(403, "Forbidden")) == "403: Forbidden"

    def test_frozen(self) -> None:
        err = ApiError(400, "Bad")
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]

    def test_raisable(self) -> None:
        with pytest.raises(ApiError) as exc_info:
            raise ApiError(409, "User with this email already exists")
        assert exc_info.value.status == 409


class TestRedirectError:
    def test_fields(self) -> None:
        err = RedirectError(401, "Session expired", "/login")
        assert (err.status, err.message, err.location) == (401, "Session expired", "/login")

    def test_str(self) -> None:
        assert str(RedirectError(401, "Session expired", "/login")) == "401: Session expired -> /login"


class TestFetchError:
    def test_from_response_format(self) -> None:
        err = FetchError.from_response(500, '{"message":"boom"}')
        assert str(err) == 'HTTP error! status: 500 message: {"message":"boom"}'
        assert err.status_code == 500

    def test_plain_message(self) -> None:
        err = FetchError("Json deserialize error: bad")
        assert str(err) == "Json deserialize error: bad"
        assert err.status_code is None
