"""Tests for circulate.cli — CLI entrypoint and argument parsing."""

import json

import pytest

from circulate.cli import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PROTECTED_ROUTES", "AUTH_ROUTES", "PUBLIC_PREFIXES", "ROOT_PATH",
                 "DEFAULT_REDIRECT", "LOGIN_PATH", "SECRET_KEY", "REDIRECT_STATUS"):
        monkeypatch.delenv(f"CIRCULATE_{name}", raising=False)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "decide" in capsys.readouterr().out


class TestCLIMissingArgs:
    def test_decide_missing_path(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["decide"])
        assert exc_info.value.code == 2


class TestDecide:
    def test_redirect(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["decide", "/profile"])
        assert capsys.readouterr().out.strip() == "redirect /login"

    def test_allow(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["decide", "/profile", "--authenticated"])
        assert capsys.readouterr().out.strip() == "allow"

    def test_env_table(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CIRCULATE_DEFAULT_REDIRECT", "/receive")
        main(["decide", "/", "--authenticated"])
        assert capsys.readouterr().out.strip() == "redirect /receive"

    def test_bad_env_exits_one(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CIRCULATE_PROTECTED_ROUTES", "/login")
        with pytest.raises(SystemExit) as exc_info:
            main(["decide", "/login"])
        assert exc_info.value.code == 1
        assert "auth-only and protected" in capsys.readouterr().err

    def test_non_redirect_status_exits_one(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CIRCULATE_REDIRECT_STATUS", "200")
        with pytest.raises(SystemExit) as exc_info:
            main(["decide", "/profile"])
        assert exc_info.value.code == 1
        assert "redirect_status must be one of" in capsys.readouterr().err


class TestNormalize:
    def test_http_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["normalize", 'HTTP error! status: 404 message: {"message":"Not found"}'])
        assert json.loads(capsys.readouterr().out) == {"status": 404, "message": "Not found"}

    def test_plain_message(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["normalize", "Disk full"])
        assert json.loads(capsys.readouterr().out) == {"status": 400, "message": "Disk full"}


class TestRoutes:
    def test_lists_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes"])
        out = capsys.readouterr().out
        assert "protected     /upload/new" in out
        assert "public        /api/auth*" in out
        assert "landing       /upload" in out
