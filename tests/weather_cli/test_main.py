"""Tests for the command-line entry point."""

from __future__ import annotations

import locale

import pytest

import weather_cli.__main__ as entry
from weather_cli.shell import MenuChoice


class _ExitPrompter:
    def select(self, message: str, choices: list[str]) -> str | None:
        return MenuChoice.EXIT.value


@pytest.fixture
def quiet_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("WEATHER_CLI_WELCOME_DELAY", "0")
    monkeypatch.setenv("WEATHER_CLI_LOG_FILE", str(tmp_path / "weather.log"))
    monkeypatch.setattr(entry, "QuestionaryPrompter", _ExitPrompter)
    return tmp_path


class TestMain:
    def test_exit_status(self, quiet_env, monkeypatch, capsys) -> None:
        monkeypatch.setattr(entry.locale, "setlocale", lambda category, name: "C")

        assert entry.main() == 0
        assert "Goodbye!" in capsys.readouterr().out
        assert (quiet_env / "weather.log").exists()

    def test_uses_user_time_locale(self, quiet_env, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(
            entry.locale, "setlocale", lambda category, name: calls.append((category, name))
        )

        entry.main()
        assert calls == [(locale.LC_TIME, "")]

    def test_unsupported_locale_is_not_fatal(self, quiet_env, monkeypatch) -> None:
        def unsupported(category, name):
            raise locale.Error("unsupported locale setting")

        monkeypatch.setattr(entry.locale, "setlocale", unsupported)

        assert entry.main() == 0
        assert "Keeping default time format" in (quiet_env / "weather.log").read_text()
