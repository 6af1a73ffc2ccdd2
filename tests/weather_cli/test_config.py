"""Tests for environment-driven configuration."""

from __future__ import annotations

from pathlib import Path

from weather_cli.config import DEFAULT_SETTINGS_FILE, AppConfig


class TestAppConfig:
    def test_defaults(self, monkeypatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        config = AppConfig()
        assert config.settings_path == Path(DEFAULT_SETTINGS_FILE)
        assert config.base_url == "https://api.openweathermap.org/data/2.5"
        assert config.timeout is None
        assert config.welcome_delay == 2.0
        assert config.action_pause == 2.0

    def test_env_overrides(self, monkeypatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("WEATHER_CLI_SETTINGS_PATH", str(tmp_path / "s.json"))
        monkeypatch.setenv("WEATHER_CLI_TIMEOUT", "7.5")
        monkeypatch.setenv("WEATHER_CLI_ACTION_PAUSE", "0")
        config = AppConfig()
        assert config.settings_path == tmp_path / "s.json"
        assert config.timeout == 7.5
        assert config.action_pause == 0.0

    def test_dotenv_file(self, monkeypatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("WEATHER_CLI_WELCOME_DELAY=0.25\n", encoding="utf-8")
        assert AppConfig().welcome_delay == 0.25

    def test_settings_path_resolved_once(self, monkeypatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        resolved = AppConfig().resolved_settings_path()
        assert resolved.is_absolute()
        assert resolved == (tmp_path / DEFAULT_SETTINGS_FILE).resolve()
