"""Application configuration loaded from the environment."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_cli._http import DEFAULT_BASE_URL
from weather_cli._logging import DEFAULT_LOG_FILE

DEFAULT_SETTINGS_FILE = "weather-cli-config.json"


class AppConfig(BaseSettings):
    """Startup configuration.

    Read from ``WEATHER_CLI_*`` environment variables and an optional
    ``.env`` file. The settings path is resolved once here and handed to the
    store, so nothing downstream depends on the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_CLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    settings_path: Path = Path(DEFAULT_SETTINGS_FILE)
    base_url: str = DEFAULT_BASE_URL
    # None keeps httpx's own default
    timeout: float | None = None
    welcome_delay: float = 2.0
    action_pause: float = 2.0
    log_file: Path = DEFAULT_LOG_FILE

    def resolved_settings_path(self) -> Path:
        return self.settings_path.expanduser().resolve()
