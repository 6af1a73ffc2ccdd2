"""Settings file persistence and the interactive configure flow."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from weather_cli.models.settings import Settings
from weather_cli.prompts import Prompter

logger = logging.getLogger(__name__)


class SettingsStore:
    """Reads and writes the JSON settings file at a fixed path."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> Settings:
        """Return the saved settings, or empty settings if the file is unusable."""
        try:
            raw = self.path.read_text(encoding="utf-8")
            return Settings.model_validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            logger.debug("No usable settings at %s: %s", self.path, exc)
            return Settings()

    def save(self, settings: Settings) -> None:
        """Overwrite the settings file. ``OSError`` propagates."""
        payload = settings.model_dump_json(by_alias=True, indent=2)
        self.path.write_text(payload + "\n", encoding="utf-8")
        logger.info("Saved settings to %s", self.path)


def configure(store: SettingsStore, prompter: Prompter) -> Settings:
    """Ask for location and API key, pre-filled with the current values, then save."""
    current = store.load()

    location = prompter.text("Enter your location:", default=current.location)
    api_key = prompter.secret("Enter your API key:", default=current.api_key)

    settings = Settings(
        location=current.location if location is None else location.strip(),
        api_key=current.api_key if api_key is None else api_key.strip(),
    )
    store.save(settings)
    return settings
