"""Entry point: ``python -m weather_cli`` or the ``weather-cli`` script."""

from __future__ import annotations

import locale
import logging
import sys

from weather_cli._logging import setup_logging
from weather_cli.client import WeatherClient
from weather_cli.config import AppConfig
from weather_cli.console import Console
from weather_cli.prompts import QuestionaryPrompter
from weather_cli.shell import WeatherShell
from weather_cli.store import SettingsStore

logger = logging.getLogger("weather_cli")


def main() -> int:
    config = AppConfig()
    setup_logging(config.log_file)

    try:
        # Sunrise and sunset use the user's time format
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as exc:
        logger.warning("Keeping default time format: %s", exc)

    settings_path = config.resolved_settings_path()
    logger.info("Starting weather CLI with settings at %s", settings_path)

    console = Console()
    console.banner(config.welcome_delay)

    with WeatherClient(base_url=config.base_url, timeout=config.timeout) as client:
        shell = WeatherShell(
            store=SettingsStore(settings_path),
            client=client,
            prompter=QuestionaryPrompter(),
            console=console,
            action_pause=config.action_pause,
        )
        return shell.run()


if __name__ == "__main__":
    sys.exit(main())
