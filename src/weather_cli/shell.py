"""Interactive menu loop."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from weather_cli.client import WeatherClient
from weather_cli.console import Console
from weather_cli.exceptions import WeatherAPIError, WeatherFetchError
from weather_cli.models.weather import WeatherReading
from weather_cli.prompts import Prompter
from weather_cli.render import render_detailed, render_simple
from weather_cli.store import SettingsStore, configure

logger = logging.getLogger(__name__)

CONFIGURE_FIRST = "Please configure your settings first."


class MenuChoice(StrEnum):
    SIMPLE = "Check the Weather (Simple)"
    ADVANCED = "Check the Weather (Advanced)"
    CONFIGURE = "Configure Settings"
    EXIT = "Exit"


class WeatherShell:
    """Menu state machine: show the menu, run one action, repeat until Exit."""

    def __init__(
        self,
        store: SettingsStore,
        client: WeatherClient,
        prompter: Prompter,
        console: Console,
        action_pause: float = 2.0,
    ) -> None:
        self.store = store
        self.client = client
        self.prompter = prompter
        self.console = console
        self.action_pause = action_pause

    def run(self) -> int:
        """Loop until the user exits. Returns the process exit status."""
        while True:
            answer = self.prompter.select(
                "What would you like to do?",
                [choice.value for choice in MenuChoice],
            )
            # A cancelled prompt leaves the same way Exit does
            if answer is None or answer == MenuChoice.EXIT:
                self.console.info("Goodbye!")
                return 0

            self.dispatch(MenuChoice(answer))
            self.console.pause(self.action_pause)

    def dispatch(self, choice: MenuChoice) -> None:
        if choice is MenuChoice.SIMPLE:
            self.check_weather(render_simple)
        elif choice is MenuChoice.ADVANCED:
            self.check_weather(render_detailed)
        elif choice is MenuChoice.CONFIGURE:
            self.configure_settings()

    def check_weather(self, render: Callable[[WeatherReading], str]) -> bool:
        """Fetch and display the weather. Returns True if a reading was shown."""
        settings = self.store.load()
        if not settings.is_complete:
            self.console.warning(CONFIGURE_FIRST)
            return False

        try:
            with self.console.spinner(f"Fetching weather for {settings.location}..."):
                reading = self.client.fetch_current(settings)
        except WeatherAPIError as exc:
            self.console.error(f"Error: {exc.message}")
            return False
        except WeatherFetchError as exc:
            self.console.error(f"Failed to fetch weather data: {exc.message}")
            return False

        self.console.success("Weather data fetched successfully!")
        self.console.show(render(reading))
        return True

    def configure_settings(self) -> None:
        try:
            settings = configure(self.store, self.prompter)
        except OSError as exc:
            logger.error("Could not save settings to %s: %s", self.store.path, exc)
            self.console.error(f"Could not save settings: {exc}")
            return
        self.console.success(f"Settings saved for {settings.location or 'no location'}.")
