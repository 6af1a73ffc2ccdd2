"""weather_cli — Current weather in the terminal, from OpenWeatherMap."""

from weather_cli.client import WeatherClient
from weather_cli.exceptions import (
    WeatherAPIError,
    WeatherConnectionError,
    WeatherError,
    WeatherFetchError,
    WeatherTimeoutError,
    WeatherValidationError,
)
from weather_cli.models import Settings, WeatherReading
from weather_cli.store import SettingsStore

__all__ = [
    "Settings",
    "SettingsStore",
    "WeatherAPIError",
    "WeatherClient",
    "WeatherConnectionError",
    "WeatherError",
    "WeatherFetchError",
    "WeatherReading",
    "WeatherTimeoutError",
    "WeatherValidationError",
]

__version__ = "0.1.0"
