"""Weather CLI data models."""

from weather_cli.models.settings import Settings
from weather_cli.models.weather import CurrentWeatherResponse, WeatherReading

__all__ = [
    "CurrentWeatherResponse",
    "Settings",
    "WeatherReading",
]
