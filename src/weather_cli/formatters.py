"""Unit conversions and display helpers for weather readings."""

from __future__ import annotations

import math
from datetime import datetime, tzinfo

WEATHER_ICONS: dict[str, str] = {
    "01": "☀️",  # clear sky
    "02": "🌤️",  # partly cloudy
    "03": "☁️",  # cloudy
    "04": "🌥️",  # overcast
    "09": "🌧️",  # showers
    "10": "🌦️",  # rain
    "11": "⛈️",  # thunderstorm
    "13": "❄️",  # snow
    "50": "🌫️",  # mist
}
FALLBACK_ICON = "🌈"

COMPASS_POINTS: tuple[str, ...] = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)
SECTOR_DEGREES = 360 / len(COMPASS_POINTS)


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def ms_to_kmh(speed: float) -> float:
    return speed * 3.6


def meters_to_km(meters: float) -> float:
    return meters / 1000


def icon_for(icon_code: str) -> str:
    """Map a provider icon code such as ``"10n"`` to a glyph.

    Only the two-digit prefix matters; the day/night suffix is ignored.
    """
    return WEATHER_ICONS.get(icon_code[:2], FALLBACK_ICON)


def wind_direction_label(degrees: float) -> str:
    """Return the 16-point compass label for a wind bearing in degrees."""
    # Halves round up, so 11.25 is already NNE
    index = math.floor(degrees / SECTOR_DEGREES + 0.5) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def format_clock(epoch: int, tz: tzinfo | None = None) -> str:
    """Format epoch seconds as a locale time of day, in local time unless ``tz`` is given."""
    if tz is None:
        moment = datetime.fromtimestamp(epoch).astimezone()
    else:
        moment = datetime.fromtimestamp(epoch, tz=tz)
    return moment.strftime("%X")


def format_temperature(celsius: float) -> str:
    """Format as a Celsius / Fahrenheit pair, e.g. ``21.5°C / 70.7°F``."""
    return f"{celsius:.1f}°C / {celsius_to_fahrenheit(celsius):.1f}°F"
