"""Plain-text views of a WeatherReading."""

from __future__ import annotations

from datetime import tzinfo

from weather_cli.formatters import (
    format_clock,
    format_temperature,
    icon_for,
    meters_to_km,
    ms_to_kmh,
    wind_direction_label,
)
from weather_cli.models.weather import WeatherReading


def _summary_lines(reading: WeatherReading) -> list[str]:
    return [
        f"{icon_for(reading.icon_code)}  {reading.condition_main} "
        f"({reading.condition_description})",
        f"Temperature: {format_temperature(reading.temp_c)}",
        f"Feels like:  {format_temperature(reading.feels_like_c)}",
        f"Max:         {format_temperature(reading.temp_max_c)}",
        f"Min:         {format_temperature(reading.temp_min_c)}",
        f"Humidity:    {reading.humidity_pct}%",
    ]


def render_simple(reading: WeatherReading) -> str:
    """Name, condition and temperatures. Wind, pressure and the rest are left out."""
    lines = [f"Weather in {reading.place_name}", *_summary_lines(reading)]
    return "\n".join(lines)


def render_detailed(reading: WeatherReading, tz: tzinfo | None = None) -> str:
    """The simple view plus wind, pressure, clouds, visibility, sun times and coordinates."""
    if reading.visibility_m is None:
        visibility = "n/a"
    else:
        visibility = f"{meters_to_km(reading.visibility_m):.1f} km"

    lines = [
        f"Weather in {reading.place_name}, {reading.country_code}",
        *_summary_lines(reading),
        f"Wind:        {reading.wind_speed_ms:.1f} m/s "
        f"({ms_to_kmh(reading.wind_speed_ms):.1f} km/h) "
        f"{wind_direction_label(reading.wind_degrees)}",
        f"Pressure:    {reading.pressure_hpa} hPa",
        f"Cloud cover: {reading.cloud_cover_pct}%",
        f"Visibility:  {visibility}",
        f"Sunrise:     {format_clock(reading.sunrise_epoch, tz)}",
        f"Sunset:      {format_clock(reading.sunset_epoch, tz)}",
        f"Longitude:   {reading.longitude:.4f}",
        f"Latitude:    {reading.latitude:.4f}",
    ]
    return "\n".join(lines)
