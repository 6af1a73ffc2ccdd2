"""Basic usage examples for the weather client, without the interactive menu."""

import os

from weather_cli import Settings, WeatherClient, WeatherError
from weather_cli.formatters import wind_direction_label
from weather_cli.render import render_detailed, render_simple


def main() -> None:
    settings = Settings(
        location=os.environ.get("WEATHER_LOCATION", "London, GB"),
        api_key=os.environ.get("OPENWEATHER_API_KEY", ""),
    )
    if not settings.is_complete:
        print("Set OPENWEATHER_API_KEY (and optionally WEATHER_LOCATION) first.")
        return

    with WeatherClient() as client:
        try:
            reading = client.fetch_current(settings)
        except WeatherError as exc:
            print(f"  Lookup failed: {exc}")
            return

    print("=== Simple ===")
    print(render_simple(reading))

    print("\n=== Detailed ===")
    print(render_detailed(reading))

    print("\n=== Wind ===")
    direction = wind_direction_label(reading.wind_degrees)
    print(f"  {reading.wind_speed_ms} m/s from {direction} ({reading.wind_degrees}°)")


if __name__ == "__main__":
    main()
