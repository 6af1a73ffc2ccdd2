"""Public client for the OpenWeatherMap current weather endpoint."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from weather_cli._http import DEFAULT_BASE_URL, SyncTransport
from weather_cli._logging import log_api_call
from weather_cli.exceptions import WeatherValidationError
from weather_cli.models.settings import Settings
from weather_cli.models.weather import CurrentWeatherResponse, WeatherReading

logger = logging.getLogger(__name__)

UNITS = "metric"


def _parse_reading(data: dict[str, Any]) -> WeatherReading:
    """Validate a decoded body and flatten it into a WeatherReading."""
    try:
        return CurrentWeatherResponse.model_validate(data).to_reading()
    except ValidationError as exc:
        raise WeatherValidationError(
            f"Failed to validate weather response: {exc}"
        ) from exc


class WeatherClient:
    """Synchronous client for current weather conditions.

    Usage:
        with WeatherClient() as client:
            reading = client.fetch_current(settings)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def fetch_current(self, settings: Settings) -> WeatherReading:
        """Get current conditions for the configured location, in metric units.

        The caller must check ``settings.is_complete`` first. A single
        attempt is made; provider errors raise ``WeatherAPIError`` and
        transport or decoding failures raise ``WeatherFetchError``.
        """
        params = {
            "q": settings.location.strip(),
            "appid": settings.api_key.strip(),
            "units": UNITS,
        }
        logger.debug("Requesting weather for %r", settings.location)
        data = self._transport.get("/weather", params)
        return _parse_reading(data)
